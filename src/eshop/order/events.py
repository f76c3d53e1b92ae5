"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from eshop.domain import eshop


@eshop.event(part_of="Order")
class GoodAddedToCart:
    """Units of a catalog good were put into a buyer's pending order."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    buyer_id = String(required=True)
    good_id = Identifier(required=True)
    title = String(required=True)
    price = Float(required=True)
    quantity = Integer(required=True)
    total_price = Float(required=True)


@eshop.event(part_of="Order")
class GoodRemovedFromCart:
    """One unit of a good was taken back out of a buyer's pending order."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    buyer_id = String(required=True)
    good_id = Identifier(required=True)
    title = String(required=True)
    price = Float(required=True)
    remaining_quantity = Integer(required=True)
    total_price = Float(required=True)


@eshop.event(part_of="Order")
class OrderSubmitted:
    """A pending order was frozen into a submitted order."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    buyer_id = String(required=True)
    goods = Text(required=True)  # JSON: list of {id, title, price, quantity, description}
    goods_count = Integer(required=True)
    total_price = Float(required=True)
    description = Text(required=True)
    submitted_at = DateTime(required=True)
