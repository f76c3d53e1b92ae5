"""Domain events for the Good aggregate."""

from protean.fields import Float, Identifier, Integer, String

from eshop.domain import eshop


@eshop.event(part_of="Good")
class GoodRegistered:
    """A good was added to the catalog with an initial stock."""

    __version__ = "v1"

    good_id = Identifier(required=True)
    title = String(required=True)
    price = Float(required=True)
    quantity = Integer(required=True)


@eshop.event(part_of="Good")
class StockDecremented:
    """Units of a good were taken into a cart."""

    __version__ = "v1"

    good_id = Identifier(required=True)
    amount = Integer(required=True)
    remaining = Integer(required=True)


@eshop.event(part_of="Good")
class StockIncremented:
    """Units of a good were handed back from a cart."""

    __version__ = "v1"

    good_id = Identifier(required=True)
    amount = Integer(required=True)
    remaining = Integer(required=True)
