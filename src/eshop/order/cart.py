"""Cart management — adding and removing goods on a buyer's pending order.

Each command moves stock between a catalog Good and the buyer's pending Order.
Both aggregates are saved in the command's unit of work, so a failed check or
a concurrent version conflict leaves stock and cart exactly as they were.
"""

import structlog
from protean import handle
from protean.fields import Float, Integer, String
from protean.utils.globals import current_domain

from eshop.domain import eshop
from eshop.errors import NotInCart, OutOfStock
from eshop.good.good import Good
from eshop.order.order import Order

logger = structlog.get_logger(__name__)


@eshop.command(part_of="Order")
class AddGoodToCart:
    buyer_id = String(required=True, max_length=255)
    title = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    quantity = Integer(default=1, min_value=1)


@eshop.command(part_of="Order")
class RemoveGoodFromCart:
    buyer_id = String(required=True, max_length=255)
    title = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)


@eshop.command_handler(part_of=Order)
class ManageCartHandler:
    @handle(AddGoodToCart)
    def add_good_to_cart(self, command):
        goods = current_domain.repository_for(Good)
        orders = current_domain.repository_for(Order)
        quantity = command.quantity or 1

        good = goods.find_by_title_and_price(command.title, command.price)
        if good is None:
            logger.info("Good not in catalog", title=command.title, price=command.price)
            raise OutOfStock(command.title, command.price)

        order = orders.find_pending_for(command.buyer_id) or Order.open(command.buyer_id)

        # Stock is checked and taken before the cart changes
        good.take(quantity)
        order.add_good(
            good_id=good.id,
            title=good.title,
            price=good.price,
            quantity=quantity,
            description=good.description,
        )

        goods.add(good)
        orders.add(order)

        logger.info(
            "Good added to cart",
            buyer_id=command.buyer_id,
            order_id=str(order.id),
            good_id=str(good.id),
            quantity=quantity,
            stock_left=good.quantity,
        )
        return order.cart_goods()

    @handle(RemoveGoodFromCart)
    def remove_good_from_cart(self, command):
        goods = current_domain.repository_for(Good)
        orders = current_domain.repository_for(Order)

        order = orders.find_pending_for(command.buyer_id)
        if order is None:
            raise NotInCart(command.title, command.price)

        good_id = order.remove_good(command.title, command.price)
        good = goods.get(good_id)
        good.put_back(1)

        goods.add(good)
        orders.add(order)

        logger.info(
            "Good removed from cart",
            buyer_id=command.buyer_id,
            order_id=str(order.id),
            good_id=good_id,
            stock_left=good.quantity,
        )
        return order.cart_goods()


def current_cart(buyer_id):
    """Goods in the buyer's pending order; empty when no cart is open."""
    order = current_domain.repository_for(Order).find_pending_for(buyer_id)
    return order.cart_goods() if order else []
