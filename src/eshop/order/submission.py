"""Order submission — turns a buyer's pending order into a submitted one."""

import structlog
from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from eshop.domain import eshop
from eshop.errors import EmptyOrder
from eshop.order.order import Order

logger = structlog.get_logger(__name__)


@eshop.command(part_of="Order")
class SubmitOrder:
    buyer_id = String(required=True, max_length=255)


@eshop.command_handler(part_of=Order)
class SubmitOrderHandler:
    @handle(SubmitOrder)
    def submit_order(self, command):
        repo = current_domain.repository_for(Order)

        order = repo.find_pending_for(command.buyer_id)
        if order is None:
            raise EmptyOrder()

        order.submit()
        repo.add(order)

        logger.info(
            "Order submitted",
            buyer_id=command.buyer_id,
            order_id=str(order.id),
            total_price=order.total_price,
        )
        return order.snapshot()
