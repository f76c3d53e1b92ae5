"""Repository for the Order aggregate."""

from eshop.domain import eshop
from eshop.order.order import Order, OrderStatus


@eshop.repository(part_of=Order)
class OrderRepository:
    def find_pending_for(self, buyer_id: str) -> Order | None:
        """The buyer's cart, if one is open."""
        return self._dao.query.filter(buyer_id=buyer_id, status=OrderStatus.PENDING.value).all().first
