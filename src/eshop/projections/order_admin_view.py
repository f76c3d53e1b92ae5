"""Order admin view — one row per submitted order for listings and history."""

from protean.core.projector import on
from protean.fields import DateTime, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from eshop.domain import eshop
from eshop.order.events import OrderSubmitted
from eshop.order.order import Order


@eshop.projection
class OrderAdminView:
    order_id = Identifier(identifier=True, required=True)
    buyer_id = String(required=True, max_length=255)
    goods = Text()  # JSON: list of {id, title, price, quantity, description}
    goods_count = Integer(default=0)
    total_price = Float()
    description = Text()
    submitted_at = DateTime()


@eshop.projector(projector_for=OrderAdminView, aggregates=[Order])
class OrderAdminViewProjector:
    @on(OrderSubmitted)
    def on_order_submitted(self, event):
        current_domain.repository_for(OrderAdminView).add(
            OrderAdminView(
                order_id=event.order_id,
                buyer_id=event.buyer_id,
                goods=event.goods,
                goods_count=event.goods_count,
                total_price=event.total_price,
                description=event.description,
                submitted_at=event.submitted_at,
            )
        )
