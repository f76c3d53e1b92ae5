"""Order aggregate (CQRS) — a buyer's cart while pending, a frozen record once submitted.

State Machine:
    (absent) → PENDING (first good added) → SUBMITTED (terminal)

While the order is pending, every add or remove recomputes the total and the
human-readable description, so both always match the current lines. Submitting
fixes them for good; a buyer's next add opens a new pending order.
"""

import json
from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, Text

from eshop.domain import eshop
from eshop.errors import EmptyOrder, NotInCart
from eshop.order.events import GoodAddedToCart, GoodRemovedFromCart, OrderSubmitted

CENTS = Decimal("0.01")


class OrderStatus(Enum):
    PENDING = "Pending"
    SUBMITTED = "Submitted"


def _money(value) -> Decimal:
    return Decimal(str(value))


def _same_price(left, right) -> bool:
    return _money(left) == _money(right)


def describe(lines, total) -> str:
    """Render the order description.

    ``1) Juice 2.00 $`` for every unit in cart order, a blank line, then
    ``Total: $ 7.50``. Two units of a good are two numbered rows.
    """
    rows = []
    for line in lines:
        price = _money(line.price).quantize(CENTS)
        rows.extend(f"{line.title} {price} $" for _ in range(line.quantity))
    rows = [f"{index}) {row}" for index, row in enumerate(rows, start=1)]

    return "\n".join(rows) + f"\n\nTotal: $ {_money(total).quantize(CENTS)}"


@eshop.entity(part_of="Order")
class CartLine:
    good_id = Identifier(required=True)
    title = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)
    description = Text()
    position = Integer(required=True, min_value=1)
    added_at = DateTime()

    def as_cart_good(self):
        return {
            "id": str(self.good_id),
            "title": self.title,
            "price": self.price,
            "quantity": self.quantity,
            "description": self.description,
        }


@eshop.aggregate
class Order:
    buyer_id = String(required=True, max_length=255)
    lines = HasMany(CartLine)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    total_price = Float(default=0.0)
    description = Text()
    created_at = DateTime()
    updated_at = DateTime()
    submitted_at = DateTime()

    @invariant.post
    def submitted_order_must_have_goods(self):
        if self.status == OrderStatus.SUBMITTED.value and not self.lines:
            raise ValidationError({"order": ["A submitted order must contain goods"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def open(cls, buyer_id):
        now = datetime.now(UTC)
        return cls(
            buyer_id=buyer_id,
            status=OrderStatus.PENDING.value,
            total_price=0.0,
            created_at=now,
            updated_at=now,
        )

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def sorted_lines(self):
        """Cart lines in the order they were first added."""
        return sorted(self.lines, key=lambda line: line.position)

    def find_line(self, title, price):
        return next(
            (line for line in self.lines if line.title == title and _same_price(line.price, price)),
            None,
        )

    def cart_goods(self):
        return [line.as_cart_good() for line in self.sorted_lines()]

    def compute_total(self) -> Decimal:
        return sum((_money(line.price) * line.quantity for line in self.lines), Decimal("0")).quantize(CENTS)

    def snapshot(self):
        return {
            "id": str(self.id),
            "buyer_id": self.buyer_id,
            "status": self.status,
            "goods": self.cart_goods(),
            "total_price": self.total_price,
            "description": self.description,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "submitted_at": self.submitted_at.isoformat() if self.submitted_at else None,
        }

    # -------------------------------------------------------------------
    # Cart mutation
    # -------------------------------------------------------------------
    def _ensure_pending(self, action):
        if OrderStatus(self.status) != OrderStatus.PENDING:
            raise ValidationError({"status": [f"Cannot {action} a submitted order"]})

    def _refresh_totals(self):
        total = self.compute_total()
        self.total_price = float(total)
        self.description = describe(self.sorted_lines(), total) if self.lines else None

    def add_good(self, good_id, title, price, quantity=1, description=None):
        """Put ``quantity`` units of a good into the cart, merging with an existing line."""
        self._ensure_pending("add goods to")

        now = datetime.now(UTC)
        existing = self.find_line(title, price)
        if existing:
            existing.quantity += quantity
        else:
            next_position = max((line.position for line in self.lines), default=0) + 1
            self.add_lines(
                CartLine(
                    good_id=good_id,
                    title=title,
                    price=price,
                    quantity=quantity,
                    description=description,
                    position=next_position,
                    added_at=now,
                )
            )

        self._refresh_totals()
        self.updated_at = now

        self.raise_(
            GoodAddedToCart(
                order_id=str(self.id),
                buyer_id=self.buyer_id,
                good_id=str(good_id),
                title=title,
                price=price,
                quantity=quantity,
                total_price=self.total_price,
            )
        )

    def remove_good(self, title, price):
        """Take one unit of a good out of the cart and return the good's id."""
        self._ensure_pending("remove goods from")

        line = self.find_line(title, price)
        if line is None:
            raise NotInCart(title, price)

        good_id = str(line.good_id)
        if line.quantity > 1:
            line.quantity -= 1
            remaining = line.quantity
        else:
            self.remove_lines(line)
            remaining = 0

        self._refresh_totals()
        self.updated_at = datetime.now(UTC)

        self.raise_(
            GoodRemovedFromCart(
                order_id=str(self.id),
                buyer_id=self.buyer_id,
                good_id=good_id,
                title=title,
                price=price,
                remaining_quantity=remaining,
                total_price=self.total_price,
            )
        )
        return good_id

    # -------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------
    def submit(self):
        """Freeze the order: final total, final description, submission time."""
        self._ensure_pending("submit")
        if not self.lines:
            raise EmptyOrder()

        self._refresh_totals()
        now = datetime.now(UTC)
        self.status = OrderStatus.SUBMITTED.value
        self.submitted_at = now
        self.updated_at = now

        goods = self.cart_goods()
        self.raise_(
            OrderSubmitted(
                order_id=str(self.id),
                buyer_id=self.buyer_id,
                goods=json.dumps(goods),
                goods_count=sum(good["quantity"] for good in goods),
                total_price=self.total_price,
                description=self.description,
                submitted_at=now,
            )
        )
