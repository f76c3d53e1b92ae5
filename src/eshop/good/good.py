"""Good aggregate — a catalog product and its available stock.

Goods are reference data for carts: a cart line copies the title and price
of the good it was taken from, and every unit sitting in a pending cart has
been subtracted from ``quantity``.
"""

from protean.exceptions import ValidationError
from protean.fields import Float, Integer, String, Text

from eshop.domain import eshop
from eshop.errors import OutOfStock
from eshop.good.events import GoodRegistered, StockDecremented, StockIncremented


@eshop.aggregate
class Good:
    title = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    quantity = Integer(default=0, min_value=0)
    description = Text()

    @classmethod
    def register(cls, title, price, quantity=0, description=None):
        good = cls(
            title=title,
            price=price,
            quantity=quantity,
            description=description,
        )
        good.raise_(
            GoodRegistered(
                good_id=str(good.id),
                title=title,
                price=price,
                quantity=quantity,
            )
        )
        return good

    def take(self, amount=1):
        """Move ``amount`` units out of stock."""
        if amount <= 0:
            raise ValidationError({"amount": ["Amount must be positive"]})
        if amount > self.quantity:
            raise OutOfStock(self.title, self.price)

        self.quantity -= amount

        self.raise_(
            StockDecremented(
                good_id=str(self.id),
                amount=amount,
                remaining=self.quantity,
            )
        )

    def put_back(self, amount=1):
        """Return ``amount`` units to stock."""
        if amount <= 0:
            raise ValidationError({"amount": ["Amount must be positive"]})

        self.quantity += amount

        self.raise_(
            StockIncremented(
                good_id=str(self.id),
                amount=amount,
                remaining=self.quantity,
            )
        )
