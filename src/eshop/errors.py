"""Business-rule failures of the cart and order lifecycle.

Each failure carries the message shown to the buyer and the status code the
HTTP layer answers with. The domain raises them without retrying; anything
else (version conflicts, provider outages) propagates untouched.
"""

from decimal import Decimal


def plain_price(price) -> str:
    """Render a price the way the buyer typed it: ``2``, ``5.5``, ``100``."""
    value = Decimal(str(price))
    if value == value.to_integral_value():
        return str(value.quantize(Decimal(1)))
    return format(value.normalize(), "f")


class ShopError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class OutOfStock(ShopError):
    """No catalog good matches, or the good has too few units left."""

    status_code = 404

    def __init__(self, title: str, price):
        super().__init__(f"Product with title {title} and price {plain_price(price)} $ out of stock")
        self.title = title
        self.price = price


class NotInCart(ShopError):
    """The good is not part of the buyer's pending order."""

    status_code = 404

    def __init__(self, title: str, price):
        super().__init__(f"Product with title {title} and price {plain_price(price)} $ is not in the cart")
        self.title = title
        self.price = price


class EmptyOrder(ShopError):
    """Submit was requested without any goods in the cart."""

    status_code = 400

    def __init__(self):
        super().__init__("Your order not placed yet")


class OrderNotFound(ShopError):
    status_code = 404

    def __init__(self, order_id):
        super().__init__(f"Order with id {order_id} not found")
        self.order_id = order_id
