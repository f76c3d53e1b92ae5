"""EShop bounded context — catalog goods, shopping carts and submitted orders.

A buyer's cart is the buyer's pending Order. Adding and removing goods moves
stock between the catalog and the cart inside one unit of work; submitting
freezes the order and opens the way for a fresh cart.
"""

import structlog
from protean.domain import Domain

from eshop.utils.logging import configure_logging

configure_logging()

eshop = Domain(name="eshop")

logger = structlog.get_logger(__name__)
