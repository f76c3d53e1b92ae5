"""Catalog management — registering goods and their initial stock."""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, Integer, String, Text
from protean.utils.globals import current_domain

from eshop.domain import eshop
from eshop.errors import plain_price
from eshop.good.good import Good

logger = structlog.get_logger(__name__)


@eshop.command(part_of="Good")
class RegisterGood:
    title = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    quantity = Integer(default=0, min_value=0)
    description = Text()


@eshop.command_handler(part_of=Good)
class CatalogueHandler:
    @handle(RegisterGood)
    def register_good(self, command):
        repo = current_domain.repository_for(Good)

        # (title, price) is how buyers address a good, so it must be unique
        if repo.find_by_title_and_price(command.title, command.price) is not None:
            label = f"{command.title} at {plain_price(command.price)} $"
            raise ValidationError({"good": [f"Good {label} is already in the catalog"]})

        good = Good.register(
            title=command.title,
            price=command.price,
            quantity=command.quantity or 0,
            description=command.description,
        )
        repo.add(good)

        logger.info(
            "Registered good",
            good_id=str(good.id),
            title=good.title,
            price=good.price,
            quantity=good.quantity,
        )
        return str(good.id)
