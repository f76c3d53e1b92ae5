"""Repository for the Good aggregate."""

from eshop.domain import eshop
from eshop.good.good import Good


@eshop.repository(part_of=Good)
class GoodRepository:
    def find_by_title_and_price(self, title: str, price: float) -> Good | None:
        """Exact-value lookup of a catalog good; None when nothing matches."""
        return self._dao.query.filter(title=title, price=float(price)).all().first
