"""Per-user state for the shopping journeys.

Each Locust user keeps its own buyer id and the goods it currently holds in
its cart, so removals and submissions only target what was actually added.
"""

from dataclasses import dataclass, field


@dataclass
class BuyerState:
    buyer_id: str
    cart: list[dict] = field(default_factory=list)
    order_ids: list[str] = field(default_factory=list)
