"""Read side of the order lifecycle — single orders, admin listing, buyer history."""

import json

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from eshop.errors import OrderNotFound
from eshop.order.order import Order
from eshop.projections.order_admin_view import OrderAdminView

DEFAULT_PAGE_SIZE = 25
MAX_PAGE_SIZE = 100

SORT_FIELDS = {
    "default": "-submitted_at",
    "date": "submitted_at",
    "-date": "-submitted_at",
    "total": "total_price",
    "-total": "-total_price",
    "buyer": "buyer_id",
    "-buyer": "-buyer_id",
}


def get_order(order_id):
    try:
        order = current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        raise OrderNotFound(order_id) from None
    return order.snapshot()


def _page(query, page_size, page_number):
    if page_size < 1 or page_size > MAX_PAGE_SIZE:
        raise ValidationError({"page_size": [f"Page size must be between 1 and {MAX_PAGE_SIZE}"]})
    if page_number < 1:
        raise ValidationError({"page_number": ["Page number starts at 1"]})

    results = query.offset((page_number - 1) * page_size).limit(page_size).all()
    return [_as_dict(view) for view in results.items]


def _as_dict(view):
    return {
        "id": str(view.order_id),
        "buyer_id": view.buyer_id,
        "goods": json.loads(view.goods) if view.goods else [],
        "goods_count": view.goods_count,
        "total_price": view.total_price,
        "description": view.description,
        "submitted_at": view.submitted_at.isoformat() if view.submitted_at else None,
    }


def list_orders(sort="default", filter="", page_size=DEFAULT_PAGE_SIZE, page_number=1):  # noqa: A002
    """Submitted orders for administrators.

    ``filter`` matches any part of the buyer id, ignoring case; an empty
    filter lists everything.
    """
    if sort not in SORT_FIELDS:
        raise ValidationError({"sort": [f"Unknown sort key {sort!r}; use one of {', '.join(SORT_FIELDS)}"]})

    query = current_domain.repository_for(OrderAdminView)._dao.query
    if filter:
        query = query.filter(buyer_id__icontains=filter)

    return _page(query.order_by(SORT_FIELDS[sort]), page_size, page_number)


def order_history(buyer_id, page_size=DEFAULT_PAGE_SIZE, page_number=1):
    """A buyer's submitted orders, newest first."""
    query = current_domain.repository_for(OrderAdminView)._dao.query.filter(buyer_id=buyer_id)
    return _page(query.order_by(SORT_FIELDS["default"]), page_size, page_number)
