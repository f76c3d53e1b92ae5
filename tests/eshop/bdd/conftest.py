"""Shared BDD fixtures and step definitions for the EShop domain."""

import pytest
from eshop.errors import ShopError
from eshop.good.catalogue import RegisterGood
from eshop.good.good import Good
from eshop.order.cart import AddGoodToCart, RemoveGoodFromCart, current_cart
from eshop.order.submission import SubmitOrder
from protean import current_domain
from pytest_bdd import given, parsers, then, when


# ---------------------------------------------------------------------------
# Scalar fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def buyer_id():
    return "buyer-001"


@pytest.fixture()
def error():
    """Container for captured business-rule failures."""
    return {"exc": None}


@pytest.fixture()
def submitted():
    """Container for the order returned by the last submit."""
    return {"order": None}


def _capture(error, command):
    try:
        return current_domain.process(command, asynchronous=False)
    except ShopError as exc:
        error["exc"] = exc
        return None


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the catalog has "{title}" at {price:f} with {stock:d} in stock'))
def catalog_has_good(title, price, stock):
    current_domain.process(
        RegisterGood(title=title, price=price, quantity=stock, description=f"This is a {title.lower()}"),
        asynchronous=False,
    )


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('the buyer adds "{title}" at {price:f}'))
def buyer_adds_good(buyer_id, title, price, error):
    _capture(error, AddGoodToCart(buyer_id=buyer_id, title=title, price=price))


@when(parsers.cfparse('the buyer removes "{title}" at {price:f}'))
def buyer_removes_good(buyer_id, title, price, error):
    _capture(error, RemoveGoodFromCart(buyer_id=buyer_id, title=title, price=price))


@when("the buyer submits the order")
def buyer_submits(buyer_id, error, submitted):
    submitted["order"] = _capture(error, SubmitOrder(buyer_id=buyer_id))


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the cart holds {count:d} good"))
def cart_holds_one(buyer_id, count):
    assert len(current_cart(buyer_id)) == count


@then(parsers.cfparse("the cart holds {count:d} goods"))
def cart_holds_n(buyer_id, count):
    assert len(current_cart(buyer_id)) == count


@then(parsers.cfparse('"{title}" at {price:f} has {stock:d} in stock'))
def good_has_stock(title, price, stock):
    good = current_domain.repository_for(Good).find_by_title_and_price(title, price)
    assert good.quantity == stock


@then(parsers.cfparse('the request fails with "{message}"'))
def request_fails(error, message):
    assert error["exc"] is not None
    assert error["exc"].message == message


@then(parsers.cfparse("the order total is {total:f}"))
def order_total(submitted, total):
    assert submitted["order"]["total_price"] == total


@then(parsers.cfparse('line {number:d} of the order description is "{text}"'))
def description_line(submitted, number, text):
    assert submitted["order"]["description"].split("\n")[number - 1] == text


@then(parsers.cfparse('the order description ends with "{text}"'))
def description_ends_with(submitted, text):
    assert submitted["order"]["description"].endswith(text)
