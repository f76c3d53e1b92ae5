"""Tests for the Good aggregate — catalog stock bookkeeping."""

import pytest
from eshop.errors import OutOfStock
from eshop.good.events import GoodRegistered, StockDecremented, StockIncremented
from eshop.good.good import Good
from protean.exceptions import ValidationError


def _make_good(quantity=3):
    return Good.register(title="Juice", price=2.0, quantity=quantity, description="This is a juice")


class TestRegister:
    def test_register_sets_fields(self):
        good = _make_good()
        assert good.title == "Juice"
        assert good.price == 2.0
        assert good.quantity == 3
        assert good.description == "This is a juice"

    def test_register_raises_event(self):
        good = _make_good()
        events = [e for e in good._events if isinstance(e, GoodRegistered)]
        assert len(events) == 1
        assert events[0].good_id == str(good.id)
        assert events[0].quantity == 3

    def test_negative_stock_is_rejected(self):
        with pytest.raises(ValidationError):
            Good(title="Juice", price=2.0, quantity=-1)


class TestTake:
    def test_take_decrements_stock(self):
        good = _make_good(quantity=3)
        good.take(2)
        assert good.quantity == 1

    def test_take_last_unit(self):
        good = _make_good(quantity=1)
        good.take()
        assert good.quantity == 0

    def test_take_raises_event(self):
        good = _make_good(quantity=3)
        good._events.clear()
        good.take(1)
        assert len(good._events) == 1
        event = good._events[0]
        assert isinstance(event, StockDecremented)
        assert event.amount == 1
        assert event.remaining == 2

    def test_take_more_than_stock_fails(self):
        good = _make_good(quantity=1)
        with pytest.raises(OutOfStock) as exc:
            good.take(2)
        assert exc.value.message == "Product with title Juice and price 2 $ out of stock"
        assert good.quantity == 1

    def test_take_from_empty_stock_fails(self):
        good = _make_good(quantity=0)
        with pytest.raises(OutOfStock):
            good.take()

    def test_take_requires_positive_amount(self):
        good = _make_good()
        with pytest.raises(ValidationError):
            good.take(0)


class TestPutBack:
    def test_put_back_increments_stock(self):
        good = _make_good(quantity=0)
        good.put_back(1)
        assert good.quantity == 1

    def test_put_back_raises_event(self):
        good = _make_good(quantity=0)
        good._events.clear()
        good.put_back(2)
        assert isinstance(good._events[0], StockIncremented)
        assert good._events[0].remaining == 2

    def test_take_then_put_back_restores_stock(self):
        good = _make_good(quantity=5)
        good.take(1)
        good.put_back(1)
        assert good.quantity == 5
