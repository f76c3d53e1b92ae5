"""Integration tests for order submission and Order API endpoints via TestClient."""

import pytest
from eshop.api import buyer_router, cart_router, goods_router, install_error_handlers, order_router
from fastapi import FastAPI
from fastapi.testclient import TestClient

BUYER = "asya_mogilev@yopmail.com"
DESCRIPTION = "1) Juice 2.00 $\n2) Book 5.50 $\n\nTotal: $ 7.50"


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(goods_router)
    app.include_router(cart_router)
    app.include_router(order_router)
    app.include_router(buyer_router)
    install_error_handlers(app)
    return TestClient(app)


@pytest.fixture()
def catalog(client):
    ids = {}
    for title, price in (("Juice", 2), ("Book", 5.5)):
        response = client.post(
            "/goods",
            json={
                "title": title,
                "price": price,
                "quantity": 5,
                "description": f"This is a {title.lower()}",
            },
        )
        ids[title] = response.json()["good_id"]
    return ids


def _submit_juice_and_book(client, buyer_id=BUYER):
    client.post(f"/carts/{buyer_id}/goods", json={"title": "Juice", "price": 2})
    client.post(f"/carts/{buyer_id}/goods", json={"title": "Book", "price": 5.5})
    response = client.post(f"/carts/{buyer_id}/submit")
    assert response.status_code == 201
    return response.json()


class TestSubmitEndpoint:
    def test_submit_valid_order(self, client, catalog):
        order = _submit_juice_and_book(client)

        assert order["id"]
        assert order["total_price"] == 7.50
        assert order["description"] == DESCRIPTION
        assert order["goods"][0]["id"] == catalog["Juice"]
        assert order["goods"][0]["title"] == "Juice"
        assert order["goods"][0]["price"] == 2.0
        assert order["goods"][0]["description"] == "This is a juice"
        assert order["goods"][1]["id"] == catalog["Book"]
        assert order["goods"][1]["title"] == "Book"
        assert order["goods"][1]["price"] == 5.5
        assert order["goods"][1]["description"] == "This is a book"

    def test_submit_empty_order(self, client):
        response = client.post("/carts/admin/submit")

        assert response.status_code == 400
        assert response.json()["info"] == "Your order not placed yet"

    def test_cart_is_cleared_after_submit(self, client, catalog):
        _submit_juice_and_book(client)
        assert client.get(f"/carts/{BUYER}").json() == []


class TestGetOrderEndpoint:
    def test_get_existing_order(self, client, catalog):
        order_id = _submit_juice_and_book(client)["id"]

        response = client.get(f"/orders/{order_id}")

        assert response.status_code == 200
        body = response.json()
        assert body["total_price"] == 7.50
        assert body["description"] == DESCRIPTION
        assert [good["title"] for good in body["goods"]] == ["Juice", "Book"]
        assert [good["price"] for good in body["goods"]] == [2.0, 5.5]

    def test_get_missing_order(self, client):
        response = client.get("/orders/missing-id")

        assert response.status_code == 404
        assert response.json()["info"] == "Order with id missing-id not found"


class TestListOrdersEndpoint:
    def test_admin_listing(self, client, catalog):
        first = _submit_juice_and_book(client, buyer_id="den_mogilev@yopmail.com")["id"]
        second = _submit_juice_and_book(client, buyer_id="admin")["id"]

        response = client.get("/orders", params={"sort": "buyer", "filter": "", "page_size": 25, "page_number": 1})

        assert response.status_code == 200
        assert [o["id"] for o in response.json()] == [second, first]
        assert [good["title"] for good in response.json()[0]["goods"]] == ["Juice", "Book"]

    def test_admin_listing_filter(self, client, catalog):
        _submit_juice_and_book(client, buyer_id="den_mogilev@yopmail.com")
        _submit_juice_and_book(client, buyer_id="admin")

        response = client.get("/orders", params={"filter": "mogilev"})

        assert [o["buyer_id"] for o in response.json()] == ["den_mogilev@yopmail.com"]

    def test_admin_listing_bad_sort(self, client):
        response = client.get("/orders", params={"sort": "color"})

        assert response.status_code == 400
        assert "Unknown sort key" in response.json()["info"]

    def test_buyer_history(self, client, catalog):
        mine = _submit_juice_and_book(client)["id"]
        _submit_juice_and_book(client, buyer_id="admin")

        response = client.get(f"/buyers/{BUYER}/orders")

        assert response.status_code == 200
        assert [o["id"] for o in response.json()] == [mine]
