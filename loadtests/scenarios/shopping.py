"""Shopping load test scenarios.

Two stateful journeys: a buyer who fills a cart, drops one good and checks
out, and a buyer who browses and walks away. A third user class plays the
administrator paging through submitted orders.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import admin_query, buyer_id, cart_good
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import BuyerState


class _CartJourney(SequentialTaskSet):
    def on_start(self):
        self.state = BuyerState(buyer_id=buyer_id())

    def _add_good(self):
        payload = cart_good()
        with self.client.post(
            f"/carts/{self.state.buyer_id}/goods",
            json=payload,
            catch_response=True,
            name="POST /carts/{buyer}/goods",
        ) as resp:
            if resp.status_code == 200:
                self.state.cart = resp.json()
            elif resp.status_code == 404:
                # Stock ran out under load; an expected business outcome
                resp.success()
            else:
                resp.failure(f"Add good failed: {resp.status_code} — {extract_error_detail(resp)}")


class CheckoutJourney(_CartJourney):
    """Add three goods -> Remove one -> Submit -> Read the order back.

    Generates events: GoodAddedToCart (x3), GoodRemovedFromCart,
    OrderSubmitted, plus the matching stock events on Good.
    """

    @task
    def add_good_1(self):
        self._add_good()

    @task
    def add_good_2(self):
        self._add_good()

    @task
    def add_good_3(self):
        self._add_good()

    @task
    def remove_good(self):
        if not self.state.cart:
            return
        good = random.choice(self.state.cart)
        with self.client.delete(
            f"/carts/{self.state.buyer_id}/goods",
            params={"title": good["title"], "price": good["price"]},
            catch_response=True,
            name="DELETE /carts/{buyer}/goods",
        ) as resp:
            if resp.status_code == 200:
                self.state.cart = resp.json()
            else:
                resp.failure(f"Remove good failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def submit(self):
        with self.client.post(
            f"/carts/{self.state.buyer_id}/submit",
            catch_response=True,
            name="POST /carts/{buyer}/submit",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_ids.append(resp.json()["id"])
                self.state.cart = []
            elif resp.status_code == 400 and not self.state.cart:
                resp.success()
            else:
                resp.failure(f"Submit failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def read_order(self):
        if not self.state.order_ids:
            return
        order_id = self.state.order_ids[-1]
        with self.client.get(f"/orders/{order_id}", catch_response=True, name="GET /orders/{id}") as resp:
            if resp.status_code != 200:
                resp.failure(f"Read order failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def history(self):
        self.client.get(f"/buyers/{self.state.buyer_id}/orders", name="GET /buyers/{buyer}/orders")

    @task
    def done(self):
        self.interrupt()


class BrowseAndLeaveJourney(_CartJourney):
    """Add a good -> View the cart -> Take it back out. Nothing is submitted."""

    @task
    def add_good(self):
        self._add_good()

    @task
    def view_cart(self):
        self.client.get(f"/carts/{self.state.buyer_id}", name="GET /carts/{buyer}")

    @task
    def empty_cart(self):
        for good in list(self.state.cart):
            for _ in range(good["quantity"]):
                self.client.delete(
                    f"/carts/{self.state.buyer_id}/goods",
                    params={"title": good["title"], "price": good["price"]},
                    name="DELETE /carts/{buyer}/goods",
                )
        self.state.cart = []

    @task
    def done(self):
        self.interrupt()


class ShopperUser(HttpUser):
    wait_time = between(0.5, 2)
    tasks = {CheckoutJourney: 3, BrowseAndLeaveJourney: 1}


class AdminUser(HttpUser):
    """Pages through the admin listing with random sort keys and filters."""

    wait_time = between(1, 3)

    @task
    def list_orders(self):
        with self.client.get("/orders", params=admin_query(), catch_response=True, name="GET /orders") as resp:
            if resp.status_code != 200:
                resp.failure(f"List orders failed: {resp.status_code} — {extract_error_detail(resp)}")
