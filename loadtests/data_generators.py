"""Faker-based data generators for the EShop load test scenarios.

Goods are drawn from a fixed catalog so that every simulated buyer competes
for the same stock, which is what exercises the version checks on Good.
"""

import random
import uuid

from faker import Faker

fake = Faker()

CATALOG = [
    {"title": "Juice", "price": 2.0},
    {"title": "Book", "price": 5.5},
    {"title": "Lamp", "price": 24.99},
    {"title": "Mug", "price": 7.25},
    {"title": "Notebook", "price": 3.1},
]

SORT_KEYS = ["default", "date", "-date", "total", "-total", "buyer", "-buyer"]


def buyer_id() -> str:
    """Buyer ids look like 'jane.doe-a1b2' so the admin filter has something to match."""
    return f"{fake.user_name()[:20]}-{uuid.uuid4().hex[:4]}"


def seed_goods(stock: int = 100_000) -> list[dict]:
    """RegisterGoodRequest payloads for the whole catalog."""
    return [
        {
            "title": good["title"],
            "price": good["price"],
            "quantity": stock,
            "description": fake.sentence(nb_words=8),
        }
        for good in CATALOG
    ]


def cart_good() -> dict:
    """AddGoodRequest payload for a random catalog good."""
    good = random.choice(CATALOG)
    return {"title": good["title"], "price": good["price"], "quantity": random.randint(1, 3)}


def admin_query() -> dict:
    params = {
        "sort": random.choice(SORT_KEYS),
        "page_size": random.choice([10, 25, 50]),
        "page_number": 1,
    }
    if random.random() < 0.3:
        params["filter"] = fake.random_lowercase_letter()
    return params
