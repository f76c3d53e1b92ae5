"""EShop Load Testing — Locust entry point.

Seeds the catalog when the test starts, then runs the shopping scenarios.

Usage:
    # All users (web UI):
    locust -f loadtests/locustfile.py --host http://localhost:8000

    # Shoppers only, headless (CI mode):
    locust -f loadtests/locustfile.py ShopperUser --headless \
           -u 50 -r 5 -t 300s --csv=results/loadtest
"""

import logging
import time

import requests
from locust import events

from loadtests.data_generators import seed_goods
from loadtests.helpers.response import extract_error_detail
from loadtests.scenarios.shopping import AdminUser, ShopperUser  # noqa: F401

logger = logging.getLogger("loadtest")


@events.request.add_listener
def on_request(request_type, name, response, exception, **_kw):
    """Log error details for every failed request."""
    if exception:
        logger.error("[EXCEPTION] %s %s: %s", request_type, name, exception)
    elif response is not None and response.status_code >= 400:
        detail = extract_error_detail(response)
        logger.error("[%s] %s %s: %s", response.status_code, request_type, name, detail)


@events.test_start.add_listener
def on_test_start(environment, **_kwargs):
    """Register the catalog goods; duplicates from an earlier run are fine."""
    print(f"\n[LOADTEST] Started at {time.strftime('%H:%M:%S')}")
    print(f"[LOADTEST] Target host: {environment.host}")
    for payload in seed_goods():
        resp = requests.post(f"{environment.host}/goods", json=payload, timeout=5)
        if resp.status_code not in (201, 400):
            logger.error("[SEED] %s: %s", payload["title"], extract_error_detail(resp))
    print()


@events.test_stop.add_listener
def on_test_stop(**_kwargs):
    print(f"\n[LOADTEST] Stopped at {time.strftime('%H:%M:%S')}\n")
