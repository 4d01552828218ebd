"""Fulfilment Load Testing: Locust entry point.

Discovers all user classes from the scenarios package.
Run specific scenarios with Locust's class selection.

Usage:
    # All scenarios (web UI):
    locust -f loadtests/locustfile.py

    # Warehouse lifecycle only:
    locust -f loadtests/locustfile.py WarehouseUser

    # Headless (CI mode):
    locust -f loadtests/locustfile.py AssignmentUser --headless \
           -u 50 -r 5 -t 300s --csv=results/loadtest
"""

import logging
import time

import requests
from locust import events

# Import all user classes so Locust discovers them
from loadtests.helpers.response import extract_error_detail
from loadtests.scenarios.assignments import AssignmentUser  # noqa: F401
from loadtests.scenarios.warehouses import WarehouseUser  # noqa: F401

logger = logging.getLogger("loadtest")


@events.request.add_listener
def on_request(request_type, name, response, exception, **_kw):
    """Log error details for every failed request.

    Limit rejections (409) are expected under load and are logged at INFO so
    they do not drown out real failures.
    """
    if exception:
        logger.error("[EXCEPTION] %s %s: %s", request_type, name, exception)
    elif response is not None and response.status_code == 409:
        logger.info("[409] %s %s: %s", request_type, name, extract_error_detail(response))
    elif response is not None and response.status_code >= 400:
        detail = extract_error_detail(response)
        logger.error("[%s] %s %s: %s", response.status_code, request_type, name, detail)


@events.test_start.add_listener
def on_test_start(environment, **_kwargs):
    """Log a marker when load test begins."""
    print(f"\n[LOADTEST] Started at {time.strftime('%H:%M:%S')}")
    print(f"[LOADTEST] Target host: {environment.host}")
    print()


@events.test_stop.add_listener
def on_test_stop(environment, **_kwargs):
    """Print the active warehouse count when the test ends."""
    print(f"\n[LOADTEST] Stopped at {time.strftime('%H:%M:%S')}")
    if not environment.host:
        return
    try:
        resp = requests.get(f"{environment.host}/warehouses", timeout=5)
        print(f"[LOADTEST] Active warehouses: {len(resp.json())}")
        resp = requests.get(f"{environment.host}/assignments", timeout=5)
        print(f"[LOADTEST] Assignments: {len(resp.json())}\n")
    except requests.RequestException as e:
        print(f"[LOADTEST] Could not fetch final counts: {e}\n")
