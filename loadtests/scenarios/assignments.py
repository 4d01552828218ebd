"""Fulfilment assignment load test scenarios.

A store picks from the active warehouses and assigns a handful of products.
The fan-out limits reject some of these by design; a 409 is an expected
outcome and is not counted as a failure. Every journey ends by repeating
its first assignment, which must succeed unchanged.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import product_id, store_id
from loadtests.helpers.response import extract_error_detail, is_rejection
from loadtests.helpers.state import AssignmentState


class StoreAssignmentJourney(SequentialTaskSet):
    """List warehouses -> Assign products (x4) -> Repeat first assignment."""

    def on_start(self):
        self.state = AssignmentState(store_id=store_id())

    @task
    def list_warehouses(self):
        with self.client.get("/warehouses", catch_response=True, name="GET /warehouses") as resp:
            if resp.status_code != 200:
                resp.failure(f"List failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()
                return
            self.state.warehouse_codes = [w["business_unit_code"] for w in resp.json()]
            if not self.state.warehouse_codes:
                self.interrupt()

    def _assign(self, product, warehouse_code):
        with self.client.post(
            "/assignments",
            json={"store_id": self.state.store_id, "product_id": product, "warehouse_code": warehouse_code},
            catch_response=True,
            name="POST /assignments",
        ) as resp:
            if resp.status_code == 201:
                self.state.assigned.append((product, warehouse_code))
            elif is_rejection(resp) or resp.status_code == 404:
                # Over a limit, or the warehouse was archived by another user
                resp.success()
            else:
                resp.failure(f"Assign failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task(4)
    def assign_product(self):
        self._assign(product_id(), random.choice(self.state.warehouse_codes))

    @task
    def repeat_first_assignment(self):
        if not self.state.assigned:
            self.interrupt()
            return
        product, warehouse_code = self.state.assigned[0]
        self._assign(product, warehouse_code)

    @task
    def list_store_assignments(self):
        with self.client.get(
            "/assignments",
            params={"store_id": self.state.store_id},
            catch_response=True,
            name="GET /assignments?store_id",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"List failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class AssignmentUser(HttpUser):
    """Locust user simulating stores being linked to warehouses."""

    wait_time = between(0.5, 2.0)
    tasks = [StoreAssignmentJourney]
