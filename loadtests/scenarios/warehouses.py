"""Warehouse lifecycle load test scenarios.

A stateful SequentialTaskSet journey: create, look up, replace and archive.
Locations have small limits, so a 409 on create or replace is an expected
outcome and ends the journey without counting as a failure.
"""

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import replacement_data, warehouse_data
from loadtests.helpers.response import extract_error_detail, is_rejection
from loadtests.helpers.state import WarehouseState


class WarehouseLifecycleJourney(SequentialTaskSet):
    """Create -> Get -> Replace -> Archive.

    Generates up to 4 events: WarehouseCreated, WarehouseArchived and
    WarehouseReplaced on replace, then WarehouseArchived.
    """

    def on_start(self):
        self.state = WarehouseState()

    @task
    def create(self):
        payload = warehouse_data()
        with self.client.post(
            "/warehouses",
            json=payload,
            catch_response=True,
            name="POST /warehouses",
        ) as resp:
            if resp.status_code == 201:
                body = resp.json()
                self.state.business_unit_code = body["business_unit_code"]
                self.state.location = body["location"]
                self.state.capacity = body["capacity"]
                self.state.stock = body["stock"]
            elif is_rejection(resp):
                resp.success()
                self.interrupt()
            else:
                resp.failure(f"Create failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def get(self):
        with self.client.get(
            f"/warehouses/{self.state.business_unit_code}",
            catch_response=True,
            name="GET /warehouses/{code}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Get failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def replace(self):
        with self.client.post(
            f"/warehouses/{self.state.business_unit_code}/replacement",
            json=replacement_data(self.state.stock),
            catch_response=True,
            name="POST /warehouses/{code}/replacement",
        ) as resp:
            if resp.status_code == 200:
                body = resp.json()
                self.state.location = body["location"]
                self.state.capacity = body["capacity"]
                self.state.replacements += 1
            elif is_rejection(resp):
                resp.success()
            else:
                resp.failure(f"Replace failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def archive(self):
        with self.client.delete(
            f"/warehouses/{self.state.business_unit_code}",
            catch_response=True,
            name="DELETE /warehouses/{code}",
        ) as resp:
            if resp.status_code != 204:
                resp.failure(f"Archive failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class WarehouseUser(HttpUser):
    """Locust user cycling warehouses through their lifecycle."""

    wait_time = between(0.5, 2.0)
    tasks = [WarehouseLifecycleJourney]
