"""Shared BDD fixtures and step definitions for the Fulfilment domain."""

import pytest
from fulfilment.exceptions import ConstraintViolation, InvalidArgument, NotFound
from fulfilment.warehouse.lifecycle import ArchiveWarehouse, CreateWarehouse
from fulfilment.warehouse.warehouse import Warehouse
from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then

_ERROR_KINDS = {
    "a constraint violation": ConstraintViolation,
    "an invalid argument": InvalidArgument,
    "not found": NotFound,
}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@pytest.fixture()
def run_command(error):
    """Process a command, capturing a rejection in ``error`` instead of raising."""

    def _run(command):
        try:
            return current_domain.process(command, asynchronous=False)
        except ValidationError as exc:
            error["exc"] = exc
            return None

    return _run


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse(
        'warehouse "{code}" exists at "{location}" with capacity {capacity:d} and stock {stock:d}'
    )
)
def warehouse_exists(code, location, capacity, stock):
    current_domain.process(
        CreateWarehouse(business_unit_code=code, location=location, capacity=capacity, stock=stock),
        asynchronous=False,
    )


@given(parsers.cfparse('active warehouses "{codes}" at "{location}"'))
def active_warehouses(codes, location):
    for code in codes.split(","):
        current_domain.process(
            CreateWarehouse(business_unit_code=code, location=location, capacity=10, stock=0),
            asynchronous=False,
        )


@given(parsers.cfparse('warehouse "{code}" is archived'))
def warehouse_archived(code):
    current_domain.process(ArchiveWarehouse(business_unit_code=code), asynchronous=False)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the command succeeds")
def command_succeeds(error):
    assert error["exc"] is None


@then(parsers.cfparse("the command is rejected as {kind}"))
def command_rejected(error, kind):
    assert isinstance(error["exc"], _ERROR_KINDS[kind])


@then(parsers.cfparse('warehouse "{code}" is active at "{location}"'))
def warehouse_active_at(code, location):
    warehouse = current_domain.repository_for(Warehouse).find_active_by_code(code)
    assert warehouse is not None
    assert warehouse.location == location


@then(parsers.cfparse('warehouse "{code}" is not active'))
def warehouse_not_active(code):
    assert current_domain.repository_for(Warehouse).find_active_by_code(code) is None


@then(parsers.cfparse('warehouse "{code}" has {count:d} records'))
def warehouse_record_count(code, count):
    assert len(current_domain.repository_for(Warehouse).find_by_code(code)) == count
