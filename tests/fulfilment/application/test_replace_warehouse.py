"""Application tests for the ReplaceWarehouse command."""

import pytest
from fulfilment.exceptions import ConstraintViolation, InvalidArgument, NotFound
from fulfilment.location import Location, set_location_catalog
from fulfilment.location.fixed_adapter import LOCATIONS, FixedLocationCatalog
from fulfilment.warehouse import lifecycle
from fulfilment.warehouse.lifecycle import ArchiveWarehouse, CreateWarehouse, ReplaceWarehouse
from fulfilment.warehouse.warehouse import Warehouse
from protean import current_domain


def _create_warehouse(**overrides):
    defaults = {
        "business_unit_code": "MWH.001",
        "location": "AMSTERDAM-001",
        "capacity": 100,
        "stock": 50,
    }
    defaults.update(overrides)
    return current_domain.process(CreateWarehouse(**defaults), asynchronous=False)


def _replace_warehouse(**overrides):
    defaults = {
        "business_unit_code": "MWH.001",
        "location": "VETSBY-001",
        "capacity": 60,
        "stock": 50,
    }
    defaults.update(overrides)
    return current_domain.process(ReplaceWarehouse(**defaults), asynchronous=False)


class _FailingLogger:
    """Stands in for the handler logger and fails on the success log line."""

    def info(self, event, **kwargs):
        raise RuntimeError("log sink unavailable")


class TestReplaceWarehouse:
    def test_replace_archives_old_and_creates_successor(self):
        existing = _create_warehouse()
        successor = _replace_warehouse()

        repo = current_domain.repository_for(Warehouse)
        old = repo.get(existing.id)
        new = repo.get(successor.id)

        assert old.archived_at is not None
        assert new.archived_at is None
        assert new.business_unit_code == "MWH.001"
        assert new.location == "VETSBY-001"
        assert new.capacity == 60
        assert new.stock == 50

    def test_exactly_one_active_record_per_code(self):
        _create_warehouse()
        _replace_warehouse()

        repo = current_domain.repository_for(Warehouse)
        records = repo.find_by_code("MWH.001")
        assert len(records) == 2
        assert len([w for w in records if not w.is_archived()]) == 1

    def test_replace_twice_keeps_full_history(self):
        _create_warehouse()
        _replace_warehouse()
        _replace_warehouse(location="AMSTERDAM-002", capacity=70)

        repo = current_domain.repository_for(Warehouse)
        assert len(repo.find_by_code("MWH.001")) == 3
        assert repo.find_active_by_code("MWH.001").location == "AMSTERDAM-002"

    def test_replace_at_same_location_releases_old_slot(self):
        _create_warehouse(location="ZWOLLE-001", capacity=40, stock=20)
        successor = _replace_warehouse(location="ZWOLLE-001", capacity=40, stock=20)
        assert successor.location == "ZWOLLE-001"

    def test_replaced_capacity_is_released_at_same_location(self):
        _create_warehouse(location="EINDHOVEN-001", capacity=50, stock=20)
        _create_warehouse(business_unit_code="MWH.002", location="EINDHOVEN-001", capacity=20, stock=0)

        successor = _replace_warehouse(location="EINDHOVEN-001", capacity=50, stock=20)
        assert successor.capacity == 50


class TestReplaceStockRules:
    def test_stock_mismatch_rejected(self):
        _create_warehouse()
        with pytest.raises(ConstraintViolation) as exc:
            _replace_warehouse(stock=10)
        assert exc.value.messages == {"stock": ["New warehouse stock must match existing warehouse stock"]}

    def test_capacity_below_stock_rejected(self):
        _create_warehouse()
        with pytest.raises(InvalidArgument) as exc:
            _replace_warehouse(capacity=40)
        assert exc.value.messages == {"stock": ["Stock cannot exceed capacity"]}


class TestReplaceValidation:
    def test_code_required(self):
        with pytest.raises(InvalidArgument):
            _replace_warehouse(business_unit_code="")

    def test_unknown_code_rejected(self):
        with pytest.raises(NotFound) as exc:
            _replace_warehouse(business_unit_code="MWH.404")
        assert exc.value.messages == {
            "business_unit_code": ["Warehouse not found for business unit code: MWH.404"]
        }

    def test_archived_code_cannot_be_replaced(self):
        _create_warehouse()
        current_domain.process(ArchiveWarehouse(business_unit_code="MWH.001"), asynchronous=False)
        with pytest.raises(NotFound):
            _replace_warehouse()

    def test_unknown_location_rejected(self):
        _create_warehouse()
        with pytest.raises(NotFound) as exc:
            _replace_warehouse(location="ROTTERDAM-001")
        assert exc.value.messages == {"location": ["Invalid location: ROTTERDAM-001"]}

    def test_non_positive_capacity_rejected(self):
        _create_warehouse()
        with pytest.raises(InvalidArgument):
            _replace_warehouse(capacity=0)

    def test_full_target_location_rejected(self):
        _create_warehouse(business_unit_code="MWH.002", location="VETSBY-001", capacity=10, stock=0)
        _create_warehouse()
        with pytest.raises(ConstraintViolation) as exc:
            _replace_warehouse()
        assert "location" in exc.value.messages

    def test_target_capacity_exceeded_rejected(self):
        _create_warehouse()
        with pytest.raises(ConstraintViolation) as exc:
            _replace_warehouse(location="TILBURG-001", capacity=60)
        assert "capacity" in exc.value.messages


class TestReplaceAtomicity:
    def test_failed_replace_leaves_existing_active(self):
        existing = _create_warehouse()
        with pytest.raises(ConstraintViolation):
            _replace_warehouse(stock=10)

        repo = current_domain.repository_for(Warehouse)
        assert repo.get(existing.id).archived_at is None
        assert len(repo.find_by_code("MWH.001")) == 1

    def test_failure_after_writes_rolls_back_archive_and_successor(self, monkeypatch):
        existing = _create_warehouse()
        monkeypatch.setattr(lifecycle, "logger", _FailingLogger())

        with pytest.raises(RuntimeError):
            _replace_warehouse()

        repo = current_domain.repository_for(Warehouse)
        assert repo.get(existing.id).archived_at is None
        assert len(repo.find_by_code("MWH.001")) == 1


class TestReplaceScenario:
    """Warehouse with stock 50 and capacity 100 moved to a site with headroom."""

    @pytest.fixture(autouse=True)
    def _roomy_catalog(self):
        set_location_catalog(
            FixedLocationCatalog(locations=LOCATIONS + (Location("X", 5, 500), Location("Y", 5, 500)))
        )

    def test_replace_with_matching_stock_succeeds(self):
        _create_warehouse(location="X", capacity=100, stock=50)
        successor = _replace_warehouse(location="Y", capacity=60, stock=50)
        assert successor.location == "Y"

    def test_replace_with_stock_mismatch_fails(self):
        _create_warehouse(location="X", capacity=100, stock=50)
        with pytest.raises(ConstraintViolation):
            _replace_warehouse(location="Y", capacity=60, stock=10)

    def test_replace_with_capacity_below_stock_fails(self):
        _create_warehouse(location="X", capacity=100, stock=50)
        with pytest.raises(InvalidArgument):
            _replace_warehouse(location="Y", capacity=40, stock=50)
