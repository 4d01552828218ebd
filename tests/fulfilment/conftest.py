import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def fulfilment_bed():
    from fulfilment.domain import fulfilment

    bed = DomainFixture(fulfilment)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(fulfilment_bed):
    with fulfilment_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def _location_catalog():
    from fulfilment.location import reset_location_catalog

    reset_location_catalog()
    yield
    reset_location_catalog()
