import pytest
from ordering.catalog import reset_catalog, set_catalog
from ordering.catalog.fake_adapter import FakeCatalog
from ordering.messaging import reset_messenger, set_messenger
from ordering.messaging.fake_messenger import FakeMessenger
from ordering.persistence import reset_order_store, set_order_store
from ordering.persistence.fake_adapter import FakeOrderStore
from ordering.session import reset_session_registry
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def ordering_bed():
    from ordering.domain import ordering

    bed = DomainFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    with ordering_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def _reset_adapters():
    yield
    reset_catalog()
    reset_order_store()
    reset_messenger()
    reset_session_registry()


@pytest.fixture()
def catalog():
    fake = FakeCatalog()
    set_catalog(fake)
    return fake


@pytest.fixture()
def order_store():
    fake = FakeOrderStore()
    set_order_store(fake)
    return fake


@pytest.fixture()
def messenger():
    fake = FakeMessenger()
    set_messenger(fake)
    return fake


@pytest.fixture()
def margherita(catalog):
    return catalog.add("Margherita", "32.00", menu_item_id="pizza-margherita")


@pytest.fixture()
def calabresa(catalog):
    return catalog.add("Calabresa", "35.00", menu_item_id="pizza-calabresa")


@pytest.fixture()
def checkout_form():
    return {
        "name": "João da Silva",
        "phone": "(11) 98765-4321",
        "address": "Rua das Flores, 123, Centro, São Paulo",
        "notes": "Sem cebola",
        "payment_method": "instant_transfer",
    }
