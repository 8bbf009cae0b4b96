"""Fixtures for end-to-end storefront tests.

These tests drive the full FastAPI application: the menu comes from the
catalogue domain and orders are written to the ordering domain, the same
wiring the storefront runs with.
"""

import os

import pytest


@pytest.fixture(scope="session")
def storefront_app(request):
    """Import the application once per session (initializes both domains)."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from app import app

    return app


def _reset_domain(domain):
    with domain.domain_context():
        for _, provider in domain.providers.items():
            provider._data_reset()

        domain.event_store.store._data_reset()


@pytest.fixture(autouse=True)
def storefront_adapters(storefront_app):
    """Wire the real adapters for every test, and clean up afterwards."""
    from catalogue.domain import catalogue
    from ordering.catalog import reset_catalog, set_catalog
    from ordering.catalog.catalogue_adapter import CatalogueDomainCatalog
    from ordering.domain import ordering
    from ordering.messaging import reset_messenger, set_messenger
    from ordering.messaging.whatsapp import WhatsAppLinkAdapter
    from ordering.persistence import reset_order_store, set_order_store
    from ordering.persistence.domain_adapter import DomainOrderStore
    from ordering.session import reset_session_registry

    set_catalog(CatalogueDomainCatalog(catalogue))
    set_order_store(DomainOrderStore(ordering))
    set_messenger(WhatsAppLinkAdapter())

    yield

    reset_catalog()
    reset_order_store()
    reset_messenger()
    reset_session_registry()
    _reset_domain(catalogue)
    _reset_domain(ordering)


@pytest.fixture()
def client(storefront_app):
    from fastapi.testclient import TestClient

    return TestClient(storefront_app)


@pytest.fixture()
def demo_menu(storefront_app):
    """Seed the demo menu and return the menu item ids by pizza name."""
    from catalogue.domain import catalogue
    from catalogue.menu.browsing import available_menu
    from catalogue.menu.seed import seed_demo_menu

    with catalogue.domain_context():
        seed_demo_menu()
        return {item.name: str(item.id) for item in available_menu()}
