"""Catalogue tests run against the in-memory provider.

The menu is emptied after every test so browsing assertions only see the
pizzas the test itself created.
"""

import os

import pytest


def _empty_stores(domain):
    for provider in domain.providers.values():
        provider._data_reset()

    domain.event_store.store._data_reset()


@pytest.fixture(scope="session")
def catalogue_domain(request):
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from catalogue.domain import catalogue

    catalogue.init()
    return catalogue


@pytest.fixture(autouse=True)
def menu_context(catalogue_domain):
    with catalogue_domain.domain_context():
        yield
        _empty_stores(catalogue_domain)
