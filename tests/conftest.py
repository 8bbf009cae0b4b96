import os
from pathlib import Path

import pytest

LAYER_MARKERS = {
    "domain": pytest.mark.domain,
    "application": pytest.mark.application,
    "bdd": pytest.mark.application,
    "integration": pytest.mark.integration,
}


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Protean config overlay to run the suite with",
    )


def pytest_sessionstart(session):
    """Select the config overlay and default every adapter factory to its fake.

    Tests that need the real wiring install it themselves (see
    ``tests/integration/conftest.py``).
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env
    for variable in ("CATALOG_ADAPTER", "ORDER_STORE_ADAPTER", "MESSAGING_CHANNEL"):
        os.environ.setdefault(variable, "fake")


def pytest_collection_modifyitems(config, items):
    """Mark each test by the layer directory it lives in."""
    for item in items:
        layers = [part for part in Path(item.fspath).parts if part in LAYER_MARKERS]
        if not layers:
            continue

        item.add_marker(LAYER_MARKERS[layers[-1]])
        if layers[-1] == "integration" and not any(m.name == "fast" for m in item.iter_markers()):
            item.add_marker(pytest.mark.slow)
