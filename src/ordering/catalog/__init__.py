"""Catalog adapter factory.

Provides get_catalog() / set_catalog() to swap implementations:
- CatalogueDomainCatalog reads the catalogue bounded context (default)
- FakeCatalog serves an in-memory menu for tests

Configure via the CATALOG_ADAPTER environment variable ("catalogue" or "fake").
"""

import os

from ordering.catalog.port import CatalogPort

_current_catalog: CatalogPort | None = None


def get_catalog() -> CatalogPort:
    """Return the configured catalog adapter (singleton)."""
    global _current_catalog
    if _current_catalog is None:
        adapter = os.environ.get("CATALOG_ADAPTER", "catalogue")
        if adapter == "catalogue":
            from ordering.catalog.catalogue_adapter import CatalogueDomainCatalog

            _current_catalog = CatalogueDomainCatalog()
        elif adapter == "fake":
            from ordering.catalog.fake_adapter import FakeCatalog

            _current_catalog = FakeCatalog()
        else:
            raise ValueError(f"Unknown catalog adapter: {adapter}")
    return _current_catalog


def set_catalog(catalog: CatalogPort) -> None:
    """Override the active catalog (useful for tests)."""
    global _current_catalog
    _current_catalog = catalog


def reset_catalog() -> None:
    """Reset to the configured default catalog."""
    global _current_catalog
    _current_catalog = None
