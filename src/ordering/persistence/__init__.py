"""Order store factory.

Provides get_order_store() / set_order_store() to swap implementations:
- DomainOrderStore writes Order aggregates in the ordering domain (default)
- FakeOrderStore keeps orders in memory and can simulate failures

Configure via the ORDER_STORE_ADAPTER environment variable ("domain" or "fake").
"""

import os

from ordering.persistence.port import OrderStore

_current_store: OrderStore | None = None


def get_order_store() -> OrderStore:
    """Return the configured order store (singleton)."""
    global _current_store
    if _current_store is None:
        adapter = os.environ.get("ORDER_STORE_ADAPTER", "domain")
        if adapter == "domain":
            from ordering.persistence.domain_adapter import DomainOrderStore

            _current_store = DomainOrderStore()
        elif adapter == "fake":
            from ordering.persistence.fake_adapter import FakeOrderStore

            _current_store = FakeOrderStore()
        else:
            raise ValueError(f"Unknown order store adapter: {adapter}")
    return _current_store


def set_order_store(store: OrderStore) -> None:
    """Override the active order store (useful for tests)."""
    global _current_store
    _current_store = store


def reset_order_store() -> None:
    """Reset to the configured default order store."""
    global _current_store
    _current_store = None
