"""Catalog port: read-only view of the menu as seen by the cart.

The cart never talks to the catalogue domain directly. It receives
``MenuItemRef`` snapshots taken through this port.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class MenuItemRef:
    """A menu item as offered at the moment it was read."""

    id: str
    name: str
    price: Decimal
    is_available: bool = True
    category_id: str | None = None


class MenuItemNotFoundError(Exception):
    """No menu item exists with the requested identifier."""

    def __init__(self, menu_item_id: str):
        super().__init__(f"Menu item not found: {menu_item_id}")
        self.menu_item_id = menu_item_id


class CatalogPort(ABC):
    """Abstract interface for menu catalog adapters."""

    @abstractmethod
    def get_item(self, menu_item_id: str) -> MenuItemRef:
        """Return one menu item, available or not.

        Raises:
            MenuItemNotFoundError: when the identifier is unknown.
        """
        ...

    @abstractmethod
    def list_items(self, category_id: str | None = None) -> list[MenuItemRef]:
        """Return the available menu items, ordered by name."""
        ...
