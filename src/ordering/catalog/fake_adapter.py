"""Fake catalog: an in-memory menu for tests."""

from decimal import Decimal
from uuid import uuid4

from ordering.catalog.port import CatalogPort, MenuItemNotFoundError, MenuItemRef
from ordering.shared.money import to_money


class FakeCatalog(CatalogPort):
    """Catalog that serves menu items registered with ``add``."""

    def __init__(self) -> None:
        self.items: dict[str, MenuItemRef] = {}

    def add(
        self,
        name: str,
        price: Decimal | float | str,
        is_available: bool = True,
        category_id: str | None = None,
        menu_item_id: str | None = None,
    ) -> MenuItemRef:
        ref = MenuItemRef(
            id=menu_item_id or f"pizza-{uuid4().hex[:8]}",
            name=name,
            price=to_money(price),
            is_available=is_available,
            category_id=category_id,
        )
        self.items[ref.id] = ref
        return ref

    def get_item(self, menu_item_id: str) -> MenuItemRef:
        try:
            return self.items[menu_item_id]
        except KeyError:
            raise MenuItemNotFoundError(menu_item_id) from None

    def list_items(self, category_id: str | None = None) -> list[MenuItemRef]:
        items = [
            item
            for item in self.items.values()
            if item.is_available and (category_id is None or item.category_id == category_id)
        ]
        return sorted(items, key=lambda item: item.name)

    def reset(self) -> None:
        self.items.clear()
