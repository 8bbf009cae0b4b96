"""Catalog adapter backed by the catalogue bounded context."""

from protean.exceptions import ObjectNotFoundError

from ordering.catalog.port import CatalogPort, MenuItemNotFoundError, MenuItemRef
from ordering.shared.money import to_money


def _to_ref(item) -> MenuItemRef:
    return MenuItemRef(
        id=str(item.id),
        name=item.name,
        price=to_money(item.price),
        is_available=bool(item.is_available),
        category_id=str(item.category_id) if item.category_id else None,
    )


class CatalogueDomainCatalog(CatalogPort):
    """Reads menu items from the catalogue domain inside its own domain context."""

    def __init__(self, domain=None):
        if domain is None:
            from catalogue.domain import catalogue

            domain = catalogue
        self._domain = domain

    def get_item(self, menu_item_id: str) -> MenuItemRef:
        from catalogue.menu.browsing import find_menu_item

        with self._domain.domain_context():
            try:
                item = find_menu_item(menu_item_id)
            except ObjectNotFoundError:
                raise MenuItemNotFoundError(menu_item_id) from None
            return _to_ref(item)

    def list_items(self, category_id: str | None = None) -> list[MenuItemRef]:
        from catalogue.menu.browsing import available_menu

        with self._domain.domain_context():
            return [_to_ref(item) for item in available_menu(category_id=category_id)]
