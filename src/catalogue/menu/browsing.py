"""Menu browsing queries.

The storefront shows only available pizzas, ordered by name, optionally
narrowed to one category. Categories are listed by display order, then name.
"""

from protean.utils.globals import current_domain

from catalogue.category.category import Category
from catalogue.menu.menu_item import MenuItem


def available_menu(category_id=None) -> list[MenuItem]:
    """Return the menu items currently on sale."""
    query = current_domain.repository_for(MenuItem)._dao.query.filter(is_available=True)
    if category_id:
        query = query.filter(category_id=category_id)

    return sorted(query.all().items, key=lambda item: item.name)


def menu_categories() -> list[Category]:
    """Return the active categories used as menu filters."""
    categories = current_domain.repository_for(Category)._dao.query.filter(is_active=True).all().items
    return sorted(categories, key=lambda category: category.sort_key)


def find_menu_item(menu_item_id) -> MenuItem:
    """Load one menu item, available or not. Raises ObjectNotFoundError."""
    return current_domain.repository_for(MenuItem).get(menu_item_id)
