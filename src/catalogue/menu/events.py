"""Domain events for the MenuItem aggregate."""

from protean.fields import Boolean, DateTime, Float, Identifier, String

from catalogue.domain import catalogue


@catalogue.event(part_of="MenuItem")
class MenuItemAdded:
    """A new pizza was put on the menu."""

    __version__ = 1

    menu_item_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    category_id: Identifier()
    is_available: Boolean(required=True)
    added_at: DateTime(required=True)


@catalogue.event(part_of="MenuItem")
class MenuItemRepriced:
    """A menu item's live price changed. Placed orders keep their own price."""

    __version__ = 1

    menu_item_id: Identifier(required=True)
    previous_price: Float(required=True)
    new_price: Float(required=True)


@catalogue.event(part_of="MenuItem")
class MenuItemAvailabilityChanged:
    """A menu item was taken off or put back on sale."""

    __version__ = 1

    menu_item_id: Identifier(required=True)
    is_available: Boolean(required=True)
    changed_at: DateTime(required=True)
