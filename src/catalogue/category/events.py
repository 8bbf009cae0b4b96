"""Domain events for the Category aggregate."""

from protean.fields import DateTime, Identifier, Integer, String, Text

from catalogue.domain import catalogue


@catalogue.event(part_of="Category")
class CategoryCreated:
    """A new pizza category was added to the menu."""

    __version__ = 1

    category_id: Identifier(required=True)
    name: String(required=True)
    display_order: Integer(required=True)


@catalogue.event(part_of="Category")
class CategoryRenamed:
    """A category's name or description was changed."""

    __version__ = 1

    category_id: Identifier(required=True)
    name: String(required=True)
    description: Text()


@catalogue.event(part_of="Category")
class CategoryDeactivated:
    """A category was hidden from the menu filters."""

    __version__ = 1

    category_id: Identifier(required=True)
    deactivated_at: DateTime(required=True)
