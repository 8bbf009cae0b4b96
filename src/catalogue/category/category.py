"""Category aggregate: the filter chips shown above the pizza list."""

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Integer, String, Text

from catalogue.category.events import CategoryCreated, CategoryDeactivated, CategoryRenamed
from catalogue.domain import catalogue
from catalogue.utils.clock import utc_now


@catalogue.aggregate
class Category:
    """A flat group of pizzas (Tradicionais, Especiais, Doces...).

    Menus list categories by ``display_order`` and then by name. A deactivated
    category disappears from the filters but its pizzas stay orderable.
    """

    name: String(required=True, max_length=100)
    description: Text()
    is_active: Boolean(default=True)
    display_order: Integer(default=0)
    created_at: DateTime(default=utc_now)
    updated_at: DateTime(default=utc_now)

    @classmethod
    def create(cls, name, description=None, display_order=0):
        category = cls(name=name, description=description, display_order=display_order)
        category.updated_at = category.created_at
        category.raise_(CategoryCreated(category_id=category.id, name=name, display_order=display_order))
        return category

    @property
    def sort_key(self):
        return (self.display_order or 0, self.name.lower())

    def _touch(self):
        self.updated_at = utc_now()
        return self.updated_at

    def rename(self, name, description=None):
        self.name = name
        self.description = description if description is not None else self.description
        self._touch()
        self.raise_(CategoryRenamed(category_id=self.id, name=self.name, description=self.description))

    def deactivate(self):
        if not self.is_active:
            raise ValidationError({"is_active": ["Category is already inactive"]})

        self.is_active = False
        self.raise_(CategoryDeactivated(category_id=self.id, deactivated_at=self._touch()))
