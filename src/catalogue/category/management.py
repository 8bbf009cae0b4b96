"""Category management: commands and handlers."""

from protean import handle
from protean.fields import Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from catalogue.category.category import Category
from catalogue.domain import catalogue


@catalogue.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)
    description: Text()
    display_order: Integer(default=0)


@catalogue.command(part_of="Category")
class RenameCategory:
    category_id: Identifier(required=True)
    name: String(required=True, max_length=100)
    description: Text()


@catalogue.command(part_of="Category")
class DeactivateCategory:
    category_id: Identifier(required=True)


@catalogue.command_handler(part_of=Category)
class ManageCategoryHandler:
    @property
    def categories(self):
        return current_domain.repository_for(Category)

    @handle(CreateCategory)
    def create_category(self, command):
        category = Category.create(command.name, command.description, command.display_order or 0)
        self.categories.add(category)
        return str(category.id)

    @handle(RenameCategory)
    def rename_category(self, command):
        category = self.categories.get(command.category_id)
        category.rename(command.name, description=command.description)
        self.categories.add(category)

    @handle(DeactivateCategory)
    def deactivate_category(self, command):
        category = self.categories.get(command.category_id)
        category.deactivate()
        self.categories.add(category)
