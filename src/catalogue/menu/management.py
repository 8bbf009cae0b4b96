"""Menu management: commands and handler."""

from protean import handle
from protean.fields import Boolean, Float, Identifier, String, Text
from protean.utils.globals import current_domain

from catalogue.category.category import Category
from catalogue.domain import catalogue
from catalogue.menu.menu_item import MenuItem


@catalogue.command(part_of="MenuItem")
class AddMenuItem:
    name: String(required=True, max_length=100)
    price: Float(required=True, min_value=0.01)
    description: Text()
    image_url: String(max_length=500)
    category_id: Identifier()
    is_available: Boolean(default=True)


@catalogue.command(part_of="MenuItem")
class ChangeMenuItemPrice:
    menu_item_id: Identifier(required=True)
    new_price: Float(required=True, min_value=0.01)


@catalogue.command(part_of="MenuItem")
class SetMenuItemAvailability:
    menu_item_id: Identifier(required=True)
    is_available: Boolean(required=True)


@catalogue.command_handler(part_of=MenuItem)
class ManageMenuHandler:
    @handle(AddMenuItem)
    def add_menu_item(self, command):
        if command.category_id:
            # Raises ObjectNotFoundError for an unknown category
            current_domain.repository_for(Category).get(command.category_id)

        item = MenuItem.create(
            name=command.name,
            price=command.price,
            description=command.description,
            image_url=command.image_url,
            category_id=command.category_id,
            is_available=command.is_available if command.is_available is not None else True,
        )
        current_domain.repository_for(MenuItem).add(item)
        return str(item.id)

    @handle(ChangeMenuItemPrice)
    def change_menu_item_price(self, command):
        repo = current_domain.repository_for(MenuItem)
        item = repo.get(command.menu_item_id)
        item.change_price(command.new_price)
        repo.add(item)

    @handle(SetMenuItemAvailability)
    def set_menu_item_availability(self, command):
        repo = current_domain.repository_for(MenuItem)
        item = repo.get(command.menu_item_id)
        item.set_availability(command.is_available)
        repo.add(item)
