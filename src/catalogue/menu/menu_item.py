"""MenuItem aggregate: a pizza offered on the menu.

The price recorded here is the live menu price. Carts copy it when an item
is added and orders copy it again at checkout, so repricing a menu item never
changes an order that was already placed.
"""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Identifier, String, Text

from catalogue.domain import catalogue
from catalogue.utils.clock import utc_now


@catalogue.aggregate
class MenuItem:
    """A pizza on the menu, with its price and availability."""

    name: String(required=True, max_length=100)
    description: Text()
    price: Float(required=True, min_value=0.01)
    image_url: String(max_length=500)
    is_available: Boolean(default=True)
    category_id: Identifier()
    created_at: DateTime(default=utc_now)
    updated_at: DateTime(default=utc_now)

    @invariant.post
    def price_must_have_at_most_two_decimals(self):
        if self.price is not None and round(self.price, 2) != self.price:
            raise ValidationError({"price": ["Price must have at most two decimal places"]})

    @classmethod
    def create(cls, name, price, description=None, image_url=None, category_id=None, is_available=True):
        from catalogue.menu.events import MenuItemAdded

        now = utc_now()
        item = cls(
            name=name,
            price=price,
            description=description,
            image_url=image_url,
            category_id=category_id,
            is_available=is_available,
            created_at=now,
            updated_at=now,
        )
        item.raise_(
            MenuItemAdded(
                menu_item_id=item.id,
                name=name,
                price=price,
                category_id=category_id,
                is_available=is_available,
                added_at=now,
            )
        )
        return item

    def change_price(self, new_price):
        from catalogue.menu.events import MenuItemRepriced

        if new_price == self.price:
            raise ValidationError({"price": ["New price is the same as the current price"]})

        previous_price = self.price
        self.price = new_price
        self.updated_at = utc_now()

        self.raise_(
            MenuItemRepriced(
                menu_item_id=self.id,
                previous_price=previous_price,
                new_price=new_price,
            )
        )

    def set_availability(self, is_available):
        from catalogue.menu.events import MenuItemAvailabilityChanged

        if self.is_available == is_available:
            state = "available" if is_available else "unavailable"
            raise ValidationError({"is_available": [f"Menu item is already {state}"]})

        self.is_available = is_available
        now = utc_now()
        self.updated_at = now

        self.raise_(
            MenuItemAvailabilityChanged(
                menu_item_id=self.id,
                is_available=is_available,
                changed_at=now,
            )
        )
