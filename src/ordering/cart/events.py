"""Domain events for the Cart aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from ordering.domain import ordering


@ordering.event(part_of="Cart")
class CartItemAdded:
    """A menu item was put in the cart for the first time."""

    __version__ = 1

    cart_id = Identifier(required=True)
    menu_item_id = Identifier(required=True)
    name = String(required=True)
    unit_price = Float(required=True)
    quantity = Integer(required=True)


@ordering.event(part_of="Cart")
class CartItemIncremented:
    """A menu item already in the cart was added again."""

    __version__ = 1

    cart_id = Identifier(required=True)
    menu_item_id = Identifier(required=True)
    name = String(required=True)
    quantity = Integer(required=True)  # Quantity after the increment


@ordering.event(part_of="Cart")
class CartItemQuantitySet:
    """A cart line's quantity was set to a new absolute value."""

    __version__ = 1

    cart_id = Identifier(required=True)
    menu_item_id = Identifier(required=True)
    name = String(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@ordering.event(part_of="Cart")
class CartItemRemoved:
    """A line was removed from the cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    menu_item_id = Identifier(required=True)
    name = String(required=True)
    previous_quantity = Integer(required=True)


@ordering.event(part_of="Cart")
class CartCleared:
    """Every line was removed from the cart after a successful checkout."""

    __version__ = 1

    cart_id = Identifier(required=True)
    lines_cleared = Integer(required=True)
    cleared_at = DateTime(required=True)
