"""Cart aggregate: what the shopper intends to buy.

The cart lives in memory for one shopping session and is never persisted.
Its totals are derived from the lines on every read, so they cannot drift
from the line collection. Every mutation raises a domain event that the
owning CartStore hands to its subscribers.
"""

from datetime import UTC, datetime
from decimal import Decimal

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from ordering.cart.events import (
    CartCleared,
    CartItemAdded,
    CartItemIncremented,
    CartItemQuantitySet,
    CartItemRemoved,
)
from ordering.domain import ordering
from ordering.shared.money import ZERO, to_money


@ordering.entity(part_of="Cart")
class CartLine:
    """One menu item in the cart with its quantity (always at least 1)."""

    menu_item_id = Identifier(required=True)
    name = String(required=True, max_length=100)
    unit_price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()

    @property
    def line_total(self) -> Decimal:
        return to_money(self.unit_price) * self.quantity


@ordering.aggregate
class Cart:
    session_id = String(max_length=255)
    lines = HasMany(CartLine)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def one_line_per_menu_item(self):
        menu_item_ids = [str(line.menu_item_id) for line in self.lines]
        if len(menu_item_ids) != len(set(menu_item_ids)):
            raise ValidationError({"lines": ["A menu item can only appear on one cart line"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, session_id=None):
        now = datetime.now(UTC)
        return cls(session_id=session_id, created_at=now, updated_at=now)

    # -------------------------------------------------------------------
    # Derived totals
    # -------------------------------------------------------------------
    @property
    def total_items(self) -> int:
        return sum(line.quantity for line in self.lines)

    @property
    def total_price(self) -> Decimal:
        return sum((line.line_total for line in self.lines), ZERO)

    def line_for(self, menu_item_id):
        return next((line for line in self.lines if str(line.menu_item_id) == str(menu_item_id)), None)

    # -------------------------------------------------------------------
    # Line management
    # -------------------------------------------------------------------
    def add_item(self, menu_item_id, name, unit_price):
        """Add one unit of a menu item, incrementing its line if it is already in the cart."""
        now = datetime.now(UTC)
        existing = self.line_for(menu_item_id)

        if existing:
            existing.quantity += 1
            self.updated_at = now
            self.raise_(
                CartItemIncremented(
                    cart_id=str(self.id),
                    menu_item_id=str(menu_item_id),
                    name=existing.name,
                    quantity=existing.quantity,
                )
            )
            return

        self.add_lines(
            CartLine(
                menu_item_id=menu_item_id,
                name=name,
                unit_price=float(unit_price),
                quantity=1,
                added_at=now,
            )
        )
        self.updated_at = now
        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                menu_item_id=str(menu_item_id),
                name=name,
                unit_price=float(unit_price),
                quantity=1,
            )
        )

    def remove_item(self, menu_item_id):
        """Drop the line for a menu item. Unknown items are ignored."""
        line = self.line_for(menu_item_id)
        if line is None:
            return

        self.remove_lines(line)
        self.updated_at = datetime.now(UTC)
        self.raise_(
            CartItemRemoved(
                cart_id=str(self.id),
                menu_item_id=str(menu_item_id),
                name=line.name,
                previous_quantity=line.quantity,
            )
        )

    def update_quantity(self, menu_item_id, new_quantity):
        """Set a line's quantity. Anything below 1 removes the line."""
        line = self.line_for(menu_item_id)
        if line is None:
            return

        if new_quantity < 1:
            self.remove_item(menu_item_id)
            return

        if new_quantity == line.quantity:
            return

        previous_quantity = line.quantity
        line.quantity = new_quantity
        self.updated_at = datetime.now(UTC)
        self.raise_(
            CartItemQuantitySet(
                cart_id=str(self.id),
                menu_item_id=str(menu_item_id),
                name=line.name,
                previous_quantity=previous_quantity,
                new_quantity=new_quantity,
            )
        )

    def clear(self):
        """Empty the cart."""
        if not self.lines:
            return

        lines_cleared = len(self.lines)
        for line in list(self.lines):
            self.remove_lines(line)
        now = datetime.now(UTC)
        self.updated_at = now

        self.raise_(
            CartCleared(
                cart_id=str(self.id),
                lines_cleared=lines_cleared,
                cleared_at=now,
            )
        )
