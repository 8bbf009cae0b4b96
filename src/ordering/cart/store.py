"""Cart store: the explicitly owned, in-memory cart of one shopping session.

The store wraps a Cart aggregate. UI surfaces mutate it through the store,
checkout reads it through ``snapshot()`` and clears it once an order has been
handed off. After every mutation the store drains the events raised by the
aggregate and hands them, in order, to each subscriber. Subscribers only
observe; a failing subscriber is logged and never undoes the mutation.
"""

from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal

import structlog

from ordering.cart.cart import Cart
from ordering.catalog.port import MenuItemRef
from ordering.shared.money import ZERO, to_money

logger = structlog.get_logger(__name__)

CartSubscriber = Callable[[object], None]


def _take_raised_events(cart: Cart) -> list:
    """Remove and return the events ``cart.raise_`` has collected so far.

    Relies on Protean keeping raised events in the aggregate's private
    ``_events`` list until a unit of work commits. Carts are never
    persisted, so nothing else drains that list.
    """
    events = list(cart._events)
    cart._events.clear()
    return events


@dataclass(frozen=True)
class CartLineSnapshot:
    menu_item_id: str
    name: str
    unit_price: Decimal
    quantity: int

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class CartSnapshot:
    """Immutable copy of the cart taken at one instant."""

    cart_id: str
    lines: tuple[CartLineSnapshot, ...]

    @property
    def total_items(self) -> int:
        return sum(line.quantity for line in self.lines)

    @property
    def total_price(self) -> Decimal:
        return sum((line.line_total for line in self.lines), ZERO)

    @property
    def is_empty(self) -> bool:
        return not self.lines


class CartStore:
    def __init__(self, session_id: str | None = None, cart: Cart | None = None) -> None:
        self._cart = cart if cart is not None else Cart.create(session_id=session_id)
        self._subscribers: list[CartSubscriber] = []

    @property
    def cart_id(self) -> str:
        return str(self._cart.id)

    # -------------------------------------------------------------------
    # Subscriptions
    # -------------------------------------------------------------------
    def subscribe(self, subscriber: CartSubscriber) -> CartSubscriber:
        self._subscribers.append(subscriber)
        return subscriber

    def unsubscribe(self, subscriber: CartSubscriber) -> None:
        if subscriber in self._subscribers:
            self._subscribers.remove(subscriber)

    # -------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------
    def add_item(self, item: MenuItemRef) -> None:
        self._cart.add_item(menu_item_id=item.id, name=item.name, unit_price=item.price)
        self._publish()

    def remove_item(self, menu_item_id: str) -> None:
        self._cart.remove_item(menu_item_id)
        self._publish()

    def update_quantity(self, menu_item_id: str, new_quantity: int) -> None:
        self._cart.update_quantity(menu_item_id, new_quantity)
        self._publish()

    def clear(self) -> None:
        self._cart.clear()
        self._publish()

    # -------------------------------------------------------------------
    # Reads (always recomputed from the lines)
    # -------------------------------------------------------------------
    @property
    def lines(self) -> tuple[CartLineSnapshot, ...]:
        return tuple(
            CartLineSnapshot(
                menu_item_id=str(line.menu_item_id),
                name=line.name,
                unit_price=to_money(line.unit_price),
                quantity=line.quantity,
            )
            for line in self._cart.lines
        )

    @property
    def total_items(self) -> int:
        return self._cart.total_items

    @property
    def total_price(self) -> Decimal:
        return self._cart.total_price

    def quantity_of(self, menu_item_id: str) -> int:
        line = self._cart.line_for(menu_item_id)
        return line.quantity if line else 0

    def snapshot(self) -> CartSnapshot:
        return CartSnapshot(cart_id=self.cart_id, lines=self.lines)

    def __len__(self) -> int:
        return len(self._cart.lines)

    # -------------------------------------------------------------------
    # Event delivery
    # -------------------------------------------------------------------
    def _publish(self) -> None:
        for event in _take_raised_events(self._cart):
            for subscriber in list(self._subscribers):
                try:
                    subscriber(event)
                except Exception:
                    logger.exception(
                        "Cart subscriber failed",
                        cart_id=self.cart_id,
                        event_type=type(event).__name__,
                    )
