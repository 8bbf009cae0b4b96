"""Order store port (abstract interface).

Checkout persists an order in two writes: the header first, then its lines
against the id the header write issued. The two writes are not atomic; a
lines failure leaves the header behind without lines.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


class OrderStoreError(Exception):
    """A write to the order store failed."""


@dataclass(frozen=True)
class OrderHeader:
    customer_name: str
    customer_phone: str
    customer_address: str
    payment_method: str
    total_amount: Decimal
    notes: str | None = None


@dataclass(frozen=True)
class OrderLineRecord:
    menu_item_id: str
    item_name: str
    quantity: int
    unit_price: Decimal

    def to_dict(self) -> dict:
        return {
            "menu_item_id": self.menu_item_id,
            "item_name": self.item_name,
            "quantity": self.quantity,
            "unit_price": float(self.unit_price),
        }


@dataclass(frozen=True)
class OrderReceipt:
    """Identity issued by the store for a written header."""

    order_id: str
    created_at: datetime


class OrderStore(ABC):
    """Abstract order persistence interface."""

    @abstractmethod
    def create_order_header(self, header: OrderHeader) -> OrderReceipt:
        """Write the order header and return its issued identity."""
        ...

    @abstractmethod
    def create_order_lines(self, order_id: str, lines: list[OrderLineRecord]) -> None:
        """Write the line items of an already written header."""
        ...
