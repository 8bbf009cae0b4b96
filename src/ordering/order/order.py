"""Order aggregate: a placed pizza order.

An order is written in two steps: ``place`` records the header (customer,
payment method, total) and ``record_lines`` attaches the line items. The two
steps are separate units of work, so a header can exist without lines if the
second write fails. Line prices are copied from the cart at submission time
and never follow later menu price changes.
"""

import json
from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from ordering.domain import ordering
from ordering.order.events import OrderLinesRecorded, OrderPlaced
from ordering.shared.money import ZERO, to_money


class PaymentMethod(Enum):
    INSTANT_TRANSFER = "instant_transfer"
    CARD_ON_DELIVERY = "card_on_delivery"
    CASH_ON_DELIVERY = "cash_on_delivery"


PAYMENT_METHOD_LABELS = {
    PaymentMethod.INSTANT_TRANSFER.value: "PIX",
    PaymentMethod.CARD_ON_DELIVERY.value: "Cartão na entrega",
    PaymentMethod.CASH_ON_DELIVERY.value: "Dinheiro na entrega",
}

SHORT_CODE_LENGTH = 8


def short_order_code(order_id) -> str:
    """Display form of an order id: its first characters, uppercased."""
    return str(order_id)[:SHORT_CODE_LENGTH].upper()


@ordering.entity(part_of="Order")
class OrderLine:
    """A pizza on a placed order, priced as it was in the cart."""

    menu_item_id = Identifier(required=True)
    item_name = String(required=True, max_length=100)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)

    @property
    def line_total(self) -> Decimal:
        return to_money(self.unit_price) * self.quantity


@ordering.aggregate
class Order:
    customer_name = String(required=True, max_length=100)
    customer_phone = String(required=True, max_length=20)
    customer_address = String(required=True, max_length=500)
    notes = String(max_length=500)
    payment_method = String(required=True, choices=PaymentMethod)
    total_amount = Float(required=True, min_value=0.01)
    lines = HasMany(OrderLine)
    created_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(
        cls,
        customer_name,
        customer_phone,
        customer_address,
        payment_method,
        total_amount,
        notes=None,
    ):
        """Create the order header. Lines are recorded separately."""
        now = datetime.now(UTC)
        order = cls(
            customer_name=customer_name,
            customer_phone=customer_phone,
            customer_address=customer_address,
            payment_method=payment_method,
            total_amount=float(to_money(total_amount)),
            notes=notes or None,
            created_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                customer_name=customer_name,
                payment_method=payment_method,
                total_amount=order.total_amount,
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Lines
    # -------------------------------------------------------------------
    @property
    def short_code(self) -> str:
        return short_order_code(self.id)

    @property
    def lines_total(self) -> Decimal:
        return sum((line.line_total for line in self.lines), ZERO)

    def record_lines(self, lines_data):
        """Attach the order's lines.

        Args:
            lines_data: List of dicts with menu_item_id, item_name,
                        quantity, unit_price.
        """
        if self.lines:
            raise ValidationError({"lines": ["Order lines have already been recorded"]})
        if not lines_data:
            raise ValidationError({"lines": ["An order needs at least one line"]})

        lines = [
            OrderLine(
                menu_item_id=data["menu_item_id"],
                item_name=data["item_name"],
                quantity=data["quantity"],
                unit_price=float(to_money(data["unit_price"])),
            )
            for data in lines_data
        ]
        lines_total = sum((line.line_total for line in lines), ZERO)
        if lines_total != to_money(self.total_amount):
            raise ValidationError(
                {"lines": [f"Lines add up to {lines_total}, but the order total is {to_money(self.total_amount)}"]}
            )

        for line in lines:
            self.add_lines(line)

        self.raise_(
            OrderLinesRecorded(
                order_id=str(self.id),
                line_count=len(lines),
                lines=json.dumps(
                    [
                        {
                            "menu_item_id": str(line.menu_item_id),
                            "item_name": line.item_name,
                            "quantity": line.quantity,
                            "unit_price": line.unit_price,
                        }
                        for line in lines
                    ]
                ),
            )
        )
