"""Order placement: commands and handler for the two checkout writes."""

import json

from protean import handle
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import Order


@ordering.command(part_of="Order")
class PlaceOrder:
    customer_name = String(required=True, max_length=100)
    customer_phone = String(required=True, max_length=20)
    customer_address = String(required=True, max_length=500)
    notes = String(max_length=500)
    payment_method = String(required=True, max_length=50)
    total_amount = Float(required=True, min_value=0.01)


@ordering.command(part_of="Order")
class RecordOrderLines:
    order_id = Identifier(required=True)
    lines = Text(required=True)  # JSON: list of {menu_item_id, item_name, quantity, unit_price}


@ordering.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        order = Order.place(
            customer_name=command.customer_name,
            customer_phone=command.customer_phone,
            customer_address=command.customer_address,
            payment_method=command.payment_method,
            total_amount=command.total_amount,
            notes=command.notes,
        )
        current_domain.repository_for(Order).add(order)
        return {"order_id": str(order.id), "created_at": order.created_at}

    @handle(RecordOrderLines)
    def record_order_lines(self, command):
        lines_data = json.loads(command.lines) if isinstance(command.lines, str) else command.lines

        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.record_lines(lines_data)
        repo.add(order)
