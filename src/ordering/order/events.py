"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderPlaced:
    """An order header was written at checkout."""

    __version__ = 1

    order_id = Identifier(required=True)
    customer_name = String(required=True)
    payment_method = String(required=True)
    total_amount = Float(required=True)
    placed_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderLinesRecorded:
    """The line items of a placed order were written."""

    __version__ = 1

    order_id = Identifier(required=True)
    line_count = Integer(required=True)
    lines = Text(required=True)  # JSON: list of {menu_item_id, item_name, quantity, unit_price}
