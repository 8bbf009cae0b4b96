"""Configurable in-memory order store for development and testing.

Either write can be told to fail, which is how the partial-write path of
checkout (header written, lines rejected) is exercised.
"""

from datetime import UTC, datetime
from uuid import uuid4

from ordering.persistence.port import OrderHeader, OrderLineRecord, OrderReceipt, OrderStore, OrderStoreError


class FakeOrderStore(OrderStore):
    """Configurable fake order store."""

    def __init__(self) -> None:
        self.header_should_succeed: bool = True
        self.lines_should_succeed: bool = True
        self.failure_reason: str = "Order store unavailable"
        self.headers: dict[str, OrderHeader] = {}
        self.lines: dict[str, list[OrderLineRecord]] = {}
        self.calls: list[dict] = []

    def configure(
        self,
        header_should_succeed: bool = True,
        lines_should_succeed: bool = True,
        failure_reason: str = "Order store unavailable",
    ) -> None:
        """Configure store behavior at runtime."""
        self.header_should_succeed = header_should_succeed
        self.lines_should_succeed = lines_should_succeed
        self.failure_reason = failure_reason

    def create_order_header(self, header: OrderHeader) -> OrderReceipt:
        self.calls.append({"method": "create_order_header", "header": header})

        if not self.header_should_succeed:
            raise OrderStoreError(self.failure_reason)

        order_id = str(uuid4())
        self.headers[order_id] = header
        return OrderReceipt(order_id=order_id, created_at=datetime.now(UTC))

    def create_order_lines(self, order_id: str, lines: list[OrderLineRecord]) -> None:
        self.calls.append({"method": "create_order_lines", "order_id": order_id, "lines": list(lines)})

        if not self.lines_should_succeed:
            raise OrderStoreError(self.failure_reason)
        if order_id not in self.headers:
            raise OrderStoreError(f"Unknown order {order_id}")

        self.lines[order_id] = list(lines)

    def orphaned_headers(self) -> list[str]:
        """Ids of headers that were written without any lines."""
        return [order_id for order_id in self.headers if order_id not in self.lines]
