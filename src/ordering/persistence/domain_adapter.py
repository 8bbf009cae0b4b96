"""Order store backed by the ordering domain's Order aggregate.

Each write is a separate command, so each runs in its own unit of work.
"""

import json

import structlog
from protean.domain import Domain

from ordering.order.placement import PlaceOrder, RecordOrderLines
from ordering.persistence.port import OrderHeader, OrderLineRecord, OrderReceipt, OrderStore, OrderStoreError

logger = structlog.get_logger(__name__)


class DomainOrderStore(OrderStore):
    def __init__(self, domain: Domain | None = None) -> None:
        if domain is None:
            from ordering.domain import ordering

            domain = ordering
        self._domain = domain

    def create_order_header(self, header: OrderHeader) -> OrderReceipt:
        try:
            with self._domain.domain_context():
                command = PlaceOrder(
                    customer_name=header.customer_name,
                    customer_phone=header.customer_phone,
                    customer_address=header.customer_address,
                    notes=header.notes,
                    payment_method=header.payment_method,
                    total_amount=float(header.total_amount),
                )
                result = self._domain.process(command, asynchronous=False)
        except Exception as exc:
            logger.warning("Order header write failed", error=str(exc))
            raise OrderStoreError(f"Could not write order header: {exc}") from exc

        return OrderReceipt(order_id=result["order_id"], created_at=result["created_at"])

    def create_order_lines(self, order_id: str, lines: list[OrderLineRecord]) -> None:
        try:
            with self._domain.domain_context():
                command = RecordOrderLines(
                    order_id=order_id,
                    lines=json.dumps([line.to_dict() for line in lines]),
                )
                self._domain.process(command, asynchronous=False)
        except Exception as exc:
            logger.warning("Order lines write failed", order_id=order_id, error=str(exc))
            raise OrderStoreError(f"Could not write lines for order {order_id}: {exc}") from exc
