"""Checkout submitter: turns a checkout form and the cart into a placed order.

One submitter serves one shopping session. Each ``submit`` call is a separate
attempt that walks ``IDLE -> VALIDATING -> SUBMITTING -> SUCCEEDED | FAILED``:

1. The form is validated and the cart checked for content. Either failure
   returns the machine to IDLE without touching anything.
2. The cart is snapshotted. From here on the snapshot is authoritative.
3. The order header is written, then its lines against the issued id.
   A failure in either write, whatever the adapter raised, leaves the cart
   untouched, ends in FAILED and surfaces as OrderSubmissionError.
   If only the lines fail, the header stays behind without lines and is
   logged at error level so an operator can follow up.
4. The order summary is built from the snapshot and handed to the messaging
   channel, and only then is the cart cleared.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

import structlog

from ordering.cart.store import CartSnapshot, CartStore
from ordering.checkout.details import CustomerDetails, validate_customer_details
from ordering.checkout.errors import (
    EmptyCartError,
    OrderSubmissionError,
    SubmissionInProgressError,
)
from ordering.checkout.summary import build_order_summary, short_order_code
from ordering.messaging import get_destination, get_messenger
from ordering.messaging.port import MessagingPort
from ordering.persistence import get_order_store
from ordering.persistence.port import OrderHeader, OrderLineRecord, OrderStore
from ordering.shared.money import ZERO
from ordering.toasts.port import DESTRUCTIVE, ToastPort
from ordering.toasts.queue import ToastQueue

logger = structlog.get_logger(__name__)

ESTIMATED_DELIVERY = "30-45 minutos"


class CheckoutState(Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


BUSY_STATES = frozenset({CheckoutState.VALIDATING, CheckoutState.SUBMITTING})


@dataclass(frozen=True)
class CheckoutResult:
    order_id: str
    order_code: str
    created_at: datetime
    total: Decimal
    summary: str
    handoff: dict | None = None
    estimated_delivery: str = ESTIMATED_DELIVERY

    @property
    def handoff_url(self) -> str | None:
        return (self.handoff or {}).get("url")


class CheckoutSubmitter:
    """Runs checkout attempts against one cart store.

    Adapters left as None are resolved from their factories on each attempt,
    so tests can swap them with ``set_order_store``/``set_messenger``.
    """

    def __init__(
        self,
        cart_store: CartStore,
        order_store: OrderStore | None = None,
        messenger: MessagingPort | None = None,
        toaster: ToastPort | None = None,
        destination: str | None = None,
    ) -> None:
        self.cart_store = cart_store
        self._order_store = order_store
        self._messenger = messenger
        self._destination = destination
        self.toaster = toaster if toaster is not None else ToastQueue()
        self.state = CheckoutState.IDLE
        self.last_result: CheckoutResult | None = None

    @property
    def order_store(self) -> OrderStore:
        return self._order_store if self._order_store is not None else get_order_store()

    @property
    def messenger(self) -> MessagingPort:
        return self._messenger if self._messenger is not None else get_messenger()

    @property
    def destination(self) -> str:
        return self._destination if self._destination is not None else get_destination()

    @property
    def is_busy(self) -> bool:
        return self.state in BUSY_STATES

    # -------------------------------------------------------------------
    # Attempt
    # -------------------------------------------------------------------
    def submit(self, form) -> CheckoutResult:
        """Run one checkout attempt.

        Args:
            form: Mapping with name, phone, address, notes and payment_method,
                  or an already built CustomerDetails.

        Raises:
            SubmissionInProgressError: another attempt is still running.
            CheckoutValidationError: a form field is invalid.
            EmptyCartError: there is nothing to order.
            OrderSubmissionError: the order could not be persisted.
        """
        if self.is_busy:
            raise SubmissionInProgressError()

        self.state = CheckoutState.VALIDATING
        try:
            details = validate_customer_details(form)
            snapshot = self.cart_store.snapshot()
            if snapshot.is_empty or snapshot.total_price <= ZERO:
                self.toaster.show(
                    "Carrinho vazio",
                    "Adicione itens antes de finalizar o pedido.",
                    DESTRUCTIVE,
                )
                raise EmptyCartError()
        except Exception:
            self.state = CheckoutState.IDLE
            raise

        self.state = CheckoutState.SUBMITTING
        try:
            return self._place(details, snapshot)
        finally:
            if self.state is CheckoutState.SUBMITTING:
                self.state = CheckoutState.FAILED

    def reset(self) -> None:
        """Return a finished machine to IDLE."""
        if self.is_busy:
            raise SubmissionInProgressError()
        self.state = CheckoutState.IDLE

    # -------------------------------------------------------------------
    # Steps
    # -------------------------------------------------------------------
    def _place(self, details: CustomerDetails, snapshot: CartSnapshot) -> CheckoutResult:
        store = self.order_store
        header = OrderHeader(
            customer_name=details.name,
            customer_phone=details.phone,
            customer_address=details.address,
            payment_method=details.payment_method,
            total_amount=snapshot.total_price,
            notes=details.notes,
        )
        try:
            receipt = store.create_order_header(header)
        except Exception as exc:
            logger.warning("Order header could not be written", cart_id=snapshot.cart_id, error=str(exc))
            self._fail()
            raise OrderSubmissionError() from exc

        lines = [
            OrderLineRecord(
                menu_item_id=line.menu_item_id,
                item_name=line.name,
                quantity=line.quantity,
                unit_price=line.unit_price,
            )
            for line in snapshot.lines
        ]
        try:
            store.create_order_lines(receipt.order_id, lines)
        except Exception as exc:
            logger.error(
                "Order header written without lines",
                order_id=receipt.order_id,
                cart_id=snapshot.cart_id,
                line_count=len(lines),
                error=str(exc),
            )
            self._fail()
            raise OrderSubmissionError(order_id=receipt.order_id) from exc

        order_code = short_order_code(receipt.order_id)
        summary = build_order_summary(order_code, snapshot, details)
        handoff = self._hand_off(receipt.order_id, summary)

        self.cart_store.clear()

        result = CheckoutResult(
            order_id=receipt.order_id,
            order_code=order_code,
            created_at=receipt.created_at,
            total=snapshot.total_price,
            summary=summary,
            handoff=handoff,
        )
        self.last_result = result
        self.state = CheckoutState.SUCCEEDED
        self.toaster.show("Pedido realizado!", "Você receberá seu pedido em breve.")
        logger.info(
            "Order placed",
            order_id=receipt.order_id,
            order_code=order_code,
            total=str(snapshot.total_price),
            items=snapshot.total_items,
        )
        return result

    def _hand_off(self, order_id: str, summary: str) -> dict | None:
        try:
            return self.messenger.dispatch(self.destination, summary)
        except Exception as exc:
            logger.warning("Order summary handoff failed", order_id=order_id, error=str(exc))
            return None

    def _fail(self) -> None:
        self.state = CheckoutState.FAILED
        self.toaster.show("Erro ao fazer pedido", "Tente novamente mais tarde.", DESTRUCTIVE)
