"""Shopping sessions: one cart, one toast queue and one checkout per shopper."""

from datetime import UTC, datetime
from uuid import uuid4

import structlog

from ordering.cart.notifier import CartNotifier
from ordering.cart.store import CartStore
from ordering.checkout.submitter import CheckoutSubmitter
from ordering.toasts.queue import ToastQueue

logger = structlog.get_logger(__name__)


class SessionNotFoundError(Exception):
    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(f"Shopping session {session_id} not found")


class ShoppingSession:
    def __init__(self, session_id: str | None = None) -> None:
        self.session_id = session_id or str(uuid4())
        self.started_at = datetime.now(UTC)
        self.toasts = ToastQueue()
        self.cart = CartStore(session_id=self.session_id)
        self.notifier = self.cart.subscribe(CartNotifier(self.toasts))
        self.checkout = CheckoutSubmitter(self.cart, toaster=self.toasts)

    def close(self) -> None:
        self.cart.unsubscribe(self.notifier)
        self.toasts.drain()


class SessionRegistry:
    """Process-local registry of open shopping sessions."""

    def __init__(self) -> None:
        self._sessions: dict[str, ShoppingSession] = {}

    def open(self) -> ShoppingSession:
        session = ShoppingSession()
        self._sessions[session.session_id] = session
        logger.info("Shopping session opened", session_id=session.session_id)
        return session

    def get(self, session_id: str) -> ShoppingSession:
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None

    def close(self, session_id: str) -> None:
        session = self._sessions.pop(session_id, None)
        if session is None:
            raise SessionNotFoundError(session_id)
        session.close()
        logger.info("Shopping session closed", session_id=session_id)

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions
