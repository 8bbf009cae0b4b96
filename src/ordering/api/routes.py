"""FastAPI routes for shopping sessions: cart and checkout."""

from fastapi import APIRouter, HTTPException

from ordering.api.schemas import (
    AddCartItemRequest,
    CartLineSchema,
    CartResponse,
    CheckoutRequest,
    CheckoutResultResponse,
    CheckoutStateResponse,
    SessionResponse,
    StatusResponse,
    ToastSchema,
    UpdateCartItemRequest,
)
from ordering.catalog import get_catalog
from ordering.catalog.port import MenuItemNotFoundError
from ordering.checkout.errors import (
    CheckoutValidationError,
    EmptyCartError,
    OrderSubmissionError,
    SubmissionInProgressError,
)
from ordering.session import SessionNotFoundError, ShoppingSession, get_session_registry
from ordering.shared.money import format_price
from ordering.utils.logging import add_context

session_router = APIRouter(prefix="/sessions", tags=["sessions"])


def _session(session_id: str) -> ShoppingSession:
    try:
        session = get_session_registry().get(session_id)
    except SessionNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    add_context(session_id=session_id, cart_id=session.cart.cart_id)
    return session


def _notifications(session: ShoppingSession) -> list[ToastSchema]:
    return [ToastSchema(**toast.to_dict()) for toast in session.toasts.drain()]


def _error(status_code: int, session: ShoppingSession, message: str, **extra) -> HTTPException:
    detail = {"message": message, **extra}
    detail["notifications"] = [toast.model_dump() for toast in _notifications(session)]
    return HTTPException(status_code=status_code, detail=detail)


def _cart_response(session: ShoppingSession) -> CartResponse:
    cart = session.cart
    return CartResponse(
        session_id=session.session_id,
        cart_id=cart.cart_id,
        lines=[
            CartLineSchema(
                menu_item_id=line.menu_item_id,
                name=line.name,
                unit_price=float(line.unit_price),
                quantity=line.quantity,
                line_total=float(line.line_total),
            )
            for line in cart.lines
        ],
        total_items=cart.total_items,
        total_price=float(cart.total_price),
        formatted_total=format_price(cart.total_price),
        notifications=_notifications(session),
    )


# --- Session endpoints ---


@session_router.post("", status_code=201, response_model=SessionResponse)
async def open_session() -> SessionResponse:
    session = get_session_registry().open()
    return SessionResponse(session_id=session.session_id)


@session_router.delete("/{session_id}", response_model=StatusResponse)
async def close_session(session_id: str) -> StatusResponse:
    try:
        get_session_registry().close(session_id)
    except SessionNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return StatusResponse()


# --- Cart endpoints ---


@session_router.get("/{session_id}/cart", response_model=CartResponse)
async def get_cart(session_id: str) -> CartResponse:
    return _cart_response(_session(session_id))


@session_router.post("/{session_id}/cart/items", response_model=CartResponse)
async def add_cart_item(session_id: str, body: AddCartItemRequest) -> CartResponse:
    session = _session(session_id)
    try:
        item = get_catalog().get_item(body.menu_item_id)
    except MenuItemNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    if not item.is_available:
        raise HTTPException(status_code=409, detail=f"{item.name} is not available right now")

    session.cart.add_item(item)
    return _cart_response(session)


@session_router.put("/{session_id}/cart/items/{menu_item_id}", response_model=CartResponse)
async def update_cart_item(session_id: str, menu_item_id: str, body: UpdateCartItemRequest) -> CartResponse:
    session = _session(session_id)
    session.cart.update_quantity(menu_item_id, body.quantity)
    return _cart_response(session)


@session_router.delete("/{session_id}/cart/items/{menu_item_id}", response_model=CartResponse)
async def remove_cart_item(session_id: str, menu_item_id: str) -> CartResponse:
    session = _session(session_id)
    session.cart.remove_item(menu_item_id)
    return _cart_response(session)


# --- Checkout endpoints ---


@session_router.get("/{session_id}/checkout", response_model=CheckoutStateResponse)
async def get_checkout(session_id: str) -> CheckoutStateResponse:
    session = _session(session_id)
    return CheckoutStateResponse(
        state=session.checkout.state.value,
        is_busy=session.checkout.is_busy,
        notifications=_notifications(session),
    )


@session_router.post("/{session_id}/checkout", status_code=201, response_model=CheckoutResultResponse)
async def submit_checkout(session_id: str, body: CheckoutRequest) -> CheckoutResultResponse:
    session = _session(session_id)
    try:
        result = session.checkout.submit(body.model_dump())
    except CheckoutValidationError as exc:
        raise _error(422, session, "Invalid customer details", errors=exc.messages) from exc
    except (EmptyCartError, SubmissionInProgressError) as exc:
        raise _error(409, session, str(exc)) from exc
    except OrderSubmissionError as exc:
        raise _error(502, session, str(exc)) from exc

    return CheckoutResultResponse(
        order_id=result.order_id,
        order_code=result.order_code,
        created_at=result.created_at,
        total=float(result.total),
        summary=result.summary,
        handoff_url=result.handoff_url,
        estimated_delivery=result.estimated_delivery,
        notifications=_notifications(session),
    )
