"""Pydantic request/response schemas for the shopping session API.

These are external contracts, separate from the cart store and the
checkout submitter.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class ToastSchema(BaseModel):
    title: str
    description: str
    variant: str = "default"


class CartLineSchema(BaseModel):
    menu_item_id: str
    name: str
    unit_price: float
    quantity: int
    line_total: float


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class AddCartItemRequest(BaseModel):
    menu_item_id: str

    model_config = {"json_schema_extra": {"examples": [{"menu_item_id": "0b7c5f1e-6d0a-4b8e-9a57-4f1b0c2d3e4f"}]}}


class UpdateCartItemRequest(BaseModel):
    quantity: int


class CheckoutRequest(BaseModel):
    """Raw checkout form. Field rules are enforced by the checkout itself."""

    name: str = ""
    phone: str = ""
    address: str = ""
    notes: str | None = None
    payment_method: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "João da Silva",
                    "phone": "(11) 99999-9999",
                    "address": "Rua das Flores, 123, Centro, São Paulo",
                    "notes": "Sem cebola",
                    "payment_method": "instant_transfer",
                }
            ]
        }
    }


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class SessionResponse(BaseModel):
    session_id: str


class CartResponse(BaseModel):
    session_id: str
    cart_id: str
    lines: list[CartLineSchema] = Field(default_factory=list)
    total_items: int = 0
    total_price: float = 0.0
    formatted_total: str
    notifications: list[ToastSchema] = Field(default_factory=list)


class CheckoutStateResponse(BaseModel):
    state: str
    is_busy: bool
    notifications: list[ToastSchema] = Field(default_factory=list)


class CheckoutResultResponse(BaseModel):
    order_id: str
    order_code: str
    created_at: datetime
    total: float
    summary: str
    handoff_url: str | None = None
    estimated_delivery: str
    notifications: list[ToastSchema] = Field(default_factory=list)


class StatusResponse(BaseModel):
    status: str = "ok"
