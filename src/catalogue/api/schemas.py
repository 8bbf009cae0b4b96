"""Pydantic request/response schemas for the Menu API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Category Request Schemas ---


class CreateCategoryRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Tradicionais",
                    "description": "As clássicas da casa",
                    "display_order": 0,
                }
            ]
        }
    }

    name: str = Field(..., max_length=100)
    description: str | None = None
    display_order: int = 0


# --- Menu Item Request Schemas ---


class AddMenuItemRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Margherita",
                    "price": 32.0,
                    "description": "Molho de tomate, mussarela e manjericão",
                    "image_url": None,
                    "category_id": "cat-001",
                    "is_available": True,
                }
            ]
        }
    }

    name: str = Field(..., max_length=100)
    price: float = Field(..., gt=0)
    description: str | None = None
    image_url: str | None = Field(None, max_length=500)
    category_id: str | None = None
    is_available: bool = True


class ChangePriceRequest(BaseModel):
    new_price: float = Field(..., gt=0)


class SetAvailabilityRequest(BaseModel):
    is_available: bool


# --- Response Schemas ---


class CategoryResponse(BaseModel):
    category_id: str
    name: str
    description: str | None = None


class MenuItemResponse(BaseModel):
    menu_item_id: str
    name: str
    description: str | None = None
    price: float
    image_url: str | None = None
    is_available: bool
    category_id: str | None = None


class CategoryIdResponse(BaseModel):
    category_id: str


class MenuItemIdResponse(BaseModel):
    menu_item_id: str


class StatusResponse(BaseModel):
    status: str = "ok"
