"""FastAPI endpoints for the Menu."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from catalogue.api.schemas import (
    AddMenuItemRequest,
    CategoryIdResponse,
    CategoryResponse,
    ChangePriceRequest,
    CreateCategoryRequest,
    MenuItemIdResponse,
    MenuItemResponse,
    SetAvailabilityRequest,
    StatusResponse,
)
from catalogue.category.management import CreateCategory
from catalogue.menu.browsing import available_menu, menu_categories
from catalogue.menu.management import AddMenuItem, ChangeMenuItemPrice, SetMenuItemAvailability

menu_router = APIRouter(prefix="/menu", tags=["menu"])


def _menu_item_response(item) -> MenuItemResponse:
    return MenuItemResponse(
        menu_item_id=str(item.id),
        name=item.name,
        description=item.description,
        price=item.price,
        image_url=item.image_url,
        is_available=item.is_available,
        category_id=str(item.category_id) if item.category_id else None,
    )


# --- Browsing endpoints ---


@menu_router.get("", response_model=list[MenuItemResponse])
async def list_menu(category_id: str | None = None) -> list[MenuItemResponse]:
    return [_menu_item_response(item) for item in available_menu(category_id=category_id)]


@menu_router.get("/categories", response_model=list[CategoryResponse])
async def list_categories() -> list[CategoryResponse]:
    return [
        CategoryResponse(
            category_id=str(category.id),
            name=category.name,
            description=category.description,
        )
        for category in menu_categories()
    ]


# --- Management endpoints ---


@menu_router.post("/categories", status_code=201, response_model=CategoryIdResponse)
async def create_category(body: CreateCategoryRequest) -> CategoryIdResponse:
    command = CreateCategory(
        name=body.name,
        description=body.description,
        display_order=body.display_order,
    )
    result = current_domain.process(command, asynchronous=False)
    return CategoryIdResponse(category_id=result)


@menu_router.post("/items", status_code=201, response_model=MenuItemIdResponse)
async def add_menu_item(body: AddMenuItemRequest) -> MenuItemIdResponse:
    command = AddMenuItem(
        name=body.name,
        price=body.price,
        description=body.description,
        image_url=body.image_url,
        category_id=body.category_id,
        is_available=body.is_available,
    )
    result = current_domain.process(command, asynchronous=False)
    return MenuItemIdResponse(menu_item_id=result)


@menu_router.put("/items/{menu_item_id}/price", response_model=StatusResponse)
async def change_price(menu_item_id: str, body: ChangePriceRequest) -> StatusResponse:
    command = ChangeMenuItemPrice(menu_item_id=menu_item_id, new_price=body.new_price)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@menu_router.put("/items/{menu_item_id}/availability", response_model=StatusResponse)
async def set_availability(menu_item_id: str, body: SetAvailabilityRequest) -> StatusResponse:
    command = SetMenuItemAvailability(menu_item_id=menu_item_id, is_available=body.is_available)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()
