"""Shared BDD fixtures and step definitions for the Ordering domain."""

from decimal import Decimal

import pytest
from ordering.cart.notifier import CartNotifier
from ordering.cart.store import CartStore
from ordering.toasts.queue import ToastQueue
from pytest_bdd import given, parsers, then


def _menu_item_id(name):
    return f"pizza-{name.lower().replace(' ', '-')}"


@pytest.fixture()
def toasts():
    return ToastQueue()


@pytest.fixture()
def outcome():
    """Container for the result or error of the last action."""
    return {"result": None, "exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the menu offers "{name}" at {price}'))
def menu_offers(catalog, name, price):
    catalog.add(name, price, menu_item_id=_menu_item_id(name))


@given("an empty cart", target_fixture="cart")
def empty_cart(toasts):
    cart = CartStore(session_id="sess-bdd")
    cart.subscribe(CartNotifier(toasts))
    return cart


@given(parsers.cfparse('the cart holds {qty:d} "{name}"'))
def cart_holds(cart, catalog, qty, name):
    item = catalog.get_item(_menu_item_id(name))
    for _ in range(qty):
        cart.add_item(item)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the cart has {count:d} line"))
def cart_has_one_line(cart, count):
    assert len(cart) == count


@then(parsers.cfparse("the cart has {count:d} lines"))
def cart_has_lines(cart, count):
    assert len(cart) == count


@then(parsers.cfparse("the cart item count is {count:d}"))
def cart_item_count(cart, count):
    assert cart.total_items == count


@then(parsers.cfparse("the cart total is {amount}"))
def cart_total(cart, amount):
    assert cart.total_price == Decimal(amount)


@then(parsers.cfparse('the shopper was told "{description}"'))
def shopper_was_told(toasts, description):
    assert description in [toast.description for toast in toasts.pending]
