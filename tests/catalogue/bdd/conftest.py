"""Shared BDD fixtures and step definitions for the Catalogue domain."""

import pytest
from catalogue.category.management import CreateCategory
from catalogue.menu.browsing import available_menu
from catalogue.menu.management import AddMenuItem
from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then, when


@pytest.fixture()
def menu():
    """Ids of the categories and pizzas created by the scenario, by name."""
    return {}


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@given(parsers.cfparse('a category "{name}"'))
def a_category(menu, name):
    menu[name] = current_domain.process(CreateCategory(name=name), asynchronous=False)


@given(parsers.cfparse('the restaurant adds "{name}" at {price:f} to "{category}"'))
@when(parsers.cfparse('the restaurant adds "{name}" at {price:f} to "{category}"'))
def restaurant_adds(menu, name, price, category):
    menu[name] = current_domain.process(
        AddMenuItem(name=name, price=price, category_id=menu[category]),
        asynchronous=False,
    )


@then(parsers.cfparse('the menu lists "{name}" at {price:f}'))
def menu_lists(name, price):
    prices = {item.name: item.price for item in available_menu()}
    assert prices[name] == price


@then(parsers.cfparse('the menu does not list "{name}"'))
def menu_does_not_list(name):
    assert name not in [item.name for item in available_menu()]


@then("the action fails with a validation error")
def action_fails(error):
    assert isinstance(error["exc"], ValidationError)
