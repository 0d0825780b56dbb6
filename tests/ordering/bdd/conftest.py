"""Shared BDD fixtures and step definitions for order placement."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then

from orderly.cart.items import AddToCart
from orderly.order.order import Order


@pytest.fixture()
def products():
    """Products created in the scenario, by name."""
    return {}


@pytest.fixture()
def outcome():
    """Holds what the last When step produced: an order id, a message or an error."""
    return {"order_id": None, "message": None, "error": None}


@given("a shopper with a shipping address", target_fixture="shopper")
def given_shopper(shopper_with_address):
    return shopper_with_address


@given(parsers.cfparse('a product "{name}" priced at {price:f}'))
def product_priced(name, price, products, make_product):
    products[name] = make_product(name=name, price=price)


@given(parsers.cfparse('the cart holds {quantity:d} of "{name}"'))
def cart_holds(quantity, name, shopper, products):
    current_domain.process(
        AddToCart(user_id=str(shopper.id), product_id=str(products[name].id), quantity=quantity),
        asynchronous=False,
    )


def placed_order(outcome) -> Order:
    return current_domain.repository_for(Order).get(outcome["order_id"])


@then(parsers.cfparse("an order exists with net amount {amount:f}"))
def order_with_amount(outcome, amount):
    assert placed_order(outcome).net_amount == pytest.approx(amount)


@then(parsers.cfparse('the order history is "{statuses}"'))
def order_history(outcome, statuses):
    assert [e.status for e in placed_order(outcome).history()] == statuses.split(",")


@then("no order exists")
def no_order():
    assert current_domain.repository_for(Order)._dao.query.all().total == 0
