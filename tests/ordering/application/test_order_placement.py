"""Application tests for placing an order from the cart."""

import pytest
from protean import current_domain

from orderly.cart.cart import Cart
from orderly.cart.items import AddToCart
from orderly.errors import ErrorCode, NotFoundError
from orderly.order.order import Order
from orderly.order.placement import PlaceOrder
from orderly.product.management import DeleteProduct, UpdateProduct
from orderly.user.profile import UpdateUser


def _add(user, product, quantity):
    current_domain.process(
        AddToCart(user_id=str(user.id), product_id=str(product.id), quantity=quantity),
        asynchronous=False,
    )


def _place(user):
    return current_domain.process(PlaceOrder(user_id=str(user.id)), asynchronous=False)


def _order_count():
    return current_domain.repository_for(Order)._dao.query.all().total


@pytest.fixture()
def stocked_cart(shopper_with_address, make_product):
    """Cart of (A, 2 @ 10.00) and (B, 1 @ 5.00)."""
    product_a = make_product(name="Product A", price=10.00)
    product_b = make_product(name="Product B", price=5.00)
    _add(shopper_with_address, product_a, 2)
    _add(shopper_with_address, product_b, 1)
    return shopper_with_address, product_a, product_b


class TestPlaceOrder:
    def test_end_to_end(self, stocked_cart):
        user, product_a, product_b = stocked_cart

        order_id = _place(user)

        order = current_domain.repository_for(Order).get(order_id)
        assert order.net_amount == 25.00
        assert {(str(p.product_id), p.quantity) for p in order.products} == {
            (str(product_a.id), 2),
            (str(product_b.id), 1),
        }
        assert [e.status for e in order.order_events] == ["PENDING"]
        assert order.address == "12 Market Street, Springfield, IL, 62701, US"
        assert len(current_domain.repository_for(Cart).for_user(user.id).items) == 0

    def test_price_snapshot_survives_price_change(self, stocked_cart):
        user, product_a, _ = stocked_cart
        order_id = _place(user)

        current_domain.process(UpdateProduct(product_id=str(product_a.id), price=99.0), asynchronous=False)

        order = current_domain.repository_for(Order).get(order_id)
        assert order.net_amount == 25.00
        line = next(p for p in order.products if str(p.product_id) == str(product_a.id))
        assert line.unit_price == 10.00

    def test_sub_cent_price_is_not_rounded(self, shopper_with_address, make_product):
        _add(shopper_with_address, make_product(name="Wooden Toothpick", price=0.125), 1)

        order = current_domain.repository_for(Order).get(_place(shopper_with_address))

        assert order.net_amount == 0.125
        assert order.net_amount == sum(p.quantity * p.unit_price for p in order.products)

    def test_address_is_frozen(self, stocked_cart, make_address):
        user, _, _ = stocked_cart
        order_id = _place(user)

        new_address = make_address(user, street="77 New Road")
        current_domain.process(
            UpdateUser(user_id=str(user.id), shipping_address_id=str(new_address.id)),
            asynchronous=False,
        )

        assert current_domain.repository_for(Order).get(order_id).address.startswith("12 Market Street")


class TestNoEffectCases:
    def test_empty_cart_twice(self, shopper_with_address):
        assert _place(shopper_with_address) is None
        assert _place(shopper_with_address) is None
        assert _order_count() == 0

    def test_cart_emptied_by_removal(self, shopper_with_address, make_product):
        from orderly.cart.items import RemoveFromCart

        product = make_product()
        _add(shopper_with_address, product, 1)
        current_domain.process(
            RemoveFromCart(user_id=str(shopper_with_address.id), product_id=str(product.id)),
            asynchronous=False,
        )
        assert _place(shopper_with_address) is None

    def test_no_shipping_address(self, make_user, make_product):
        user = make_user()
        _add(user, make_product(), 1)
        with pytest.raises(NotFoundError) as exc:
            _place(user)
        assert exc.value.error_code == ErrorCode.ADDRESS_NOT_FOUND
        assert _order_count() == 0
        assert len(current_domain.repository_for(Cart).for_user(user.id).items) == 1

    def test_deleted_product_in_cart(self, stocked_cart):
        user, product_a, _ = stocked_cart
        current_domain.process(DeleteProduct(product_id=str(product_a.id)), asynchronous=False)

        with pytest.raises(NotFoundError) as exc:
            _place(user)
        assert exc.value.error_code == ErrorCode.PRODUCT_NOT_FOUND
        assert _order_count() == 0
        assert len(current_domain.repository_for(Cart).for_user(user.id).items) == 2


class TestAtomicity:
    def test_failure_while_clearing_cart_leaves_no_order(self, stocked_cart, monkeypatch):
        user, _, _ = stocked_cart

        def _broken_clear(self):
            raise RuntimeError("storage went away")

        monkeypatch.setattr(Cart, "clear", _broken_clear)

        with pytest.raises(RuntimeError):
            _place(user)

        assert _order_count() == 0
        assert len(current_domain.repository_for(Cart).for_user(user.id).items) == 2
