"""Application tests for cancelling orders and changing their status."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError

from orderly.cart.items import AddToCart
from orderly.errors import BadRequestError, ErrorCode, NotFoundError
from orderly.order.order import Order
from orderly.order.placement import PlaceOrder
from orderly.order.status import CancelOrder, ChangeOrderStatus


@pytest.fixture()
def order(shopper_with_address, make_product):
    current_domain.process(
        AddToCart(user_id=str(shopper_with_address.id), product_id=str(make_product().id), quantity=1),
        asynchronous=False,
    )
    order_id = current_domain.process(PlaceOrder(user_id=str(shopper_with_address.id)), asynchronous=False)
    return current_domain.repository_for(Order).get(order_id)


def _reload(order):
    return current_domain.repository_for(Order).get(order.id)


class TestCancelOrder:
    def test_owner_cancels(self, order):
        current_domain.process(CancelOrder(order_id=str(order.id), user_id=str(order.user_id)), asynchronous=False)
        order = _reload(order)
        assert order.status == "CANCELLED"
        assert [e.status for e in order.history()] == ["PENDING", "CANCELLED"]

    def test_stranger_sees_not_found(self, order, make_user):
        stranger = make_user()
        with pytest.raises(NotFoundError) as exc:
            current_domain.process(CancelOrder(order_id=str(order.id), user_id=str(stranger.id)), asynchronous=False)
        assert exc.value.error_code == ErrorCode.ORDER_NOT_FOUND
        assert _reload(order).status == "PENDING"

    def test_admin_cancels_any_order(self, order, make_user):
        admin = make_user(role="ADMIN")
        current_domain.process(
            CancelOrder(order_id=str(order.id), user_id=str(admin.id), is_admin=True),
            asynchronous=False,
        )
        assert _reload(order).status == "CANCELLED"

    def test_cancelled_order_stays_cancelled(self, order):
        command = CancelOrder(order_id=str(order.id), user_id=str(order.user_id))
        current_domain.process(command, asynchronous=False)
        with pytest.raises(BadRequestError) as exc:
            current_domain.process(command, asynchronous=False)
        assert exc.value.error_code == ErrorCode.ORDER_STATUS_LOCKED
        assert len(_reload(order).order_events) == 2

    def test_missing_order(self, make_user):
        with pytest.raises(NotFoundError):
            current_domain.process(CancelOrder(order_id="missing", user_id=str(make_user().id)), asynchronous=False)


class TestChangeOrderStatus:
    def test_walks_the_happy_path(self, order):
        for status in ("ACCEPTED", "OUT_FOR_DELIVERY", "DELIVERED"):
            current_domain.process(ChangeOrderStatus(order_id=str(order.id), status=status), asynchronous=False)
        order = _reload(order)
        assert order.status == "DELIVERED"
        assert len(order.order_events) == 4

    def test_delivered_is_terminal(self, order):
        current_domain.process(ChangeOrderStatus(order_id=str(order.id), status="DELIVERED"), asynchronous=False)
        with pytest.raises(BadRequestError):
            current_domain.process(ChangeOrderStatus(order_id=str(order.id), status="ACCEPTED"), asynchronous=False)

    def test_unknown_status(self, order):
        with pytest.raises(ValidationError):
            current_domain.process(ChangeOrderStatus(order_id=str(order.id), status="LOST"), asynchronous=False)
        assert _reload(order).status == "PENDING"

    def test_missing_order(self):
        with pytest.raises(NotFoundError) as exc:
            current_domain.process(ChangeOrderStatus(order_id="missing", status="ACCEPTED"), asynchronous=False)
        assert exc.value.error_code == ErrorCode.ORDER_NOT_FOUND
