"""Tests for the Order aggregate and its status lifecycle."""

from decimal import Decimal

import pytest
from protean.exceptions import ValidationError

from orderly.errors import BadRequestError, ErrorCode
from orderly.order.events import OrderCancelled, OrderPlaced, OrderStatusChanged
from orderly.order.order import Order, OrderStatus, order_total

_LINES = [("prod-A", 2, 10.00), ("prod-B", 1, 5.00)]


def _order(lines=_LINES):
    return Order.place(user_id="user-1", address="1 Elm St, Austin, 73301, US", lines=lines)


class TestOrderTotal:
    def test_exact_cents(self):
        assert order_total([(3, 0.1), (1, 0.2)]) == Decimal("0.50")

    def test_sub_cent_prices_are_not_rounded(self):
        assert order_total([(1, 19.999)]) == Decimal("19.999")
        assert order_total([(3, 0.125)]) == Decimal("0.375")


class TestPlace:
    def test_net_amount_is_sum_of_lines(self):
        assert _order().net_amount == 25.00

    def test_net_amount_matches_sub_cent_lines(self):
        order = _order([("prod-C", 1, 0.125), ("prod-D", 2, 0.3333)])
        assert order.net_amount == 0.7916
        assert Decimal(str(order.net_amount)) == order_total((p.quantity, p.unit_price) for p in order.products)

    def test_lines_snapshot_prices(self):
        order = _order()
        lines = {(p.product_id, p.quantity, p.unit_price) for p in order.products}
        assert lines == {("prod-A", 2, 10.00), ("prod-B", 1, 5.00)}

    def test_starts_pending_with_one_event(self):
        order = _order()
        assert order.status == OrderStatus.PENDING.value
        assert [e.status for e in order.order_events] == ["PENDING"]

    def test_raises_order_placed(self):
        order = _order()
        event = next(e for e in order._events if isinstance(e, OrderPlaced))
        assert event.net_amount == 25.00
        assert event.items_count == 2

    def test_requires_lines(self):
        with pytest.raises(ValidationError):
            _order(lines=[])


class TestStatusChanges:
    def test_each_transition_appends_one_event(self):
        order = _order()
        order.change_status("ACCEPTED")
        order.change_status("OUT_FOR_DELIVERY")
        order.change_status("DELIVERED")
        assert [e.status for e in order.history()] == ["PENDING", "ACCEPTED", "OUT_FOR_DELIVERY", "DELIVERED"]

    def test_change_raises_status_changed(self):
        order = _order()
        order.change_status("ACCEPTED")
        event = next(e for e in order._events if isinstance(e, OrderStatusChanged))
        assert event.previous_status == "PENDING"
        assert event.new_status == "ACCEPTED"

    def test_unknown_status(self):
        order = _order()
        with pytest.raises(ValidationError):
            order.change_status("LOST")
        assert len(order.order_events) == 1

    def test_cancel(self):
        order = _order()
        order.cancel()
        assert order.status == "CANCELLED"
        assert len(order.order_events) == 2
        assert [e for e in order._events if isinstance(e, OrderCancelled)]

    @pytest.mark.parametrize("terminal", ["DELIVERED", "CANCELLED"])
    def test_terminal_status_is_locked(self, terminal):
        order = _order()
        order.change_status(terminal)
        events_before = len(order.order_events)

        with pytest.raises(BadRequestError) as exc:
            order.change_status("PENDING")
        assert exc.value.error_code == ErrorCode.ORDER_STATUS_LOCKED

        with pytest.raises(BadRequestError):
            order.cancel()
        assert len(order.order_events) == events_before

    def test_any_non_terminal_target_allowed(self):
        order = _order()
        order.change_status("OUT_FOR_DELIVERY")
        order.change_status("PENDING")
        assert order.status == "PENDING"
        assert len(order.order_events) == 3
