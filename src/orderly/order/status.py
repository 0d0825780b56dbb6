"""Order status changes — cancellation by the buyer and transitions by staff."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Boolean, Identifier, String
from protean.utils.globals import current_domain

from orderly.domain import orderly
from orderly.errors import ErrorCode, NotFoundError
from orderly.order.order import Order
from orderly.utils.logging import get_logger

logger = get_logger(__name__)


def load_order(order_id, user_id=None, is_admin=False) -> Order:
    """Fetch an order visible to the caller.

    Non-admin callers only see their own orders; anyone else's order is
    reported exactly like a missing one.
    """
    try:
        order = current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        raise NotFoundError("Order not found", ErrorCode.ORDER_NOT_FOUND) from None

    if not is_admin and not order.belongs_to(user_id):
        raise NotFoundError("Order not found", ErrorCode.ORDER_NOT_FOUND)
    return order


@orderly.command(part_of="Order")
class CancelOrder:
    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    is_admin = Boolean(default=False)


@orderly.command(part_of="Order")
class ChangeOrderStatus:
    order_id = Identifier(required=True)
    status = String(required=True, max_length=50)


@orderly.command_handler(part_of=Order)
class OrderStatusHandler:
    @handle(CancelOrder)
    def cancel_order(self, command):
        order = load_order(command.order_id, user_id=command.user_id, is_admin=command.is_admin)
        order.cancel()
        current_domain.repository_for(Order).add(order)
        logger.info("Order cancelled", order_id=str(order.id), by=str(command.user_id))

    @handle(ChangeOrderStatus)
    def change_order_status(self, command):
        order = load_order(command.order_id, is_admin=True)
        order.change_status(command.status)
        current_domain.repository_for(Order).add(order)
        logger.info("Order status changed", order_id=str(order.id), status=order.status)
