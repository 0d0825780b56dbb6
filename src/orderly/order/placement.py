"""Order placement — turns the caller's cart into an order in one unit of work.

Everything the order needs is read first (cart, product prices, shipping
address). Only then are the order added and the cart cleared, both in the
command's unit of work, so a failure at any step leaves neither an order nor
a partially emptied cart behind.
"""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from orderly.address.address import Address
from orderly.cart.cart import Cart
from orderly.domain import orderly
from orderly.errors import ErrorCode, NotFoundError
from orderly.order.order import Order
from orderly.product.management import load_product
from orderly.user.profile import load_address, load_user
from orderly.utils.logging import get_logger

logger = get_logger(__name__)


@orderly.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)


def shipping_address_of(user) -> Address:
    """The user's shipping address, which must exist and be owned by them."""
    address_missing = NotFoundError("Shipping address not found", ErrorCode.ADDRESS_NOT_FOUND)
    if not user.shipping_address_id:
        raise address_missing

    address = load_address(user.shipping_address_id)
    if not address.belongs_to(user.id):
        raise address_missing
    return address


@orderly.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        """Returns the new order's id, or None when the cart is empty."""
        cart_repo = current_domain.repository_for(Cart)
        cart = cart_repo.for_user(command.user_id)
        if cart is None or not cart.items:
            logger.info("Order not placed, cart is empty", user_id=str(command.user_id))
            return None

        lines = [(item.product_id, item.quantity, load_product(item.product_id).price) for item in cart.items]

        user = load_user(command.user_id)
        address = shipping_address_of(user)

        order = Order.place(
            user_id=user.id,
            address=address.formatted_address,
            lines=lines,
        )
        current_domain.repository_for(Order).add(order)

        cart.clear()
        cart_repo.add(cart)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            user_id=str(user.id),
            net_amount=order.net_amount,
            items_count=len(lines),
        )
        return str(order.id)
