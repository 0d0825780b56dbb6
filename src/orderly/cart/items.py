"""Cart line management — commands and handler."""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from orderly.cart.cart import Cart
from orderly.domain import orderly
from orderly.errors import ErrorCode, NotFoundError
from orderly.product.management import load_product


@orderly.command(part_of="Cart")
class AddToCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@orderly.command(part_of="Cart")
class ChangeCartQuantity:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@orderly.command(part_of="Cart")
class RemoveFromCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


def _cart_of(user_id) -> Cart:
    cart = current_domain.repository_for(Cart).for_user(user_id)
    if cart is None:
        raise NotFoundError("Cart item not found", ErrorCode.CART_ITEM_NOT_FOUND)
    return cart


@orderly.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        load_product(command.product_id)

        repo = current_domain.repository_for(Cart)
        cart = repo.for_user(command.user_id) or Cart.open_for(command.user_id)
        cart.add_item(product_id=command.product_id, quantity=command.quantity)
        repo.add(cart)
        return str(cart.id)

    @handle(ChangeCartQuantity)
    def change_cart_quantity(self, command):
        cart = _cart_of(command.user_id)
        cart.change_quantity(product_id=command.product_id, new_quantity=command.quantity)
        current_domain.repository_for(Cart).add(cart)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        cart = _cart_of(command.user_id)
        cart.remove_item(product_id=command.product_id)
        current_domain.repository_for(Cart).add(cart)
