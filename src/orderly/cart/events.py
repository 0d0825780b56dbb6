"""Domain events for the Cart aggregate."""

from protean.fields import Identifier, Integer

from orderly.domain import orderly


@orderly.event(part_of="Cart")
class CartItemAdded:
    """A product was put in the cart, or its existing line grew."""

    __version__ = 1

    cart_id = Identifier(required=True)
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    line_quantity = Integer(required=True)


@orderly.event(part_of="Cart")
class CartQuantityChanged:
    __version__ = 1

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@orderly.event(part_of="Cart")
class CartItemRemoved:
    __version__ = 1

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)


@orderly.event(part_of="Cart")
class CartCleared:
    """Every line was removed because the cart became an order."""

    __version__ = 1

    cart_id = Identifier(required=True)
    user_id = Identifier(required=True)
    items_count = Integer(required=True)
