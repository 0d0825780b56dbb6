"""Cart aggregate: one per user, one line per product."""

from datetime import UTC, datetime

from protean.fields import DateTime, HasMany, Identifier, Integer

from orderly.cart.events import (
    CartCleared,
    CartItemAdded,
    CartItemRemoved,
    CartQuantityChanged,
)
from orderly.domain import orderly
from orderly.errors import ErrorCode, NotFoundError


@orderly.entity(part_of="Cart")
class CartItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()


@orderly.aggregate
class Cart:
    user_id = Identifier(required=True, unique=True)
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def open_for(cls, user_id):
        now = datetime.now(UTC)
        return cls(user_id=user_id, created_at=now, updated_at=now)

    def line_for(self, product_id):
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def _existing_line(self, product_id):
        item = self.line_for(product_id)
        if item is None:
            raise NotFoundError("Cart item not found", ErrorCode.CART_ITEM_NOT_FOUND)
        return item

    def add_item(self, product_id, quantity):
        """Add a product, accumulating onto its line when already present."""
        now = datetime.now(UTC)

        existing = self.line_for(product_id)
        if existing:
            existing.quantity += quantity
            line_quantity = existing.quantity
        else:
            self.add_items(CartItem(product_id=product_id, quantity=quantity, added_at=now))
            line_quantity = quantity

        self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                product_id=str(product_id),
                quantity=quantity,
                line_quantity=line_quantity,
            )
        )

    def change_quantity(self, product_id, new_quantity):
        item = self._existing_line(product_id)

        previous_quantity = item.quantity
        item.quantity = new_quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartQuantityChanged(
                cart_id=str(self.id),
                product_id=str(product_id),
                previous_quantity=previous_quantity,
                new_quantity=new_quantity,
            )
        )

    def remove_item(self, product_id):
        item = self._existing_line(product_id)

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(CartItemRemoved(cart_id=str(self.id), product_id=str(product_id)))

    def clear(self):
        """Drop every line. Used when the cart is turned into an order."""
        items_count = len(self.items)
        for item in list(self.items):
            self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartCleared(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                items_count=items_count,
            )
        )
