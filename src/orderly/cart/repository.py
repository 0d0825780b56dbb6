"""Repository for the Cart aggregate."""

from orderly.cart.cart import Cart
from orderly.domain import orderly


@orderly.repository(part_of=Cart)
class CartRepository:
    def for_user(self, user_id) -> Cart | None:
        """The user's cart, or None when nothing was ever added to it.

        Reading never creates a cart.
        """
        return self._dao.query.filter(user_id=str(user_id)).all().first
