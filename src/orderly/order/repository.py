"""Repository for the Order aggregate."""

from orderly import config
from orderly.domain import orderly
from orderly.order.order import Order


@orderly.repository(part_of=Order)
class OrderRepository:
    def page(self, user_id=None, status=None, offset: int = 0, limit: int = config.ORDER_PAGE_SIZE) -> list[Order]:
        """One window of orders, newest first.

        ``user_id`` and ``status`` narrow the result by exact match when given.
        """
        criteria = {}
        if user_id is not None:
            criteria["user_id"] = str(user_id)
        if status is not None:
            criteria["status"] = status

        query = self._dao.query
        if criteria:
            query = query.filter(**criteria)
        return query.order_by("-created_at").offset(offset).limit(limit).all().items
