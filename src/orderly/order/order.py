"""Order aggregate (CQRS) — created once from a cart, then moved through statuses.

Status lifecycle:
    PENDING → ACCEPTED → OUT_FOR_DELIVERY → DELIVERED
    CANCELLED reachable from any non-terminal status

DELIVERED and CANCELLED are terminal. Between non-terminal statuses any
target is accepted. Every status an order enters, including the initial
PENDING, is recorded as an OrderEvent that is never edited or removed.
"""

from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from orderly.domain import orderly
from orderly.errors import BadRequestError, ErrorCode
from orderly.order.events import OrderCancelled, OrderPlaced, OrderStatusChanged


class OrderStatus(Enum):
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    OUT_FOR_DELIVERY = "OUT_FOR_DELIVERY"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


TERMINAL_STATUSES = {OrderStatus.DELIVERED, OrderStatus.CANCELLED}


def order_total(lines) -> Decimal:
    """Exact sum of quantity × unit price over ``(quantity, unit_price)`` pairs.

    Prices go through ``str`` so a float such as 0.1 counts as 0.1, not its
    binary expansion. The result is not rounded.
    """
    return sum(
        (Decimal(quantity) * Decimal(str(unit_price)) for quantity, unit_price in lines),
        Decimal("0"),
    )


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@orderly.entity(part_of="Order")
class OrderProduct:
    """One line of the order, priced at placement time."""

    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True)


@orderly.entity(part_of="Order")
class OrderEvent:
    status = String(required=True, choices=OrderStatus)
    created_at = DateTime(required=True)


# ---------------------------------------------------------------------------
# Aggregate
# ---------------------------------------------------------------------------
@orderly.aggregate
class Order:
    user_id = Identifier(required=True)
    net_amount = Float(required=True)
    address = String(required=True, max_length=1000)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    products = HasMany(OrderProduct)
    order_events = HasMany(OrderEvent)
    created_at = DateTime()
    updated_at = DateTime()

    @property
    def is_terminal(self) -> bool:
        return OrderStatus(self.status) in TERMINAL_STATUSES

    def belongs_to(self, user_id) -> bool:
        return str(self.user_id) == str(user_id)

    def history(self) -> list:
        """Status events, oldest first."""
        return sorted(self.order_events, key=lambda e: e.created_at)

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, user_id, address, lines):
        """Create an order from ``(product_id, quantity, unit_price)`` lines."""
        lines = list(lines)
        if not lines:
            raise ValidationError({"products": ["An order must contain at least one product"]})

        now = datetime.now(UTC)
        net_amount = order_total((quantity, unit_price) for _, quantity, unit_price in lines)

        order = cls(
            user_id=user_id,
            net_amount=float(net_amount),
            address=address,
            status=OrderStatus.PENDING.value,
            products=[
                OrderProduct(product_id=product_id, quantity=quantity, unit_price=unit_price)
                for product_id, quantity, unit_price in lines
            ],
            order_events=[OrderEvent(status=OrderStatus.PENDING.value, created_at=now)],
            created_at=now,
            updated_at=now,
        )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_id=str(user_id),
                net_amount=order.net_amount,
                items_count=len(order.products),
                address=address,
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Status changes
    # -------------------------------------------------------------------
    def _enter(self, new_status: OrderStatus):
        if self.is_terminal:
            raise BadRequestError(
                f"Order is already {self.status} and can no longer change status",
                ErrorCode.ORDER_STATUS_LOCKED,
            )

        now = datetime.now(UTC)
        previous_status = self.status
        self.status = new_status.value
        self.add_order_events(OrderEvent(status=new_status.value, created_at=now))
        self.updated_at = now
        return previous_status, now

    def change_status(self, new_status):
        try:
            target = OrderStatus(new_status)
        except ValueError:
            raise ValidationError({"status": [f"Unknown order status: {new_status!r}"]}) from None

        previous_status, now = self._enter(target)

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                previous_status=previous_status,
                new_status=self.status,
                changed_at=now,
            )
        )

    def cancel(self):
        previous_status, now = self._enter(OrderStatus.CANCELLED)

        self.raise_(
            OrderCancelled(
                order_id=str(self.id),
                user_id=str(self.user_id),
                previous_status=previous_status,
                cancelled_at=now,
            )
        )
