"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from orderly.domain import orderly


@orderly.event(part_of="Order")
class OrderPlaced:
    """A cart was turned into an order. Prices and address are frozen from here on."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    net_amount = Float(required=True)
    items_count = Integer(required=True)
    address = String(required=True)
    placed_at = DateTime(required=True)


@orderly.event(part_of="Order")
class OrderStatusChanged:
    __version__ = 1

    order_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    changed_at = DateTime(required=True)


@orderly.event(part_of="Order")
class OrderCancelled:
    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    previous_status = String(required=True)
    cancelled_at = DateTime(required=True)
