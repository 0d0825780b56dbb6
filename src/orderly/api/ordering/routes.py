"""FastAPI endpoints for the cart and for orders."""

from fastapi import APIRouter, Query
from protean.utils.globals import current_domain

from orderly.api.auth import AdminUser, CurrentUser
from orderly.api.ordering.schemas import (
    AddToCartRequest,
    CartIdResponse,
    CartLineResponse,
    CartResponse,
    ChangeQuantityRequest,
    ChangeStatusRequest,
    MessageResponse,
    OrderEventResponse,
    OrderProductResponse,
    OrderResponse,
    StatusResponse,
)
from orderly.cart.cart import Cart
from orderly.cart.items import AddToCart, ChangeCartQuantity, RemoveFromCart
from orderly.errors import BadRequestError, ErrorCode
from orderly.order.order import Order, OrderStatus, order_total
from orderly.order.placement import PlaceOrder
from orderly.order.status import CancelOrder, ChangeOrderStatus, load_order
from orderly.product.product import Product

cart_router = APIRouter(prefix="/cart", tags=["cart"])
order_router = APIRouter(prefix="/orders", tags=["orders"])

StatusFilter = Query(None, description="Exact match on order status")
OffsetParam = Query(0, ge=0)


def _order_response(order: Order) -> OrderResponse:
    return OrderResponse(
        id=str(order.id),
        user_id=str(order.user_id),
        net_amount=order.net_amount,
        address=order.address,
        status=order.status,
        products=[
            OrderProductResponse(product_id=str(p.product_id), quantity=p.quantity, unit_price=p.unit_price)
            for p in order.products
        ],
        events=[OrderEventResponse(status=e.status, created_at=e.created_at.isoformat()) for e in order.history()],
        created_at=order.created_at.isoformat() if order.created_at else None,
        updated_at=order.updated_at.isoformat() if order.updated_at else None,
    )


def _valid_status(status: str | None) -> str | None:
    if status is not None and status not in {s.value for s in OrderStatus}:
        raise BadRequestError(
            "Validation failed",
            ErrorCode.VALIDATION_FAILED,
            errors={"status": [f"Unknown order status: {status!r}"]},
        )
    return status


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
@cart_router.post("/create", status_code=201, response_model=CartIdResponse)
async def add_to_cart(body: AddToCartRequest, auth: CurrentUser) -> CartIdResponse:
    command = AddToCart(user_id=auth.user_id, product_id=body.product_id, quantity=body.quantity)
    cart_id = current_domain.process(command, asynchronous=False)
    return CartIdResponse(cart_id=cart_id)


@cart_router.get("/getCart", response_model=CartResponse)
async def get_cart(auth: CurrentUser) -> CartResponse:
    cart = current_domain.repository_for(Cart).for_user(auth.user_id)
    if cart is None:
        return CartResponse(items=[], total=0.0)

    product_repo = current_domain.repository_for(Product)
    lines = []
    for item in cart.items:
        product = product_repo.find(item.product_id)
        if product is None:
            lines.append(CartLineResponse(product_id=str(item.product_id), quantity=item.quantity, available=False))
            continue
        lines.append(
            CartLineResponse(
                product_id=str(item.product_id),
                name=product.name,
                price=product.price,
                quantity=item.quantity,
                line_total=float(order_total([(item.quantity, product.price)])),
            )
        )
    total = order_total((line.quantity, line.price) for line in lines if line.available)
    return CartResponse(items=lines, total=float(total))


@cart_router.put("/{product_id}/change", response_model=StatusResponse)
async def change_quantity(product_id: str, body: ChangeQuantityRequest, auth: CurrentUser) -> StatusResponse:
    command = ChangeCartQuantity(user_id=auth.user_id, product_id=product_id, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@cart_router.delete("/delete/{product_id}", response_model=StatusResponse)
async def remove_from_cart(product_id: str, auth: CurrentUser) -> StatusResponse:
    current_domain.process(RemoveFromCart(user_id=auth.user_id, product_id=product_id), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
@order_router.post("/create", response_model=OrderResponse | MessageResponse)
async def place_order(auth: CurrentUser) -> OrderResponse | MessageResponse:
    order_id = current_domain.process(PlaceOrder(user_id=auth.user_id), asynchronous=False)
    if order_id is None:
        return MessageResponse(message="No items in cart")
    return _order_response(load_order(order_id, user_id=auth.user_id))


@order_router.get("/getAll", response_model=list[OrderResponse])
async def list_my_orders(
    auth: CurrentUser,
    status: str | None = StatusFilter,
    offset: int = OffsetParam,
) -> list[OrderResponse]:
    orders = current_domain.repository_for(Order).page(
        user_id=auth.user_id, status=_valid_status(status), offset=offset
    )
    return [_order_response(o) for o in orders]


@order_router.get("/get/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str, auth: CurrentUser) -> OrderResponse:
    return _order_response(load_order(order_id, user_id=auth.user_id, is_admin=auth.is_admin))


@order_router.put("/cancel/{order_id}", response_model=OrderResponse)
async def cancel_order(order_id: str, auth: CurrentUser) -> OrderResponse:
    command = CancelOrder(order_id=order_id, user_id=auth.user_id, is_admin=auth.is_admin)
    current_domain.process(command, asynchronous=False)
    return _order_response(load_order(order_id, is_admin=True))


@order_router.get("", response_model=list[OrderResponse])
async def list_all_orders(
    auth: AdminUser,
    status: str | None = StatusFilter,
    offset: int = OffsetParam,
) -> list[OrderResponse]:
    orders = current_domain.repository_for(Order).page(status=_valid_status(status), offset=offset)
    return [_order_response(o) for o in orders]


@order_router.put("/status/{order_id}", response_model=OrderResponse)
async def change_order_status(order_id: str, body: ChangeStatusRequest, auth: AdminUser) -> OrderResponse:
    current_domain.process(ChangeOrderStatus(order_id=order_id, status=body.status), asynchronous=False)
    return _order_response(load_order(order_id, is_admin=True))


@order_router.get("/orderByUser/{user_id}", response_model=list[OrderResponse])
async def list_user_orders(
    user_id: str,
    auth: AdminUser,
    status: str | None = StatusFilter,
    offset: int = OffsetParam,
) -> list[OrderResponse]:
    orders = current_domain.repository_for(Order).page(user_id=user_id, status=_valid_status(status), offset=offset)
    return [_order_response(o) for o in orders]
