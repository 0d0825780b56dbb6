"""FastAPI endpoints for the product catalogue."""

from fastapi import APIRouter, Query
from protean.utils.globals import current_domain

from orderly.api.auth import AdminUser, CurrentUser
from orderly.api.catalogue.schemas import (
    CreateProductRequest,
    ProductListResponse,
    ProductResponse,
    StatusResponse,
    UpdateProductRequest,
)
from orderly.product.management import (
    CreateProduct,
    DeleteProduct,
    UpdateProduct,
    load_product,
)
from orderly.product.product import Product

product_router = APIRouter(prefix="/products", tags=["products"])


def _product_response(product: Product) -> ProductResponse:
    return ProductResponse(
        id=str(product.id),
        name=product.name,
        description=product.description,
        price=product.price,
        tags=sorted(product.tag_set),
        created_at=product.created_at.isoformat() if product.created_at else None,
        updated_at=product.updated_at.isoformat() if product.updated_at else None,
    )


@product_router.post("/create", status_code=201, response_model=ProductResponse)
async def create_product(body: CreateProductRequest, auth: AdminUser) -> ProductResponse:
    command = CreateProduct(
        name=body.name,
        description=body.description,
        price=body.price,
        tags=body.tags,
    )
    product_id = current_domain.process(command, asynchronous=False)
    return _product_response(load_product(product_id))


@product_router.get("/get", response_model=ProductListResponse)
async def list_products(auth: AdminUser) -> ProductListResponse:
    count, products = current_domain.repository_for(Product).newest()
    return ProductListResponse(count=count, products=[_product_response(p) for p in products])


@product_router.get("/get/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str, auth: AdminUser) -> ProductResponse:
    return _product_response(load_product(product_id))


@product_router.put("/update/{product_id}", response_model=ProductResponse)
async def update_product(product_id: str, body: UpdateProductRequest, auth: AdminUser) -> ProductResponse:
    # Fields left out of the body stay out of the command
    command = UpdateProduct(product_id=product_id, **body.model_dump(exclude_none=True))
    current_domain.process(command, asynchronous=False)
    return _product_response(load_product(product_id))


@product_router.delete("/delete/{product_id}", response_model=StatusResponse)
async def delete_product(product_id: str, auth: AdminUser) -> StatusResponse:
    current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
    return StatusResponse()


@product_router.get("/search", response_model=list[ProductResponse])
async def search_products(auth: CurrentUser, q: str = Query(..., min_length=1)) -> list[ProductResponse]:
    products = current_domain.repository_for(Product).search(q)
    return [_product_response(p) for p in products]
