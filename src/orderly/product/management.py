"""Catalogue management — create, update and delete products."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Float, Identifier, List, String, Text
from protean.utils.globals import current_domain

from orderly.domain import orderly
from orderly.errors import ErrorCode, NotFoundError
from orderly.product.product import Product
from orderly.utils.logging import get_logger

logger = get_logger(__name__)


def load_product(product_id) -> Product:
    try:
        return current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        raise NotFoundError("Product not found", ErrorCode.PRODUCT_NOT_FOUND) from None


@orderly.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=255)
    description: Text(required=True)
    price: Float(required=True)
    tags: List(content_type=String)


@orderly.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    name: String(max_length=255)
    description: Text()
    price: Float()
    tags: List(content_type=String)


@orderly.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)


@orderly.command_handler(part_of=Product)
class ManageProductsHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            tags=command.tags,
        )
        current_domain.repository_for(Product).add(product)
        logger.info("Product created", product_id=str(product.id), price=product.price)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        product = load_product(command.product_id)
        product.update_details(
            name=command.name,
            description=command.description,
            price=command.price,
            # An omitted tag list arrives as []; only replace tags when some are sent
            tags=command.tags or None,
        )
        current_domain.repository_for(Product).add(product)

    @handle(DeleteProduct)
    def delete_product(self, command):
        product = load_product(command.product_id)
        current_domain.repository_for(Product)._dao.delete(product)
        logger.info("Product deleted", product_id=str(product.id))
