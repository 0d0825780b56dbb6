"""Repository for the Product aggregate."""

from protean.utils.query import Q

from orderly import config
from orderly.domain import orderly
from orderly.product.product import Product


@orderly.repository(part_of=Product)
class ProductRepository:
    def newest(self, limit: int = config.PRODUCT_PAGE_SIZE):
        """Total product count and the most recently created products."""
        result = self._dao.query.order_by("-created_at").limit(limit).all()
        return result.total, result.items

    def search(self, term: str, limit: int = config.PRODUCT_PAGE_SIZE) -> list[Product]:
        """Case-insensitive match of ``term`` against name, description and tags."""
        term = term.strip()
        if not term:
            return []
        criteria = Q(name__icontains=term) | Q(description__icontains=term) | Q(tags__icontains=term)
        return self._dao.query.filter(criteria).order_by("-created_at").limit(limit).all().items

    def find(self, product_id) -> Product | None:
        return self._dao.query.filter(id=str(product_id)).all().first
