"""Product aggregate root."""

from datetime import datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, String, Text

from orderly.domain import orderly

TAG_SEPARATOR = ","


def join_tags(tags) -> str:
    """Flatten a collection of tags into the stored comma-delimited form."""
    if not tags:
        return ""
    cleaned = []
    for tag in tags:
        tag = tag.strip()
        if tag and tag not in cleaned:
            cleaned.append(tag)
    return TAG_SEPARATOR.join(cleaned)


@orderly.aggregate
class Product:
    """A sellable item.

    Tags are kept as a single comma-delimited string so that text search can
    match against them like any other column; ``tag_set`` rebuilds the set.
    """

    name: String(required=True, min_length=4, max_length=255)
    description: Text(required=True)
    price: Float(required=True)
    tags: String(max_length=1000, default="")
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @invariant.post
    def price_must_be_positive(self):
        if self.price is not None and self.price <= 0:
            raise ValidationError({"price": ["Price must be greater than zero"]})

    @invariant.post
    def description_must_be_meaningful(self):
        if self.description is not None and len(self.description.strip()) < 4:
            raise ValidationError({"description": ["Description must be at least 4 characters"]})

    @property
    def tag_set(self) -> set[str]:
        if not self.tags:
            return set()
        return {tag for tag in self.tags.split(TAG_SEPARATOR) if tag}

    @classmethod
    def create(cls, name, description, price, tags=None):
        from orderly.product.events import ProductCreated

        now = datetime.now()
        product = cls(
            name=name,
            description=description,
            price=price,
            tags=join_tags(tags),
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductCreated(
                product_id=product.id,
                name=name,
                price=price,
                created_at=now,
            )
        )
        return product

    def update_details(self, name=None, description=None, price=None, tags=None):
        from orderly.product.events import ProductPriceChanged, ProductUpdated

        previous_price = self.price

        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        if price is not None:
            self.price = price
        if tags is not None:
            self.tags = join_tags(tags)

        self.updated_at = datetime.now()

        self.raise_(
            ProductUpdated(
                product_id=self.id,
                name=self.name,
                description=self.description,
                tags=self.tags,
            )
        )
        if price is not None and price != previous_price:
            self.raise_(
                ProductPriceChanged(
                    product_id=self.id,
                    previous_price=previous_price,
                    new_price=self.price,
                )
            )
