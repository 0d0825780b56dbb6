"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, String, Text

from orderly.domain import orderly


@orderly.event(part_of="Product")
class ProductCreated:
    """A new product was added to the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    created_at: DateTime(required=True)


@orderly.event(part_of="Product")
class ProductUpdated:
    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    description: Text()
    tags: String()


@orderly.event(part_of="Product")
class ProductPriceChanged:
    """The catalogue price moved. Orders already placed keep their own unit prices."""

    __version__ = 1

    product_id: Identifier(required=True)
    previous_price: Float(required=True)
    new_price: Float(required=True)

