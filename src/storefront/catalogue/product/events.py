"""Domain events for the Product aggregate."""

from protean.fields import Float, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductAdded:
    """A product was added to the catalogue under a category."""

    __version__ = 1

    product_id: Integer(required=True)
    name: String(required=True)
    price: Float(required=True)
    category_id: Integer(required=True)
