"""Product aggregate root."""

from datetime import UTC, datetime

from protean.fields import DateTime, Float, Integer, String

from storefront.catalogue.product.events import ProductAdded
from storefront.domain import storefront
from storefront.shared.money import Money


@storefront.aggregate
class Product:
    """A catalogue item sold at a fixed price within one category.

    Products are not modified after they are added. Carts and orders copy
    the name and price they need instead of holding on to the product.
    """

    id: Integer(identifier=True)
    name: String(required=True, max_length=255)
    price: Float(required=True, min_value=0.0)
    category_id: Integer(required=True)
    created_at: DateTime()

    @classmethod
    def create(cls, id, name, price, category):
        product = cls(
            id=id,
            name=name,
            price=price,
            category_id=category.id,
            created_at=datetime.now(UTC),
        )
        product.raise_(
            ProductAdded(
                product_id=product.id,
                name=name,
                price=product.price,
                category_id=product.category_id,
            )
        )
        return product

    def unit_price(self):
        return Money(amount=self.price).to_decimal()

    def __str__(self):
        return f"{self.name} - {Money(amount=self.price)}"
