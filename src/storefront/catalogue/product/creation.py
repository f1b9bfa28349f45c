"""Product creation — command and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Float, Integer, String
from protean.utils.globals import current_domain

from storefront.catalogue.category.category import Category
from storefront.catalogue.product.product import Product
from storefront.domain import storefront


@storefront.command(part_of="Product")
class AddProduct:
    product_id: Integer(required=True)
    name: String(required=True, max_length=255)
    price: Float(required=True, min_value=0.0)
    category_id: Integer(required=True)


@storefront.command_handler(part_of=Product)
class AddProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        repo = current_domain.repository_for(Product)

        try:
            repo.get(command.product_id)
        except ObjectNotFoundError:
            pass
        else:
            raise ValidationError({"product_id": [f"Product {command.product_id} already exists"]})

        category = current_domain.repository_for(Category).get(command.category_id)

        product = Product.create(
            id=command.product_id,
            name=command.name,
            price=command.price,
            category=category,
        )
        repo.add(product)
        return product.id
