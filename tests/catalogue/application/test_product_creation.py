"""Application tests for adding products through commands."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError
from storefront.catalogue.category.management import CreateCategory
from storefront.catalogue.product.creation import AddProduct
from storefront.catalogue.product.product import Product


@pytest.fixture
def computers():
    current_domain.process(CreateCategory(category_id=1, name="Electronics"), asynchronous=False)
    current_domain.process(CreateCategory(category_id=2, name="Computers", parent_id=1), asynchronous=False)
    return 2


class TestAddProductCommand:
    def test_add_product_persists(self, computers):
        product_id = current_domain.process(
            AddProduct(product_id=1, name="Gaming Laptop", price=1500.00, category_id=computers),
            asynchronous=False,
        )
        assert product_id == 1

        product = current_domain.repository_for(Product).get(1)
        assert product.name == "Gaming Laptop"
        assert product.price == 1500.00
        assert product.category_id == computers

    def test_unknown_category_rejected(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(
                AddProduct(product_id=1, name="Gaming Laptop", price=1500.00, category_id=42),
                asynchronous=False,
            )

    def test_duplicate_product_rejected(self, computers):
        current_domain.process(
            AddProduct(product_id=1, name="Gaming Laptop", price=1500.00, category_id=computers),
            asynchronous=False,
        )
        with pytest.raises(ValidationError):
            current_domain.process(
                AddProduct(product_id=1, name="Desktop", price=900.00, category_id=computers),
                asynchronous=False,
            )

    def test_negative_price_rejected_by_command(self, computers):
        with pytest.raises(ValidationError):
            AddProduct(product_id=1, name="Broken", price=-5.0, category_id=computers)
