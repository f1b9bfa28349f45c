"""Shared catalogue and user fixtures for ordering tests."""

import pytest
from protean import current_domain
from storefront.catalogue.category.management import CreateCategory
from storefront.catalogue.product.creation import AddProduct
from storefront.identity.user.registration import RegisterUser
from storefront.ordering.cart.management import CreateCart


@pytest.fixture
def catalogue():
    """Electronics > Computers/Smartphones with one product in each leaf."""
    for command in (
        CreateCategory(category_id=1, name="Electronics"),
        CreateCategory(category_id=2, name="Computers", parent_id=1),
        CreateCategory(category_id=3, name="Smartphones", parent_id=1),
        AddProduct(product_id=1, name="Gaming Laptop", price=1500.00, category_id=2),
        AddProduct(product_id=2, name="Smartphone", price=800.00, category_id=3),
    ):
        current_domain.process(command, asynchronous=False)


@pytest.fixture
def users():
    for command in (
        RegisterUser(user_id=1, username="john_doe", password="password123", role="Customer"),
        RegisterUser(user_id=2, username="admin", password="adminpass", role="Administrator"),
        RegisterUser(user_id=3, username="executor1", password="execpass", role="Executor"),
    ):
        current_domain.process(command, asynchronous=False)


@pytest.fixture
def cart_id(users):
    return current_domain.process(CreateCart(customer_id=1), asynchronous=False)
