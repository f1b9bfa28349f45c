"""Application tests for category creation through commands."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError
from storefront.catalogue.category.category import Category
from storefront.catalogue.category.management import CreateCategory


def _create_category(**kwargs):
    return current_domain.process(CreateCategory(**kwargs), asynchronous=False)


class TestCreateCategoryCommand:
    def test_create_root_category(self):
        category_id = _create_category(category_id=1, name="Electronics")
        assert category_id == 1

        category = current_domain.repository_for(Category).get(1)
        assert category.name == "Electronics"
        assert category.parent_id is None

    def test_create_child_updates_parent(self):
        _create_category(category_id=1, name="Electronics")
        _create_category(category_id=2, name="Computers", parent_id=1)
        _create_category(category_id=3, name="Smartphones", parent_id=1)

        repo = current_domain.repository_for(Category)
        electronics = repo.get(1)
        assert electronics.children == [2, 3]
        assert repo.get(2).parent_id == 1
        assert repo.get(3).parent_id == 1

    def test_unknown_parent_rejected(self):
        with pytest.raises(ObjectNotFoundError):
            _create_category(category_id=2, name="Computers", parent_id=99)

    def test_duplicate_id_rejected(self):
        _create_category(category_id=1, name="Electronics")
        with pytest.raises(ValidationError) as exc:
            _create_category(category_id=1, name="Garden")
        assert "already exists" in str(exc.value)

        assert current_domain.repository_for(Category).get(1).name == "Electronics"
