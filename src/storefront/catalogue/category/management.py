"""Category management — command and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Integer, String
from protean.utils.globals import current_domain

from storefront.catalogue.category.category import Category
from storefront.domain import storefront


@storefront.command(part_of="Category")
class CreateCategory:
    category_id: Integer(required=True)
    name: String(required=True, max_length=100)
    parent_id: Integer()


@storefront.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        repo = current_domain.repository_for(Category)

        try:
            repo.get(command.category_id)
        except ObjectNotFoundError:
            pass
        else:
            raise ValidationError({"category_id": [f"Category {command.category_id} already exists"]})

        parent = repo.get(command.parent_id) if command.parent_id is not None else None

        category = Category.create(
            id=command.category_id,
            name=command.name,
            parent=parent,
        )
        repo.add(category)
        if parent is not None:
            repo.add(parent)

        return category.id
