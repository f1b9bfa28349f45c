"""Category aggregate root for the product taxonomy."""

import json
from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Integer, String, Text

from storefront.catalogue.category.events import CategoryCreated, SubcategoryAttached
from storefront.domain import storefront


@storefront.aggregate
class Category:
    """A node in the product taxonomy tree.

    The tree is held as an arena: each node stores its parent's id and the ids
    of its subcategories, and nodes are looked up through the repository. A
    node's parent is fixed when it is created; the parent learns about the new
    child at the same moment, so ``child.parent_id == parent.id`` holds exactly
    when ``child.id in parent.children``.
    """

    id: Integer(identifier=True)
    name: String(required=True, max_length=100)
    parent_id: Integer()
    subcategories: Text()  # JSON array of child category ids, in insertion order
    created_at: DateTime()

    @classmethod
    def create(cls, id, name, parent=None):
        if parent is not None and parent.id == id:
            raise ValidationError({"parent_id": ["A category cannot be its own parent"]})

        category = cls(
            id=id,
            name=name,
            parent_id=parent.id if parent is not None else None,
            subcategories=json.dumps([]),
            created_at=datetime.now(UTC),
        )
        category.raise_(
            CategoryCreated(
                category_id=category.id,
                name=name,
                parent_id=category.parent_id,
            )
        )

        if parent is not None:
            parent.attach_subcategory(category)

        return category

    @property
    def children(self):
        """Ids of the direct subcategories, oldest first."""
        return json.loads(self.subcategories) if self.subcategories else []

    @property
    def is_root(self):
        return self.parent_id is None

    def attach_subcategory(self, child):
        if child.parent_id != self.id:
            raise ValidationError({"subcategories": [f"Category {child.id} does not belong under {self.id}"]})

        children = self.children
        if child.id in children:
            return

        children.append(child.id)
        self.subcategories = json.dumps(children)

        self.raise_(
            SubcategoryAttached(
                category_id=self.id,
                subcategory_id=child.id,
            )
        )

    def __str__(self):
        return self.name
