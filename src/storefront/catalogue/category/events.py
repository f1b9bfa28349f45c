"""Domain events for the Category aggregate."""

from protean.fields import Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Category")
class CategoryCreated:
    """A new category was added to the taxonomy."""

    __version__ = 1

    category_id: Integer(required=True)
    name: String(required=True)
    parent_id: Integer()


@storefront.event(part_of="Category")
class SubcategoryAttached:
    """A child category was linked under an existing category."""

    __version__ = 1

    category_id: Integer(required=True)
    subcategory_id: Integer(required=True)
