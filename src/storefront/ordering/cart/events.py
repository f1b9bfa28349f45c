"""Domain events for the ShoppingCart aggregate."""

from protean.fields import Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="ShoppingCart")
class CartCreated:
    """A customer opened a new shopping cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    customer_id = Integer(required=True)


@storefront.event(part_of="ShoppingCart")
class CartItemAdded:
    """A product was added to the shopping cart as a new line item."""

    __version__ = 1

    cart_id = Identifier(required=True)
    item_id = Identifier(required=True)
    product_id = Integer(required=True)
    product_name = String(required=True)
    unit_price = Float(required=True)
    quantity = Integer(required=True)


@storefront.event(part_of="ShoppingCart")
class CartItemRemoved:
    """A line item was removed from the shopping cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    item_id = Identifier(required=True)
