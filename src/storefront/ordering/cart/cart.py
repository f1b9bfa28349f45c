"""Shopping Cart aggregate — the customer's selection before an order is placed.

Each call to ``add_product`` records a separate line item, even for a product
already in the cart. Items keep the product name and price seen at the time
they were added, so the total never needs to look the product up again.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Integer, String

from storefront.domain import storefront
from storefront.ordering.cart.events import CartCreated, CartItemAdded, CartItemRemoved
from storefront.shared.money import format_amount, sum_lines


@storefront.entity(part_of="ShoppingCart")
class CartItem:
    product_id = Integer(required=True)
    product_name = String(required=True, max_length=255)
    unit_price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()

    def __str__(self):
        return f"{self.product_name} x {self.quantity}"


@storefront.aggregate
class ShoppingCart:
    customer_id = Integer(required=True)
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, customer_id):
        now = datetime.now(UTC)
        cart = cls(
            customer_id=customer_id,
            created_at=now,
            updated_at=now,
        )
        cart.raise_(
            CartCreated(
                cart_id=str(cart.id),
                customer_id=customer_id,
            )
        )
        return cart

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_product(self, product, quantity):
        """Append a line item for ``quantity`` units of ``product``."""
        if quantity is None or quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        now = datetime.now(UTC)
        item = CartItem(
            product_id=product.id,
            product_name=product.name,
            unit_price=product.price,
            quantity=quantity,
            added_at=now,
        )
        self.add_items(item)
        self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                item_id=str(item.id),
                product_id=product.id,
                product_name=product.name,
                unit_price=product.price,
                quantity=quantity,
            )
        )
        return item

    def remove_item(self, item_id):
        """Remove a single line item from the cart."""
        item = next((i for i in self.items if str(i.id) == str(item_id)), None)
        if item is None:
            raise ValidationError({"item_id": ["Item not found in cart"]})

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemRemoved(
                cart_id=str(self.id),
                item_id=str(item_id),
            )
        )

    # -------------------------------------------------------------------
    # Totals
    # -------------------------------------------------------------------
    def get_total(self):
        """Sum of price times quantity over the current items, as a Decimal."""
        return sum_lines(self.items)

    def __str__(self):
        lines = [str(item) for item in self.items]
        lines.append(f"Total: {format_amount(self.get_total())}")
        return "\n".join(lines)
