"""Cart management — command and handler."""

from protean import handle
from protean.fields import Integer
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.user.user import User
from storefront.ordering.cart.cart import ShoppingCart


@storefront.command(part_of="ShoppingCart")
class CreateCart:
    """Open a new shopping cart for a registered user."""

    customer_id = Integer(required=True)


@storefront.command_handler(part_of=ShoppingCart)
class ManageCartHandler:
    @handle(CreateCart)
    def create_cart(self, command):
        customer = current_domain.repository_for(User).get(command.customer_id)

        cart = ShoppingCart.create(customer_id=customer.id)
        current_domain.repository_for(ShoppingCart).add(cart)
        return str(cart.id)
