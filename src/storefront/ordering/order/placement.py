"""Order placement — command and handler.

The cart is left as it is: the order holds its own copy of the items, and
the customer may keep changing the cart afterwards.
"""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.ordering.cart.cart import ShoppingCart
from storefront.ordering.order.order import Order

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Order")
class PlaceOrder:
    order_id = Integer(required=True)
    cart_id = Identifier(required=True)


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        repo = current_domain.repository_for(Order)

        try:
            repo.get(command.order_id)
        except ObjectNotFoundError:
            pass
        else:
            raise ValidationError({"order_id": [f"Order {command.order_id} already exists"]})

        cart = current_domain.repository_for(ShoppingCart).get(command.cart_id)

        order = Order.create(
            id=command.order_id,
            customer_id=cart.customer_id,
            cart_items=cart.items,
            cart_id=cart.id,
        )
        repo.add(order)

        logger.info(
            "Order placed",
            order_id=order.id,
            customer_id=order.customer_id,
            cart_id=str(cart.id),
            item_count=len(order.items),
            total=str(order.get_total()),
        )
        return order.id
