"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Identifier, Integer, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A customer placed an order from the contents of a shopping cart."""

    __version__ = 1

    order_id = Integer(required=True)
    customer_id = Integer(required=True)
    cart_id = Identifier()
    items = Text(required=True)  # JSON: list of {product_id, product_name, unit_price, quantity}
    total = String(required=True)  # Decimal rendered as string
    placed_at = DateTime(required=True)


@storefront.event(part_of="Order")
class ExecutorAssigned:
    """An executor was made responsible for fulfilling the order."""

    __version__ = 1

    order_id = Integer(required=True)
    executor_id = Integer(required=True)
    previous_executor_id = Integer()


@storefront.event(part_of="Order")
class ExecutorAssignmentRejected:
    """A user without the Executor role was proposed as the order's executor."""

    __version__ = 1

    order_id = Integer(required=True)
    user_id = Integer(required=True)
    role = String()


@storefront.event(part_of="Order")
class OrderStatusUpdated:
    """The order moved to a new status."""

    __version__ = 1

    order_id = Integer(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    updated_at = DateTime(required=True)

