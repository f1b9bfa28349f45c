"""Order aggregate — a snapshot of a cart plus a fulfillment status.

Status lifecycle:
    PENDING → COMPLETED → RETURNED
    PENDING → RETURNED

The table above is the expected business flow. Administrators may still
move an order to any status; a move outside the table is logged, and is
rejected only when transition enforcement is switched on.
"""

import json
from datetime import UTC, datetime
from enum import Enum

import structlog
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from storefront.domain import storefront
from storefront.ordering.order.events import (
    ExecutorAssigned,
    ExecutorAssignmentRejected,
    OrderPlaced,
    OrderStatusUpdated,
)
from storefront.shared.money import format_amount, sum_lines

logger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"
    RETURNED = "Returned"


_EXPECTED_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.COMPLETED, OrderStatus.RETURNED},
    OrderStatus.COMPLETED: {OrderStatus.RETURNED},
    OrderStatus.RETURNED: set(),
}


def to_status(value):
    """Coerce an ``OrderStatus`` or its string value, rejecting unknown statuses."""
    try:
        return OrderStatus(value)
    except ValueError:
        raise ValidationError({"status": [f"Unknown order status: {value}"]}) from None


def is_expected_transition(current, target):
    return to_status(target) in _EXPECTED_TRANSITIONS[to_status(current)]


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@storefront.entity(part_of="Order")
class OrderItem:
    """A line of the order, copied from a cart item when the order was placed."""

    product_id = Integer(required=True)
    product_name = String(required=True, max_length=255)
    unit_price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)

    def __str__(self):
        return f"{self.product_name} x {self.quantity}"


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@storefront.aggregate
class Order:
    id = Integer(identifier=True)
    customer_id = Integer(required=True)
    cart_id = Identifier()
    items = HasMany(OrderItem)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    executor_id = Integer()
    placed_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, id, customer_id, cart_items, cart_id=None):
        """Place an order from a sequence of cart items.

        Every item is copied into a new ``OrderItem``; the order keeps no
        reference to the cart or its items.
        """
        order_items = [
            OrderItem(
                product_id=item.product_id,
                product_name=item.product_name,
                unit_price=item.unit_price,
                quantity=item.quantity,
            )
            for item in cart_items
        ]
        if not order_items:
            raise ValidationError({"items": ["An order needs at least one item"]})

        now = datetime.now(UTC)
        order = cls(
            id=id,
            customer_id=customer_id,
            cart_id=str(cart_id) if cart_id else None,
            items=order_items,
            status=OrderStatus.PENDING.value,
            placed_at=now,
            updated_at=now,
        )

        items_snapshot = [
            {
                "product_id": item.product_id,
                "product_name": item.product_name,
                "unit_price": item.unit_price,
                "quantity": item.quantity,
            }
            for item in order.items
        ]
        order.raise_(
            OrderPlaced(
                order_id=order.id,
                customer_id=customer_id,
                cart_id=order.cart_id,
                items=json.dumps(items_snapshot),
                total=str(order.get_total()),
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Executor assignment
    # -------------------------------------------------------------------
    def assign_executor(self, executor_id):
        previous_executor_id = self.executor_id
        self.executor_id = executor_id
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ExecutorAssigned(
                order_id=self.id,
                executor_id=executor_id,
                previous_executor_id=previous_executor_id,
            )
        )

    def reject_executor(self, user_id, role=None):
        """Record a refused assignment. The order itself does not change."""
        self.raise_(
            ExecutorAssignmentRejected(
                order_id=self.id,
                user_id=user_id,
                role=role,
            )
        )

    # -------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------
    def update_status(self, new_status, enforce_transitions=False):
        """Overwrite the order status.

        With ``enforce_transitions`` a move outside the expected lifecycle
        raises ``ValidationError`` and the status is left as it was.
        """
        current = to_status(self.status)
        target = to_status(new_status)

        if not is_expected_transition(current, target):
            if enforce_transitions:
                raise ValidationError({"status": [f"Cannot transition from {current.value} to {target.value}"]})
            logger.warning(
                "Unexpected order status transition",
                order_id=self.id,
                previous_status=current.value,
                new_status=target.value,
            )

        now = datetime.now(UTC)
        self.status = target.value
        self.updated_at = now

        self.raise_(
            OrderStatusUpdated(
                order_id=self.id,
                previous_status=current.value,
                new_status=target.value,
                updated_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Totals
    # -------------------------------------------------------------------
    def get_total(self):
        return sum_lines(self.items)

    def __str__(self):
        lines = [f"Order #{self.id} for customer #{self.customer_id}:"]
        lines.extend(str(item) for item in self.items)
        status_line = f"Status: {self.status}"
        if self.executor_id is not None:
            status_line += f", Executor: #{self.executor_id}"
        lines.append(status_line)
        lines.append(f"Total: {format_amount(self.get_total())}")
        return "\n".join(lines)
