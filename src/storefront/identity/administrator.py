"""Administrator capabilities over orders.

There is no separate administrator entity. ``Administrator`` wraps a
``User`` whose role is Administrator and exposes the two operations only
administrators may perform: assigning an executor to an order and changing
an order's status.
"""

import structlog
from protean.exceptions import ValidationError

from storefront.identity.user.user import Role

logger = structlog.get_logger(__name__)


class Administrator:
    def __init__(self, user):
        if not user.has_role(Role.ADMINISTRATOR):
            raise ValidationError({"administrator": [f"{user.username} does not have the Administrator role"]})
        self.user = user

    def assign_order(self, order, executor) -> bool:
        """Make ``executor`` responsible for ``order``.

        Returns False, leaving the order untouched, when ``executor`` does not
        carry the Executor role.
        """
        if not executor.has_role(Role.EXECUTOR):
            order.reject_executor(executor.id, executor.role)
            logger.warning(
                "Executor assignment rejected",
                order_id=order.id,
                user_id=executor.id,
                username=executor.username,
                role=executor.role,
                administrator_id=self.user.id,
            )
            return False

        order.assign_executor(executor.id)
        logger.info(
            "Order assigned to executor",
            order_id=order.id,
            executor_id=executor.id,
            administrator_id=self.user.id,
        )
        return True

    def update_order_status(self, order, new_status, enforce_transitions=False):
        order.update_status(new_status, enforce_transitions=enforce_transitions)
        logger.info(
            "Order status updated",
            order_id=order.id,
            status=order.status,
            administrator_id=self.user.id,
        )
