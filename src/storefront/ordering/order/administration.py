"""Order administration — executor assignment and status changes.

Both commands name the acting administrator. The handler loads that user,
wraps it in ``Administrator`` (which refuses users without the Administrator
role) and lets it act on the order.
"""

from protean import handle
from protean.fields import Integer, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.administrator import Administrator
from storefront.identity.user.user import User
from storefront.ordering.order.order import Order, OrderStatus


def transitions_enforced():
    """Whether the domain is configured to reject unexpected status moves."""
    custom = current_domain.config.get("custom") or {}
    return bool(custom.get("enforce_order_transitions", False))


@storefront.command(part_of="Order")
class AssignExecutor:
    order_id = Integer(required=True)
    administrator_id = Integer(required=True)
    executor_id = Integer(required=True)


@storefront.command(part_of="Order")
class UpdateOrderStatus:
    order_id = Integer(required=True)
    administrator_id = Integer(required=True)
    status = String(required=True, choices=OrderStatus)


@storefront.command_handler(part_of=Order)
class OrderAdministrationHandler:
    @handle(AssignExecutor)
    def assign_executor(self, command):
        users = current_domain.repository_for(User)
        administrator = Administrator(users.get(command.administrator_id))
        executor = users.get(command.executor_id)

        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)

        assigned = administrator.assign_order(order, executor)
        repo.add(order)
        return assigned

    @handle(UpdateOrderStatus)
    def update_order_status(self, command):
        administrator = Administrator(current_domain.repository_for(User).get(command.administrator_id))

        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)

        administrator.update_order_status(
            order,
            command.status,
            enforce_transitions=transitions_enforced(),
        )
        repo.add(order)
