"""User aggregate root with its role tag."""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, Integer, String

from storefront.domain import storefront
from storefront.identity.user.credentials import hash_password, verify_password
from storefront.identity.user.events import UserLoggedIn, UserRegistered


class Role(Enum):
    """Authorization tags a user can carry."""

    CUSTOMER = "Customer"
    ADMINISTRATOR = "Administrator"
    EXECUTOR = "Executor"


@storefront.aggregate
class User:
    """A person who can log in: a customer, an administrator or an executor.

    The role decides which operations the user may perform. Administrator
    capabilities live in ``storefront.identity.administrator`` and check the
    role before acting, so there is a single user type for every role.
    """

    id: Integer(identifier=True)
    username: String(required=True, max_length=150, unique=True)
    password_hash: String(required=True, max_length=255)
    role: String(required=True, choices=Role)
    registered_at: DateTime()
    last_login_at: DateTime()

    @classmethod
    def register(cls, id, username, password, role):
        role = role.value if isinstance(role, Role) else role
        now = datetime.now(UTC)

        user = cls(
            id=id,
            username=username,
            password_hash=hash_password(password),
            role=role,
            registered_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=user.id,
                username=username,
                role=role,
                registered_at=now,
            )
        )
        return user

    def authenticate(self, password) -> bool:
        """Check a candidate password. Never raises."""
        return verify_password(password, self.password_hash)

    def has_role(self, role) -> bool:
        role = role.value if isinstance(role, Role) else role
        return self.role == role

    def record_login(self):
        now = datetime.now(UTC)
        self.last_login_at = now

        self.raise_(
            UserLoggedIn(
                user_id=self.id,
                logged_in_at=now,
            )
        )

    def __str__(self):
        return self.username
