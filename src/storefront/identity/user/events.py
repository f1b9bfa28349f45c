"""Domain events for the User aggregate."""

from protean.fields import DateTime, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="User")
class UserRegistered:
    """A new user account was created with a role."""

    __version__ = 1

    user_id: Integer(required=True)
    username: String(required=True)
    role: String(required=True)
    registered_at: DateTime(required=True)


@storefront.event(part_of="User")
class UserLoggedIn:
    """A user presented valid credentials."""

    __version__ = 1

    user_id: Integer(required=True)
    logged_in_at: DateTime(required=True)
