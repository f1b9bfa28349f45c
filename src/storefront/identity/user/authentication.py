"""User login — command and handler.

A failed login is an expected outcome, not an error: the handler answers
``False`` for an unknown username or a wrong password alike and logs the
attempt.
"""

import structlog
from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.user.user import User

logger = structlog.get_logger(__name__)


def find_user_by_username(username):
    """Return the user registered under ``username``, or None."""
    users = current_domain.repository_for(User)._dao.query.filter(username=username).all().items
    return users[0] if users else None


@storefront.command(part_of="User")
class LogIn:
    username: String(required=True, max_length=150)
    password: String(required=True, max_length=255)


@storefront.command_handler(part_of=User)
class LogInHandler:
    @handle(LogIn)
    def log_in(self, command):
        user = find_user_by_username(command.username)

        if user is None or not user.authenticate(command.password):
            logger.warning("Authentication failed", username=command.username)
            return False

        user.record_login()
        current_domain.repository_for(User).add(user)

        logger.info("User authenticated", user_id=user.id, username=user.username)
        return True
