"""User registration — command and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Integer, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.user.user import Role, User


@storefront.command(part_of="User")
class RegisterUser:
    user_id: Integer(required=True)
    username: String(required=True, max_length=150)
    password: String(required=True, max_length=255)
    role: String(required=True, choices=Role)


@storefront.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)

        try:
            repo.get(command.user_id)
        except ObjectNotFoundError:
            pass
        else:
            raise ValidationError({"user_id": [f"User {command.user_id} already exists"]})

        user = User.register(
            id=command.user_id,
            username=command.username,
            password=command.password,
            role=command.role,
        )
        repo.add(user)
        return user.id
