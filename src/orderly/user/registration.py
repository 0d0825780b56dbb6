"""User sign-up — command and handler.

The clear-text password never enters the domain: callers hash it first, so
commands (which Protean records) only ever carry the bcrypt hash.
"""

from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from orderly.domain import orderly
from orderly.errors import BadRequestError, ErrorCode
from orderly.user.user import User
from orderly.utils.logging import get_logger

logger = get_logger(__name__)


@orderly.command(part_of="User")
class RegisterUser:
    username: String(required=True, min_length=4, max_length=100)
    email: String(required=True, max_length=254)
    password_hash: String(required=True, max_length=255)
    phone: String(max_length=20)


@orderly.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.find_by_email(command.email) is not None:
            raise BadRequestError("User already exists", ErrorCode.USER_ALREADY_EXISTS)

        user = User.register(
            username=command.username,
            email=command.email,
            password_hash=command.password_hash,
            phone=command.phone,
        )
        repo.add(user)
        logger.info("User registered", user_id=str(user.id))
        return str(user.id)
