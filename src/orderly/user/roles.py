"""Role management — command and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from orderly.domain import orderly
from orderly.user.profile import load_user
from orderly.user.user import User, UserRole
from orderly.utils.logging import get_logger

logger = get_logger(__name__)


@orderly.command(part_of="User")
class ChangeUserRole:
    user_id: Identifier(required=True)
    role: String(required=True, choices=UserRole)


@orderly.command_handler(part_of=User)
class ChangeUserRoleHandler:
    @handle(ChangeUserRole)
    def change_user_role(self, command):
        user = load_user(command.user_id)
        user.change_role(command.role)
        current_domain.repository_for(User).add(user)
        logger.info("User role changed", user_id=str(user.id), role=user.role)
