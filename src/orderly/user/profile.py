"""User profile and address links — command and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from orderly.address.address import Address
from orderly.domain import orderly
from orderly.errors import ErrorCode, NotFoundError
from orderly.user.user import User


@orderly.command(part_of="User")
class UpdateUser:
    """Partial update: fields left empty keep their current value."""

    user_id: Identifier(required=True)
    username: String(min_length=4, max_length=100)
    phone: String(max_length=20)
    shipping_address_id: Identifier()
    billing_address_id: Identifier()


def load_user(user_id) -> User:
    try:
        return current_domain.repository_for(User).get(user_id)
    except ObjectNotFoundError:
        raise NotFoundError("User not found", ErrorCode.USER_NOT_FOUND) from None


def load_address(address_id) -> Address:
    try:
        return current_domain.repository_for(Address).get(address_id)
    except ObjectNotFoundError:
        raise NotFoundError("Address not found", ErrorCode.ADDRESS_NOT_FOUND) from None


@orderly.command_handler(part_of=User)
class UpdateUserHandler:
    @handle(UpdateUser)
    def update_user(self, command):
        user = load_user(command.user_id)

        changes = {}
        if command.username:
            changes["username"] = command.username
        if command.phone is not None:
            changes["phone"] = command.phone
        if command.shipping_address_id:
            changes["shipping_address"] = load_address(command.shipping_address_id)
        if command.billing_address_id:
            changes["billing_address"] = load_address(command.billing_address_id)

        user.update_profile(**changes)
        current_domain.repository_for(User).add(user)
