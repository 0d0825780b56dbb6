"""Address book management — commands and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from orderly.address.address import Address
from orderly.domain import orderly
from orderly.errors import ErrorCode, NotFoundError
from orderly.user.profile import load_address, load_user
from orderly.user.user import User


@orderly.command(part_of="Address")
class AddAddress:
    user_id: Identifier(required=True)
    street: String(required=True, max_length=255)
    city: String(required=True, max_length=100)
    state: String(max_length=100)
    zip_code: String(required=True, max_length=20)
    country: String(required=True, max_length=100)


@orderly.command(part_of="Address")
class RemoveAddress:
    """Delete one of the caller's addresses, unlinking it from their profile."""

    user_id: Identifier(required=True)
    address_id: Identifier(required=True)


@orderly.command_handler(part_of=Address)
class ManageAddressesHandler:
    @handle(AddAddress)
    def add_address(self, command):
        load_user(command.user_id)

        address = Address.record(
            user_id=command.user_id,
            street=command.street,
            city=command.city,
            state=command.state,
            zip_code=command.zip_code,
            country=command.country,
        )
        current_domain.repository_for(Address).add(address)
        return str(address.id)

    @handle(RemoveAddress)
    def remove_address(self, command):
        address = load_address(command.address_id)
        # Someone else's address is reported exactly like a missing one
        if not address.belongs_to(command.user_id):
            raise NotFoundError("Address not found", ErrorCode.ADDRESS_NOT_FOUND)

        user = load_user(command.user_id)
        user.forget_address(address.id)
        current_domain.repository_for(User).add(user)

        current_domain.repository_for(Address)._dao.delete(address)
