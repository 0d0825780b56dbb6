"""Domain events for the Address aggregate."""

from protean.fields import Identifier, String

from orderly.domain import orderly


@orderly.event(part_of="Address")
class AddressAdded:
    """A user recorded a new address in their address book."""

    __version__ = 1

    address_id: Identifier(required=True)
    user_id: Identifier(required=True)
    formatted_address: String(required=True)
