"""Domain events for the User aggregate."""

from protean.fields import DateTime, Identifier, String

from orderly.domain import orderly


@orderly.event(part_of="User")
class UserRegistered:
    """A new account was created through sign-up."""

    __version__ = 1

    user_id: Identifier(required=True)
    username: String(required=True)
    email: String(required=True)
    registered_at: DateTime(required=True)


@orderly.event(part_of="User")
class UserProfileUpdated:
    """Username, phone or the shipping/billing address links changed."""

    __version__ = 1

    user_id: Identifier(required=True)
    username: String(required=True)
    phone: String()
    shipping_address_id: Identifier()
    billing_address_id: Identifier()


@orderly.event(part_of="User")
class UserRoleChanged:
    __version__ = 1

    user_id: Identifier(required=True)
    previous_role: String(required=True)
    new_role: String(required=True)
