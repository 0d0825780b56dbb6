"""User aggregate root — credentials, role and address links."""

import re
from datetime import datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String

from orderly.domain import orderly
from orderly.errors import ErrorCode, NotFoundError

_EMAIL_PATTERN = re.compile(r"^[^@\s;,<>()\"]+@[^@\s;,<>()\"]+\.[^@\s;,<>()\"]+$")

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()


class UserRole(Enum):
    USER = "USER"
    ADMIN = "ADMIN"


@orderly.aggregate
class User:
    """A registered shopper or administrator.

    Only the bcrypt hash of the password is kept. The shipping and billing
    links point at Address aggregates, and both must be owned by this user.
    """

    username: String(required=True, min_length=4, max_length=100)
    email: String(required=True, max_length=254, unique=True)
    phone: String(max_length=20)
    password_hash: String(required=True, max_length=255)
    role: String(choices=UserRole, default=UserRole.USER.value)
    shipping_address_id: Identifier()
    billing_address_id: Identifier()
    created_at: DateTime(default=datetime.now)

    @invariant.post
    def email_must_be_well_formed(self):
        if self.email and not _EMAIL_PATTERN.match(self.email):
            raise ValidationError({"email": [f"Invalid email address: {self.email!r}"]})

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value

    @classmethod
    def register(cls, username, email, password_hash, phone=None):
        from orderly.user.events import UserRegistered

        now = datetime.now()
        user = cls(
            username=username,
            email=email.lower(),
            phone=phone,
            password_hash=password_hash,
            created_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=user.id,
                username=username,
                email=user.email,
                registered_at=now,
            )
        )
        return user

    def update_profile(self, username=_UNSET, phone=_UNSET, shipping_address=_UNSET, billing_address=_UNSET):
        """Apply a partial profile update.

        ``shipping_address`` and ``billing_address`` are Address aggregates (or
        None to unlink). Ownership is checked for both before anything changes.
        """
        from orderly.user.events import UserProfileUpdated

        for address in (shipping_address, billing_address):
            if address is not _UNSET and address is not None and not address.belongs_to(self.id):
                raise NotFoundError("Address does not belong to this user", ErrorCode.ADDRESS_NOT_FOR_USER)

        if username is not _UNSET:
            self.username = username
        if phone is not _UNSET:
            self.phone = phone
        if shipping_address is not _UNSET:
            self.shipping_address_id = shipping_address.id if shipping_address else None
        if billing_address is not _UNSET:
            self.billing_address_id = billing_address.id if billing_address else None

        self.raise_(
            UserProfileUpdated(
                user_id=self.id,
                username=self.username,
                phone=self.phone,
                shipping_address_id=self.shipping_address_id,
                billing_address_id=self.billing_address_id,
            )
        )

    def forget_address(self, address_id):
        """Drop shipping/billing links that point at a deleted address."""
        if str(self.shipping_address_id) == str(address_id):
            self.shipping_address_id = None
        if str(self.billing_address_id) == str(address_id):
            self.billing_address_id = None

    def change_role(self, new_role):
        from orderly.user.events import UserRoleChanged

        previous_role = self.role
        self.role = new_role
        self.raise_(
            UserRoleChanged(
                user_id=self.id,
                previous_role=previous_role,
                new_role=self.role,
            )
        )
