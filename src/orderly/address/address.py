"""Address aggregate — one entry in a user's address book."""

from datetime import datetime

from protean.fields import DateTime, Identifier, String

from orderly.domain import orderly


@orderly.aggregate
class Address:
    """A shipping or billing location owned by exactly one user.

    The display form (``formatted_address``) is always derived from the
    structured fields and is never accepted from clients. Orders copy it at
    placement time, so editing or deleting an address never rewrites the
    address printed on past orders.
    """

    user_id: Identifier(required=True)
    street: String(required=True, max_length=255)
    city: String(required=True, max_length=100)
    state: String(max_length=100)
    zip_code: String(required=True, max_length=20)
    country: String(required=True, max_length=100)
    created_at: DateTime(default=datetime.now)

    @property
    def formatted_address(self) -> str:
        parts = (self.street, self.city, self.state, self.zip_code, self.country)
        return ", ".join(part for part in parts if part)

    def belongs_to(self, user_id) -> bool:
        return str(self.user_id) == str(user_id)

    @classmethod
    def record(cls, user_id, street, city, zip_code, country, state=None):
        from orderly.address.events import AddressAdded

        address = cls(
            user_id=user_id,
            street=street,
            city=city,
            state=state,
            zip_code=zip_code,
            country=country,
        )
        address.raise_(
            AddressAdded(
                address_id=address.id,
                user_id=user_id,
                formatted_address=address.formatted_address,
            )
        )
        return address
