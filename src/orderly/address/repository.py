"""Repository for the Address aggregate."""

from orderly.address.address import Address
from orderly.domain import orderly


@orderly.repository(part_of=Address)
class AddressRepository:
    def for_user(self, user_id) -> list[Address]:
        """All addresses owned by a user, oldest first."""
        return self._dao.query.filter(user_id=str(user_id)).order_by("created_at").all().items
