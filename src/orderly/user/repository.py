"""Repository for the User aggregate."""

from orderly import config
from orderly.domain import orderly
from orderly.user.user import User


@orderly.repository(part_of=User)
class UserRepository:
    def find_by_email(self, email: str) -> User | None:
        return self._dao.query.filter(email=email.lower()).all().first

    def first_page(self, limit: int = config.USER_PAGE_SIZE) -> list[User]:
        return self._dao.query.order_by("created_at").limit(limit).all().items
