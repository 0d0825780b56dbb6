"""Credential checks for log-in and bearer-token resolution.

These are reads only, so they run as plain functions rather than commands.
"""

import jwt
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from orderly.errors import BadRequestError, ErrorCode, NotFoundError, UnauthorizedError
from orderly.security import decode_token, issue_token, verify_password
from orderly.user.user import User
from orderly.utils.logging import get_logger

logger = get_logger(__name__)


def login(email: str, password: str) -> tuple[User, str]:
    """Return the user and a freshly signed token."""
    user = current_domain.repository_for(User).find_by_email(email)
    if user is None:
        raise NotFoundError("User not found", ErrorCode.USER_NOT_FOUND)
    if not verify_password(password, user.password_hash):
        logger.info("Rejected log-in attempt", user_id=str(user.id))
        raise BadRequestError("Incorrect password", ErrorCode.INVALID_PASSWORD)
    return user, issue_token(user.id, user.email)


def user_for_token(token: str) -> User:
    """Verify a bearer token and load its user from the store.

    The user is looked up on every call, so role changes and deletions take
    effect on the next request.
    """
    try:
        payload = decode_token(token)
    except jwt.InvalidTokenError as exc:
        logger.debug("Invalid bearer token", reason=str(exc))
        raise UnauthorizedError() from None

    try:
        return current_domain.repository_for(User).get(payload["sub"])
    except ObjectNotFoundError:
        raise UnauthorizedError() from None
