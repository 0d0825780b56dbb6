"""Access gate — bearer-token verification as FastAPI dependencies.

Every request resolves to an explicit ``AuthContext``: ``Anonymous`` when no
bearer token was sent, ``Authenticated`` when a valid token names an existing
user. Routes declare what they need (``CurrentUser`` or ``AdminUser``) and
receive the context as an ordinary argument.
"""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from orderly.errors import UnauthorizedError
from orderly.user.authentication import user_for_token
from orderly.user.user import User
from orderly.utils.logging import add_context


@dataclass(frozen=True)
class Anonymous:
    pass


@dataclass(frozen=True)
class Authenticated:
    user: User

    @property
    def user_id(self) -> str:
        return str(self.user.id)

    @property
    def is_admin(self) -> bool:
        return self.user.is_admin


AuthContext = Anonymous | Authenticated

_bearer = HTTPBearer(auto_error=False, bearerFormat="JWT")


async def auth_context(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_bearer)],
) -> AuthContext:
    if credentials is None:
        return Anonymous()
    user = user_for_token(credentials.credentials)
    add_context(user_id=str(user.id))
    return Authenticated(user=user)


async def require_user(context: Annotated[AuthContext, Depends(auth_context)]) -> Authenticated:
    if not isinstance(context, Authenticated):
        raise UnauthorizedError()
    return context


async def require_admin(context: Annotated[Authenticated, Depends(require_user)]) -> Authenticated:
    if not context.is_admin:
        raise UnauthorizedError()
    return context


CurrentUser = Annotated[Authenticated, Depends(require_user)]
AdminUser = Annotated[Authenticated, Depends(require_admin)]
