"""FastAPI endpoints for authentication, profiles and address books."""

from fastapi import APIRouter
from fastapi.concurrency import run_in_threadpool
from protean.utils.globals import current_domain

from orderly.address.address import Address
from orderly.address.management import AddAddress, RemoveAddress
from orderly.api.auth import AdminUser, CurrentUser
from orderly.api.identity.schemas import (
    AddressListResponse,
    AddressRequest,
    AddressResponse,
    ChangeRoleRequest,
    LoginRequest,
    LoginResponse,
    SignupRequest,
    StatusResponse,
    UpdateUserRequest,
    UserDetailResponse,
    UserResponse,
)
from orderly.security import hash_password
from orderly.user.authentication import login
from orderly.user.profile import UpdateUser, load_user
from orderly.user.registration import RegisterUser
from orderly.user.roles import ChangeUserRole
from orderly.user.user import User

auth_router = APIRouter(prefix="/auth", tags=["auth"])
user_router = APIRouter(prefix="/user", tags=["user"])


def _user_response(user: User) -> UserResponse:
    return UserResponse(
        id=str(user.id),
        username=user.username,
        email=user.email,
        phone=user.phone,
        role=user.role,
        shipping_address_id=str(user.shipping_address_id) if user.shipping_address_id else None,
        billing_address_id=str(user.billing_address_id) if user.billing_address_id else None,
        created_at=user.created_at.isoformat() if user.created_at else None,
    )


def _address_response(address: Address) -> AddressResponse:
    return AddressResponse(
        id=str(address.id),
        user_id=str(address.user_id),
        street=address.street,
        city=address.city,
        state=address.state,
        zip_code=address.zip_code,
        country=address.country,
        formatted_address=address.formatted_address,
    )


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------
@auth_router.post("/signup", status_code=201, response_model=UserResponse)
async def signup(body: SignupRequest) -> UserResponse:
    # bcrypt is CPU-bound; keep it off the event loop
    password_hash = await run_in_threadpool(hash_password, body.password)
    command = RegisterUser(
        username=body.username,
        email=body.email,
        password_hash=password_hash,
        phone=body.phone,
    )
    user_id = current_domain.process(command, asynchronous=False)
    return _user_response(load_user(user_id))


@auth_router.post("/login", response_model=LoginResponse)
async def log_in(body: LoginRequest) -> LoginResponse:
    user, token = await run_in_threadpool(login, body.email, body.password)
    return LoginResponse(user=_user_response(user), token=token)


@auth_router.get("/profile", response_model=UserResponse)
async def profile(auth: CurrentUser) -> UserResponse:
    return _user_response(auth.user)


# ---------------------------------------------------------------------------
# Address book
# ---------------------------------------------------------------------------
@user_router.post("/address", status_code=201, response_model=AddressResponse)
async def add_address(body: AddressRequest, auth: CurrentUser) -> AddressResponse:
    command = AddAddress(
        user_id=auth.user_id,
        street=body.street,
        city=body.city,
        state=body.state,
        zip_code=body.zip_code,
        country=body.country,
    )
    address_id = current_domain.process(command, asynchronous=False)
    address = current_domain.repository_for(Address).get(address_id)
    return _address_response(address)


@user_router.get("/address", response_model=AddressListResponse)
async def list_addresses(auth: CurrentUser) -> AddressListResponse:
    addresses = current_domain.repository_for(Address).for_user(auth.user_id)
    return AddressListResponse(addresses=[_address_response(a) for a in addresses])


@user_router.delete("/address/{address_id}", response_model=StatusResponse)
async def delete_address(address_id: str, auth: CurrentUser) -> StatusResponse:
    command = RemoveAddress(user_id=auth.user_id, address_id=address_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------
@user_router.put("/", response_model=UserResponse)
async def update_user(body: UpdateUserRequest, auth: CurrentUser) -> UserResponse:
    command = UpdateUser(
        user_id=auth.user_id,
        username=body.username,
        phone=body.phone,
        shipping_address_id=body.shipping_address_id,
        billing_address_id=body.billing_address_id,
    )
    current_domain.process(command, asynchronous=False)
    return _user_response(load_user(auth.user_id))


@user_router.put("/changeRole/{user_id}", response_model=UserResponse)
async def change_role(user_id: str, body: ChangeRoleRequest, auth: AdminUser) -> UserResponse:
    current_domain.process(ChangeUserRole(user_id=user_id, role=body.role), asynchronous=False)
    return _user_response(load_user(user_id))


@user_router.get("/listUsers", response_model=list[UserResponse])
async def list_users(auth: AdminUser) -> list[UserResponse]:
    users = current_domain.repository_for(User).first_page()
    return [_user_response(user) for user in users]


@user_router.get("/listUser/{user_id}", response_model=UserDetailResponse)
async def get_user(user_id: str, auth: AdminUser) -> UserDetailResponse:
    user = load_user(user_id)
    addresses = current_domain.repository_for(Address).for_user(user.id)
    return UserDetailResponse(
        **_user_response(user).model_dump(),
        addresses=[_address_response(a) for a in addresses],
    )
