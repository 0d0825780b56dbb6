import os
from pathlib import Path

import pytest

# Cheapest bcrypt cost factor; must be set before orderly.config is imported
os.environ.setdefault("BCRYPT_ROUNDS", "4")


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Importing the application initializes the domain once, so every aggregate,
    command, handler and repository is registered before test modules import
    them.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env

    import app  # noqa: F401


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def orderly_domain():
    from orderly.domain import orderly

    return orderly


@pytest.fixture(scope="session", autouse=True)
def setup_db(orderly_domain):
    from orderly.utils.db import drop_db, setup_db

    setup_db(orderly_domain)

    yield

    drop_db(orderly_domain)


@pytest.fixture(autouse=True)
def run_around_tests(orderly_domain):
    """Push domain context before each test, cleanup after."""
    ctx = orderly_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


# ---------------------------------------------------------------------------
# Data builders shared by every context
# ---------------------------------------------------------------------------
@pytest.fixture()
def make_user():
    """Register a user through the command and return the stored aggregate."""
    from protean import current_domain

    from orderly.security import hash_password
    from orderly.user.registration import RegisterUser
    from orderly.user.user import User

    counter = {"n": 0}

    def _make(username=None, email=None, password="secret123", role=None):
        counter["n"] += 1
        command = RegisterUser(
            username=username or f"shopper{counter['n']}",
            email=email or f"shopper{counter['n']}@example.com",
            password_hash=hash_password(password),
        )
        user_id = current_domain.process(command, asynchronous=False)
        user = current_domain.repository_for(User).get(user_id)
        if role is not None:
            user.change_role(role)
            current_domain.repository_for(User).add(user)
        return current_domain.repository_for(User).get(user_id)

    return _make


@pytest.fixture()
def make_address():
    from protean import current_domain

    from orderly.address.address import Address
    from orderly.address.management import AddAddress

    def _make(user, street="12 Market Street", city="Springfield", state="IL", zip_code="62701", country="US"):
        address_id = current_domain.process(
            AddAddress(
                user_id=str(user.id),
                street=street,
                city=city,
                state=state,
                zip_code=zip_code,
                country=country,
            ),
            asynchronous=False,
        )
        return current_domain.repository_for(Address).get(address_id)

    return _make


@pytest.fixture()
def make_product():
    from protean import current_domain

    from orderly.product.management import CreateProduct
    from orderly.product.product import Product

    def _make(name="Espresso Cup", price=10.0, description="Porcelain cup, 90ml", tags=("kitchen",)):
        product_id = current_domain.process(
            CreateProduct(name=name, description=description, price=price, tags=list(tags)),
            asynchronous=False,
        )
        return current_domain.repository_for(Product).get(product_id)

    return _make


@pytest.fixture()
def shopper_with_address(make_user, make_address):
    """A user whose shipping address is set."""
    from protean import current_domain

    from orderly.user.profile import UpdateUser
    from orderly.user.user import User

    user = make_user()
    address = make_address(user)
    current_domain.process(
        UpdateUser(user_id=str(user.id), shipping_address_id=str(address.id)),
        asynchronous=False,
    )
    return current_domain.repository_for(User).get(user.id)


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------
@pytest.fixture()
def client():
    from fastapi.testclient import TestClient

    from app import app

    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture()
def auth_headers():
    from orderly.security import issue_token

    def _headers(user):
        return {"Authorization": f"Bearer {issue_token(user.id, user.email)}"}

    return _headers
