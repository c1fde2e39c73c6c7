"""
Shared fixtures: every test gets its own app over a throwaway SQLite file,
driven in-process through httpx's ASGI transport.
"""
import httpx
import pytest
from httpx import ASGITransport

from app.auth.resolver import identity_of
from app.config import Settings
from app.main import create_app, init_db
from app.models.user import User
from app.utils.security import hash_password

COOKIE = "auth-token"


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        APP_ENV="test",
        SECRET_KEY="test-secret",
        DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}",
        _env_file=None,
    )


@pytest.fixture
def app(settings):
    application = create_app(settings)
    # ASGITransport does not run startup handlers
    init_db(application)
    yield application
    application.state.database.dispose()


@pytest.fixture
def db(app):
    session = app.state.database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
async def client(app):
    async with httpx.AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest.fixture
def make_user(db):
    def _make(email="a@x.com", password="right", role="user", fullname="Nguyen Van A", **extra):
        user = User(
            fullname=fullname,
            email=email,
            password_hash=hash_password(password),
            role=role,
            **extra,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
    return _make


@pytest.fixture
def token_for(app):
    def _token(user):
        return app.state.tokens.issue(identity_of(user))
    return _token


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def cookie(token: str) -> dict:
    return {"Cookie": f"{COOKIE}={token}"}
