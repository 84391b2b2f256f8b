"""Shared pytest fixtures: settings, database and API client."""

import asyncio
from typing import AsyncGenerator, Callable, Dict

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from apps.api.main import create_app
from core.data.uow import create_uow
from core.domain.enums import UserRole
from core.infrastructure.database.config import (
    close_database,
    create_engine,
    create_session_factory,
    init_database,
)
from core.infrastructure.security import PasswordHasher, TokenService
from core.settings import AppSettings, AuthSettings, DatabaseSettings, ServerSettings


TEST_SECRET = "test-secret-0123456789abcdef0123456789abcdef"
DEFAULT_PASSWORD = "cookies123"


@pytest.fixture
def settings(tmp_path) -> AppSettings:
    """Settings pointing at a throwaway SQLite file, with cheap bcrypt rounds."""
    return AppSettings(
        database=DatabaseSettings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"),
        auth=AuthSettings(jwt_secret=TEST_SECRET, bcrypt_rounds=4),
        server=ServerSettings(log_level="WARNING"),
    )


# =============================================================================
# DATABASE
# =============================================================================

@pytest_asyncio.fixture
async def engine(settings: AppSettings) -> AsyncGenerator[AsyncEngine, None]:
    """Create test database engine with both tables."""
    engine = create_engine(settings.database)
    await init_database(engine)
    yield engine
    await close_database(engine)


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_session_factory(engine)


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(secret=TEST_SECRET)


# =============================================================================
# API
# =============================================================================

@pytest.fixture
def test_client(settings: AppSettings) -> TestClient:
    """FastAPI test client; the context manager runs startup (table creation)."""
    with TestClient(create_app(settings)) as client:
        yield client


@pytest.fixture
def register_user(test_client: TestClient) -> Callable[..., int]:
    """Register an account through the API and return its id."""

    def _register(email: str, password: str = DEFAULT_PASSWORD, name: str = "Jane") -> int:
        response = test_client.post(
            "/api/auth/register",
            json={
                "name": name,
                "email": email,
                "password": password,
                "confirmPassword": password,
            },
        )
        assert response.status_code == 201, response.text
        return response.json()["userId"]

    return _register


@pytest.fixture
def login(test_client: TestClient) -> Callable[..., Dict[str, str]]:
    """Log in through the API and return ready-to-use auth headers."""

    def _login(email: str, password: str = DEFAULT_PASSWORD) -> Dict[str, str]:
        response = test_client.post("/api/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _login


@pytest.fixture
def promote_to_admin(settings: AppSettings) -> Callable[[int], None]:
    """Grant the admin role directly in the store (the out-of-band path)."""

    async def _promote(user_id: int) -> None:
        engine = create_engine(settings.database)
        try:
            async with create_uow(create_session_factory(engine), PasswordHasher(rounds=4)) as uow:
                await uow.users.update_role(user_id, UserRole.ADMIN)
                await uow.commit()
        finally:
            await close_database(engine)

    return lambda user_id: asyncio.run(_promote(user_id))


@pytest.fixture
def admin_headers(register_user, login, promote_to_admin) -> Dict[str, str]:
    user_id = register_user("admin@cookies.test", name="Admin")
    promote_to_admin(user_id)
    return login("admin@cookies.test")
