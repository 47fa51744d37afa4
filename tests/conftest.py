"""Test configuration and fixtures"""

import pytest
from unittest.mock import AsyncMock, Mock
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from main import create_app
from registrar.core.config import Settings
from registrar.core.containers import signup_rules
from registrar.core.database.session import DatabaseManager
from registrar.core.validation import Validator
from registrar.repositories.users import UserRepository
from registrar.services.auth import AuthService


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "registrar-test.db"


@pytest.fixture
def settings(db_path) -> Settings:
    """Settings pointing at a throwaway SQLite file with the cheapest bcrypt cost"""
    return Settings(
        DATABASE_URI=f"sqlite+aiosqlite:///{db_path}",
        BCRYPT_ROUNDS=4,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def app(settings):
    app = create_app(settings)
    yield app
    app.container.unwire()


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def db(db_path):
    """Synchronous engine for inspecting what the app stored"""
    engine = create_engine(f"sqlite:///{db_path}")
    yield engine
    engine.dispose()


@pytest.fixture
async def database_manager(db_path):
    manager = DatabaseManager(f"sqlite+aiosqlite:///{db_path}")
    await manager.create_database()
    yield manager
    await manager.close()


@pytest.fixture
def users_repository(database_manager) -> UserRepository:
    return UserRepository(session_factory=database_manager.session)


@pytest.fixture
def auth_service() -> AuthService:
    return AuthService(rounds=4)


@pytest.fixture
def signup_validator() -> Validator:
    return Validator(signup_rules(email_min=4, email_max=30, password_min=8, password_max=255))


@pytest.fixture
def mock_users_repository():
    """Mock UserRepository for testing"""
    mock = Mock(spec=UserRepository)
    mock.find_or_create = AsyncMock()
    mock.get_active = AsyncMock(return_value=[])
    return mock
