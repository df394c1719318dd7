from uuid import uuid4

import bcrypt
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from riskengine.adapter.services.database import Database
from riskengine.api.app import create_app
from riskengine.config import ApplicationConfig
from riskengine.domain.entities import User, UserRole
from tests.fixtures.json_loader import TestDataLoader
from tests.utils.risk_api import auth_headers

# Low cost factor keeps fixture users cheap
_PASSWORD_HASH = bcrypt.hashpw(b"password123", bcrypt.gensalt(4)).decode("utf-8")


@pytest.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def database(tmp_path):
    # File database so concurrent requests get separate connections
    database = Database(
        f"sqlite+aiosqlite:///{tmp_path / 'riskengine_test.db'}",
        busy_timeout=ApplicationConfig.DB_BUSY_TIMEOUT_SECONDS,
    )
    await database.create_all()
    yield database
    await database.drop_all()
    await database.dispose()


@pytest_asyncio.fixture
async def client(database):
    app = create_app(ApplicationConfig, database=database)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def make_user(database):
    """Insert a user directly and return it with a bearer header for that user"""

    async def _make(role: UserRole = UserRole.admin, name: str = "Test User"):
        user = User(
            name=name,
            email=f"{uuid4().hex[:12]}@example.com",
            role=role,
            password_hash=_PASSWORD_HASH,
        )
        async with database.session() as session:
            session.add(user)
            await session.commit()
        return user, auth_headers(user)

    return _make


@pytest_asyncio.fixture
async def admin(make_user):
    return await make_user(UserRole.admin, "Alex Admin")


@pytest_asyncio.fixture
async def risk_manager(make_user):
    return await make_user(UserRole.risk_manager, "Riley Manager")


@pytest_asyncio.fixture
async def team_member(make_user):
    return await make_user(UserRole.team_member, "Taylor Member")


@pytest_asyncio.fixture
async def viewer(make_user):
    return await make_user(UserRole.viewer, "Vic Viewer")
