import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from manasooth.ai.client import get_llm
from manasooth.data.assessments import ASSESSMENTS
from manasooth.database import Base, get_db
from manasooth.main import app
from manasooth.models.storage import StorageEntry  # noqa: F401
from manasooth.services import conversation
from manasooth.services.storage import LocalStore

CLIENT_ID = "test-client"


class FakeLLM:
    """Stands in for the hosted model: returns queued replies, records prompts."""

    def __init__(self):
        self.replies = []
        self.prompts = []
        self.error = None

    async def complete_json(self, system, prompt):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.replies.pop(0)


def answers_for(assessment_type, value):
    return {q["id"]: value for q in ASSESSMENTS[assessment_type]["questions"]}


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)


@pytest.fixture
async def store(session_maker):
    async with session_maker() as session:
        yield LocalStore(session, CLIENT_ID)


@pytest.fixture
def llm():
    return FakeLLM()


@pytest.fixture
async def client(session_maker, llm):
    async def override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_llm] = lambda: llm
    conversation._sessions.clear()

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={"X-Client-Id": CLIENT_ID},
    ) as c:
        yield c

    app.dependency_overrides.clear()
