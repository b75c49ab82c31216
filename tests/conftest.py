"""Pytest configuration and fixtures."""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from skill_service.database import Database
from skill_service.errors import SkillConflictError, SkillNotFoundError
from skill_service.models.skill import Skill, SkillCreate, SkillField, SkillUpdate

SEED_SKILLS = [
    Skill(
        key="skill-1",
        name="Test Skill 1",
        description="Description for Test Skill 1",
        logo="http://example.com/logo1.png",
        tags=["tag1", "tag2"],
    ),
    Skill(
        key="skill-2",
        name="Test Skill 2",
        description="Description for Test Skill 2",
        logo="http://example.com/logo2.png",
        tags=["tag3", "tag4"],
    ),
]


class InMemorySkillRepository:
    """Dict-backed stand-in for SkillRepository used by the API tests."""

    def __init__(self, skills: list[Skill]):
        self.store = {s.key: s.model_copy(deep=True) for s in skills}

    def _get(self, key: str) -> Skill:
        if key not in self.store:
            raise SkillNotFoundError(key)
        return self.store[key]

    async def create(self, data: SkillCreate) -> Skill:
        if data.key in self.store:
            raise SkillConflictError(data.key)
        skill = Skill(**data.model_dump())
        self.store[skill.key] = skill
        return skill

    async def get_by_key(self, key: str) -> Skill:
        return self._get(key)

    async def list_all(self) -> list[Skill]:
        return [self.store[k] for k in sorted(self.store)]

    async def replace(self, key: str, data: SkillUpdate) -> Skill:
        self._get(key)
        self.store[key] = Skill(key=key, **data.model_dump())
        return self.store[key]

    async def patch_field(self, key: str, field: SkillField, value) -> Skill:
        skill = self._get(key).model_copy(update={SkillField(field).value: value})
        self.store[key] = skill
        return skill

    async def delete(self, key: str) -> None:
        self._get(key)
        del self.store[key]


@pytest.fixture
def skill_repo(monkeypatch):
    """Replace the router's repository with a seeded in-memory one."""
    repo = InMemorySkillRepository(SEED_SKILLS)
    monkeypatch.setattr("skill_service.routers.skills.SkillRepository", repo)
    return repo


@pytest_asyncio.fixture
async def client(skill_repo):
    """HTTP client bound to the application, without touching PostgreSQL."""
    from skill_service.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def db_session(monkeypatch):
    """Mock SQLAlchemy session handed out by Database.get_session."""
    session = AsyncMock()
    result = MagicMock()
    session.execute.return_value = result

    @asynccontextmanager
    async def get_session():
        yield session

    monkeypatch.setattr(Database, "get_session", get_session)
    return session
