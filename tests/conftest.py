"""Pytest configuration and fixtures for taskflow.

Uses taskflow.main:app for HTTP tests with the identity provider and every
repository replaced by in-memory fakes (tests/fakes.py) through
``app.dependency_overrides``. No network or datastore is needed.
"""

import os

# Settings are read on first get_settings(); set them before importing the app.
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ.setdefault("ENVIRONMENT", "development")

import pytest
from httpx import ASGITransport, AsyncClient

from fakes import (
    FakeActivityLogRepository,
    FakeCategoryRepository,
    FakeIdentityProvider,
    FakePomodoroRepository,
    FakeProfileRepository,
    FakeStatisticsRepository,
    FakeSubtaskRepository,
    FakeTaskRepository,
    OTHER_TOKEN,
    OTHER_USER_ID,
    USER_ID,
    VALID_TOKEN,
    InMemoryStore,
)
from taskflow.api.v1.dependencies import (
    get_activity_repo,
    get_category_repo,
    get_identity_provider,
    get_pomodoro_repo,
    get_profile_repo,
    get_statistics_repo,
    get_subtask_repo,
    get_task_repo,
)
from taskflow.application.dtos.user import AuthenticatedUser
from taskflow.main import app


@pytest.fixture
def store() -> InMemoryStore:
    """Fresh in-memory datastore shared by all fake repositories."""
    return InMemoryStore()


@pytest.fixture
def identity() -> FakeIdentityProvider:
    """Identity provider that accepts two tokens, one per test user."""
    return FakeIdentityProvider(
        {
            VALID_TOKEN: AuthenticatedUser(id=USER_ID, email="ana@example.com"),
            OTHER_TOKEN: AuthenticatedUser(id=OTHER_USER_ID, email="ben@example.com"),
        }
    )


@pytest.fixture
def task_repo(store: InMemoryStore) -> FakeTaskRepository:
    return FakeTaskRepository(store)


@pytest.fixture
def subtask_repo(store: InMemoryStore) -> FakeSubtaskRepository:
    return FakeSubtaskRepository(store)


@pytest.fixture
def category_repo(store: InMemoryStore) -> FakeCategoryRepository:
    return FakeCategoryRepository(store)


@pytest.fixture
def profile_repo(store: InMemoryStore) -> FakeProfileRepository:
    return FakeProfileRepository(store)


@pytest.fixture
def pomodoro_repo(store: InMemoryStore) -> FakePomodoroRepository:
    return FakePomodoroRepository(store)


@pytest.fixture
def activity_repo(store: InMemoryStore) -> FakeActivityLogRepository:
    return FakeActivityLogRepository(store)


@pytest.fixture
def statistics_repo(store: InMemoryStore) -> FakeStatisticsRepository:
    return FakeStatisticsRepository(store)


@pytest.fixture
async def client(
    store: InMemoryStore, identity: FakeIdentityProvider
) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) with fakes wired in.

    ASGITransport does not run the lifespan, so no HTTP client or datastore
    connection is created.
    """
    app.dependency_overrides[get_identity_provider] = lambda: identity
    app.dependency_overrides[get_task_repo] = lambda: FakeTaskRepository(store)
    app.dependency_overrides[get_subtask_repo] = lambda: FakeSubtaskRepository(store)
    app.dependency_overrides[get_category_repo] = lambda: FakeCategoryRepository(store)
    app.dependency_overrides[get_profile_repo] = lambda: FakeProfileRepository(store)
    app.dependency_overrides[get_pomodoro_repo] = lambda: FakePomodoroRepository(store)
    app.dependency_overrides[get_activity_repo] = lambda: FakeActivityLogRepository(store)
    app.dependency_overrides[get_statistics_repo] = lambda: FakeStatisticsRepository(store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Bearer header for USER_ID."""
    return {"Authorization": f"Bearer {VALID_TOKEN}"}


@pytest.fixture
def other_auth_headers() -> dict[str, str]:
    """Bearer header for OTHER_USER_ID."""
    return {"Authorization": f"Bearer {OTHER_TOKEN}"}
