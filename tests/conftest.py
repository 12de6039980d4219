import pytest
from fastapi.testclient import TestClient

from taskapp.config import AppConfig
from taskapp.infra.supabase.repositories import SupabaseTaskRepository
from taskapp.main import create_app

from tests.fakes import FakeSupabaseClient, InMemoryTaskRepository


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(project_id="demo-project", namespace="test-ns", service_key="service-key")


@pytest.fixture
def fake_client() -> FakeSupabaseClient:
    return FakeSupabaseClient()


@pytest.fixture
def repository(fake_client):
    repo = SupabaseTaskRepository(fake_client, "test-ns")
    yield repo
    repo.close()


@pytest.fixture
def memory_repository() -> InMemoryTaskRepository:
    return InMemoryTaskRepository("test-ns")


@pytest.fixture
def api_client(config, memory_repository):
    app = create_app(config, repository_factory=lambda _config: memory_repository)
    with TestClient(app) as client:
        yield client
