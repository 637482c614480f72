"""Pytest 공용 fixture"""

import pytest

from projecthub.adapters.outbound.in_memory_cache import InMemoryCache
from projecthub.adapters.outbound.sqlite_project_repository import SqliteProjectRepository
from projecthub.configuration.settings import Settings


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        app_env="test",
        server_name="projecthub-test",
        database_path=str(tmp_path / "projecthub.db"),
        github_token="gh-token",
        notion_token="notion-token",
        project_lite_url="http://project-lite.test",
        news_feed_url="http://news.test/feed",
    )


@pytest.fixture
async def repository(tmp_path) -> SqliteProjectRepository:
    repo = SqliteProjectRepository(tmp_path / "projecthub.db")
    await repo.initialize()
    return repo


@pytest.fixture
def cache() -> InMemoryCache:
    return InMemoryCache()
