"""환경 변수 → Settings 테스트"""

import pytest

from projecthub.configuration import settings as settings_module
from projecthub.configuration.settings import build_settings


@pytest.fixture(autouse=True)
def no_env_file(monkeypatch):
    monkeypatch.setattr(settings_module, "_load_env", lambda: None)


def test_required_vars(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    monkeypatch.delenv("SERVER_NAME", raising=False)

    with pytest.raises(RuntimeError):
        build_settings()


def test_defaults_and_overrides(monkeypatch):
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("SERVER_NAME", "hub")
    monkeypatch.setenv("NOTION_CACHE_TTL_SECONDS", "60")
    monkeypatch.setenv("CORS_ORIGINS", '["http://localhost:3000"]')
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("DATABASE_PATH", raising=False)

    settings = build_settings()

    assert settings.github_token == ""
    assert settings.notion_cache_ttl_seconds == 60
    assert settings.cors_origins == ["http://localhost:3000"]
    assert settings.database_path.endswith("projecthub.db")
