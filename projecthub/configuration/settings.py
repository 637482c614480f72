import json
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# 프로젝트 루트 디렉토리 (projecthub/configuration/settings.py -> ../../)
_PROJECT_ROOT = Path(__file__).parent.parent.parent


def _load_env() -> None:
    app_env = os.getenv("APP_ENV", "local")
    env_file = _PROJECT_ROOT / f".env.{app_env}"
    load_dotenv(env_file)


@dataclass(frozen=True)
class Settings:
    app_env: str
    server_name: str
    database_path: str
    github_token: str = ""
    github_api_url: str = "https://api.github.com"
    notion_token: str = ""
    notion_api_url: str = "https://api.notion.com/v1"
    notion_version: str = "2022-06-28"
    notion_cache_ttl_seconds: int = 3600   # Notion 요약 캐시 유지 시간
    project_lite_url: str = ""
    news_feed_url: str = "https://zenn.dev/feed"
    http_host: str = "127.0.0.1"
    http_port: int = 8000
    cors_origins: list[str] = field(default_factory=list)


def build_settings() -> Settings:
    _load_env()

    # 토큰/외부 URL은 필수가 아님: 누락 시 호출 시점에 설정 오류(500)로 응답
    required_vars = ("APP_ENV", "SERVER_NAME")
    missing = [k for k in required_vars if not os.getenv(k)]
    if missing:
        raise RuntimeError(f"필수 환경 변수 누락: {', '.join(missing)}")

    default_db_path = str(_PROJECT_ROOT / "data" / "projecthub.db")

    cors_raw = os.getenv("CORS_ORIGINS", "[]")
    try:
        cors_origins = json.loads(cors_raw)
    except json.JSONDecodeError:
        cors_origins = []

    return Settings(
        app_env=os.environ["APP_ENV"],
        server_name=os.environ["SERVER_NAME"],
        database_path=os.getenv("DATABASE_PATH", default_db_path),
        github_token=os.getenv("GITHUB_TOKEN", ""),
        github_api_url=os.getenv("GITHUB_API_URL", "https://api.github.com"),
        notion_token=os.getenv("NOTION_TOKEN", ""),
        notion_api_url=os.getenv("NOTION_API_URL", "https://api.notion.com/v1"),
        notion_version=os.getenv("NOTION_VERSION", "2022-06-28"),
        notion_cache_ttl_seconds=int(os.getenv("NOTION_CACHE_TTL_SECONDS", "3600")),
        project_lite_url=os.getenv("PROJECT_LITE_URL", ""),
        news_feed_url=os.getenv("NEWS_FEED_URL", "https://zenn.dev/feed"),
        http_host=os.getenv("HTTP_HOST", "127.0.0.1"),
        http_port=int(os.getenv("HTTP_PORT", "8000")),
        cors_origins=cors_origins,
    )
