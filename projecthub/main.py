import asyncio
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path

from mcp.server import Server
from mcp.server.stdio import stdio_server

from projecthub.adapters.inbound.mcp.tools import register_tools
from projecthub.configuration.container import build_container, clear_container


def setup_logging():
    """로깅 설정: stderr와 파일 두 곳에 로그 출력"""
    log_dir = Path(__file__).parent.parent / "logs"
    log_dir.mkdir(exist_ok=True)

    log_file = log_dir / "projecthub.log"

    formatter = logging.Formatter(
        '%(asctime)s [%(name)s] %(levelname)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)

    # 1. stderr 핸들러 (MCP stdio는 stdout을 프로토콜용으로 사용)
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    root_logger.addHandler(stderr_handler)

    # 2. 파일 핸들러 (최대 10MB, 5개 백업)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    return logging.getLogger(__name__)


logger = logging.getLogger(__name__)


def _log_startup(container) -> None:
    settings = container.settings
    logger.info("서버 이름: %s", settings.server_name)
    logger.info("환경: %s", settings.app_env)
    logger.info("DB: %s", settings.database_path)
    # 토큰 값은 남기지 않고 설정 여부만 기록
    logger.info("GitHub 토큰: %s", "설정됨" if settings.github_token else "미설정")
    logger.info("Notion 토큰: %s", "설정됨" if settings.notion_token else "미설정")
    logger.info("Project-Lite URL: %s", settings.project_lite_url or "미설정")
    logger.info("뉴스 피드: %s", settings.news_feed_url)


async def main() -> None:
    try:
        logger.info("=" * 60)
        logger.info("MCP 서버 초기화 시작")

        container = build_container()
        logger.info("✅ Container 빌드 완료")
        _log_startup(container)

        app = Server(container.settings.server_name)
        register_tools(app)
        logger.info("✅ MCP Tools 등록 완료")

        logger.info("MCP 서버 시작 중...")
        logger.info("=" * 60)

        try:
            async with stdio_server() as (read_stream, write_stream):
                await app.run(read_stream, write_stream, app.create_initialization_options())
        finally:
            if container.settings.app_env == "local":
                clear_container()
            logger.info("MCP 서버 종료")

    except Exception as e:
        logger.error("=" * 60)
        logger.error("MCP 서버 시작 실패!")
        logger.error("오류 타입: %s", type(e).__name__)
        logger.error("오류 메시지: %s", str(e))
        logger.error("=" * 60)
        traceback.print_exc(file=sys.stderr)
        raise


def run_mcp() -> None:
    setup_logging()
    asyncio.run(main())


def run_http() -> None:
    import uvicorn

    from projecthub.adapters.inbound.http.app import create_app

    setup_logging()
    container = build_container()
    logger.info("=" * 60)
    logger.info("HTTP 서버 시작: %s:%d", container.settings.http_host, container.settings.http_port)
    _log_startup(container)
    logger.info("=" * 60)

    uvicorn.run(
        create_app(container),
        host=container.settings.http_host,
        port=container.settings.http_port,
        log_config=None,
    )
