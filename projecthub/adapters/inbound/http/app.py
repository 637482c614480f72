"""FastAPI 앱 팩토리"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from projecthub.adapters.inbound.http.routes import router
from projecthub.configuration.container import Container, build_container

logger = logging.getLogger(__name__)


def create_app(container: Container | None = None) -> FastAPI:
    """Container를 감싸는 HTTP 앱을 생성합니다. 기본값은 프로세스 공용 Container."""
    container = container or build_container()

    app = FastAPI(
        title=container.settings.server_name,
        description="Project dashboard: external tool links and live widget data",
        version="0.1.0",
    )
    app.state.container = container

    if container.settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=container.settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """헬스 체크"""
        return {"status": "healthy"}

    app.include_router(router, prefix="/api", tags=["projects"])

    logger.info("HTTP 앱 생성 완료: env=%s", container.settings.app_env)
    return app
