import asyncio
import logging
from typing import Any

from projecthub.application.ports.cache_port import CachePort
from projecthub.application.ports.notion_port import NotionPort
from projecthub.domain.errors import ConfigurationError, IntegrationError, UpstreamConnectionError
from projecthub.domain.integrations import IntegrationResult, NotionPageError, NotionPageSummary
from projecthub.domain.project import Project, project_summary_cache_key

logger = logging.getLogger(__name__)

DEFAULT_CACHE_TTL_SECONDS = 3600


class GetNotionSummariesUseCase:
    """프로젝트에 연결된 Notion 페이지 요약을 일괄 조회하는 Use Case (캐시 포함)

    한 페이지의 실패가 배치 전체를 실패시키지 않습니다. 실패한 페이지는
    {id, error, status} 레코드로 입력 순서 그대로 결과에 포함됩니다.
    """

    def __init__(
        self,
        notion_port: NotionPort,
        cache: CachePort,
        cache_ttl_seconds: int = DEFAULT_CACHE_TTL_SECONDS,
    ):
        self.notion_port = notion_port
        self.cache = cache
        self.cache_ttl_seconds = cache_ttl_seconds

    async def execute(self, project: Project) -> IntegrationResult:
        page_ids = project.notion_page_ids
        logger.info("📋 GetNotionSummariesUseCase 실행: project_id=%s, pages=%d", project.id, len(page_ids))

        if not page_ids:
            return IntegrationResult.success({"pages": []})

        cache_key = project_summary_cache_key(project.id)
        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.info("캐시 적중: %s", cache_key)
            return IntegrationResult.success({"pages": cached})

        try:
            self.notion_port.ensure_configured()
        except ConfigurationError:
            return IntegrationResult.failure(500, "Server configuration error")

        pages = await asyncio.gather(*(self._fetch_page(page_id) for page_id in page_ids))
        pages = list(pages)

        self.cache.set(cache_key, pages, self.cache_ttl_seconds)
        failed = sum(1 for page in pages if "error" in page)
        logger.info("✅ Notion 요약 완료: 성공 %d건, 실패 %d건", len(pages) - failed, failed)
        return IntegrationResult.success({"pages": pages})

    async def _fetch_page(self, page_id: str) -> dict[str, Any]:
        """단일 페이지를 조회합니다. 실패는 예외 대신 오류 레코드로 반환합니다."""
        try:
            data = await self.notion_port.retrieve_page(page_id)
        except UpstreamConnectionError as e:
            return NotionPageError(id=page_id, error="Connection error", status=e.status_code).to_dict()
        except IntegrationError as e:
            return NotionPageError(id=page_id, error="Failed to fetch page", status=e.status_code).to_dict()
        return NotionPageSummary.from_api(data).to_dict()
