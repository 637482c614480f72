import logging
from typing import Any

from projecthub.application.ports.cache_port import CachePort
from projecthub.application.ports.project_repository_port import ProjectRepositoryPort
from projecthub.application.services.project_normalizer import build_draft
from projecthub.domain.project import Project, project_summary_cache_key

logger = logging.getLogger(__name__)


class UpdateProjectUseCase:
    """프로젝트를 수정하는 Use Case

    notion_pages가 요청에 포함되면 기존 페이지 참조를 모두 삭제하고 다시 만든 뒤
    해당 프로젝트의 Notion 요약 캐시를 즉시 삭제합니다.
    """

    def __init__(self, project_repository: ProjectRepositoryPort, cache: CachePort):
        self.project_repository = project_repository
        self.cache = cache

    async def execute(self, project_id: int, values: dict[str, Any]) -> Project | None:
        logger.info("📋 UpdateProjectUseCase 실행: id=%s, fields=%s", project_id, sorted(values))

        current = await self.project_repository.get_project(project_id)
        if current is None:
            logger.info("수정 대상 프로젝트 없음: id=%s", project_id)
            return None

        replace_pages = "notion_pages" in values
        draft = build_draft(values, base=current)
        project = await self.project_repository.update_project(project_id, draft, replace_pages=replace_pages)

        if replace_pages:
            self.cache.delete(project_summary_cache_key(project_id))
            logger.info("Notion 페이지 목록 교체: id=%s, pages=%d", project_id, len(draft.notion_pages))

        logger.info("✅ 프로젝트 수정 완료: id=%s", project_id)
        return project
