import logging

from projecthub.application.ports.cache_port import CachePort
from projecthub.application.ports.project_repository_port import ProjectRepositoryPort
from projecthub.domain.project import project_summary_cache_key

logger = logging.getLogger(__name__)


class DeleteProjectUseCase:
    """프로젝트와 Notion 페이지 참조를 삭제하는 Use Case"""

    def __init__(self, project_repository: ProjectRepositoryPort, cache: CachePort):
        self.project_repository = project_repository
        self.cache = cache

    async def execute(self, project_id: int) -> bool:
        deleted = await self.project_repository.delete_project(project_id)
        if deleted:
            self.cache.delete(project_summary_cache_key(project_id))
            logger.info("✅ 프로젝트 삭제 완료: id=%s", project_id)
        return deleted
