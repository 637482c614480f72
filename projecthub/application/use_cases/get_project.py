import logging

from projecthub.application.ports.project_repository_port import ProjectRepositoryPort
from projecthub.domain.project import Project

logger = logging.getLogger(__name__)


class GetProjectUseCase:
    """프로젝트를 ID로 조회하는 Use Case"""

    def __init__(self, project_repository: ProjectRepositoryPort):
        self.project_repository = project_repository

    async def execute(self, project_id: int) -> Project | None:
        project = await self.project_repository.get_project(project_id)
        if project is None:
            logger.info("프로젝트를 찾을 수 없음: id=%s", project_id)
        return project
