import logging

from projecthub.application.ports.project_repository_port import ProjectRepositoryPort
from projecthub.domain.project import Project

logger = logging.getLogger(__name__)


class ListProjectsUseCase:
    """프로젝트 목록을 최신 등록 순으로 조회하는 Use Case"""

    def __init__(self, project_repository: ProjectRepositoryPort):
        self.project_repository = project_repository

    async def execute(self) -> list[Project]:
        projects = await self.project_repository.list_projects()
        logger.info("프로젝트 목록 조회: %d건", len(projects))
        return projects
