import logging
from typing import Any

from projecthub.application.ports.project_repository_port import ProjectRepositoryPort
from projecthub.application.services.project_normalizer import build_draft
from projecthub.domain.project import Project

logger = logging.getLogger(__name__)


class CreateProjectUseCase:
    """프로젝트를 생성하는 Use Case

    GitHub/Figma/보드/Notion 입력값은 저장 시점에 정규화됩니다.
    """

    def __init__(self, project_repository: ProjectRepositoryPort):
        self.project_repository = project_repository

    async def execute(self, values: dict[str, Any]) -> Project:
        """
        Args:
            values: title, description, thumbnail_url, github_repo, figma_file_key,
                pl_board_id, notion_pages 키를 가진 입력값

        Raises:
            InvalidProjectInputError: title이 없거나 보드 ID를 해석할 수 없는 경우
        """
        logger.info("📋 CreateProjectUseCase 실행: title=%s", values.get("title"))
        draft = build_draft(values)
        project = await self.project_repository.create_project(draft)
        logger.info("✅ 프로젝트 생성 완료: id=%s", project.id)
        return project
