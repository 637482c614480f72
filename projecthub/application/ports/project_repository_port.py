from typing import Protocol

from projecthub.domain.project import Project, ProjectDraft


class ProjectRepositoryPort(Protocol):
    """Project / NotionPage 영속 저장소 계약"""

    async def list_projects(self) -> list[Project]:
        """최신 등록 순으로 프로젝트 목록을 조회합니다."""
        ...

    async def get_project(self, project_id: int) -> Project | None:
        """프로젝트를 조회합니다. 없으면 None."""
        ...

    async def create_project(self, draft: ProjectDraft) -> Project:
        """프로젝트와 Notion 페이지 참조를 하나의 트랜잭션으로 생성합니다."""
        ...

    async def update_project(
        self,
        project_id: int,
        draft: ProjectDraft,
        replace_pages: bool,
    ) -> Project | None:
        """프로젝트를 수정합니다.

        replace_pages가 True이면 기존 Notion 페이지 참조를 모두 삭제하고
        draft.notion_pages로 다시 생성합니다 (같은 트랜잭션).
        """
        ...

    async def delete_project(self, project_id: int) -> bool:
        """프로젝트를 삭제합니다. 삭제 대상이 없으면 False."""
        ...
