from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class NotionPageRef:
    """프로젝트에 연결된 Notion 페이지 참조"""
    id: int
    project_id: int
    page_id: str            # 32자리 hex (URL에서 추출) 또는 입력값 그대로
    title: str | None = None


@dataclass(frozen=True)
class Project:
    """외부 도구 링크를 묶는 프로젝트 엔티티"""
    id: int
    title: str
    description: str | None = None
    thumbnail_url: str | None = None
    github_repo: str | None = None       # owner/repo
    figma_file_key: str | None = None
    pl_board_id: int | None = None       # Project-Lite 보드 ID
    notion_pages: tuple[NotionPageRef, ...] = ()
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def notion_page_ids(self) -> list[str]:
        return [page.page_id for page in self.notion_pages]


@dataclass(frozen=True)
class NotionPageInput:
    """저장 전 Notion 페이지 입력값 (정규화 완료)"""
    page_id: str
    title: str | None = None


@dataclass(frozen=True)
class ProjectDraft:
    """생성/수정 시 저장소에 전달되는 정규화된 값"""
    title: str
    description: str | None = None
    thumbnail_url: str | None = None
    github_repo: str | None = None
    figma_file_key: str | None = None
    pl_board_id: int | None = None
    notion_pages: list[NotionPageInput] = field(default_factory=list)


def project_summary_cache_key(project_id: int) -> str:
    """프로젝트별 Notion 요약 캐시 키"""
    return f"project:{project_id}:wiki-summary"
