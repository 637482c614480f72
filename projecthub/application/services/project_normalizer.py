import logging
from typing import Any

from projecthub.domain.errors import InvalidProjectInputError
from projecthub.domain.identifiers import (
    extract_board_id,
    extract_figma_file_key,
    extract_github_repo,
    extract_notion_page_id,
)
from projecthub.domain.project import NotionPageInput, Project, ProjectDraft

logger = logging.getLogger(__name__)

# SQLite INTEGER 상한
_MAX_BOARD_ID = 2**63 - 1

# 수정 요청에서 변경 가능한 단일 값 필드
SCALAR_FIELDS = (
    "title", "description", "thumbnail_url", "github_repo", "figma_file_key", "pl_board_id",
)


def normalize_board_id(raw: Any) -> int | None:
    """보드 ID를 정규화합니다. 값이 있는데 해석할 수 없으면 검증 오류."""
    board_id = extract_board_id(raw)
    if board_id is None and raw not in (None, "") and str(raw).strip():
        raise InvalidProjectInputError(f"Project-Lite 보드 ID를 해석할 수 없습니다: {raw!r}")
    if board_id is not None and not 1 <= board_id <= _MAX_BOARD_ID:
        raise InvalidProjectInputError(f"Project-Lite 보드 ID 범위를 벗어났습니다: {raw!r}")
    return board_id


def normalize_notion_pages(raw_pages: list[Any] | None) -> list[NotionPageInput]:
    """Notion 페이지 입력 목록을 정규화합니다.

    각 항목은 URL/ID 문자열 또는 {"page_id": ..., "title": ...} dict.
    빈 값은 건너뜁니다.
    """
    pages = []
    for raw in raw_pages or []:
        if isinstance(raw, dict):
            raw_id, title = raw.get("page_id"), raw.get("title")
        else:
            raw_id, title = raw, None
        page_id = extract_notion_page_id(raw_id.strip() if isinstance(raw_id, str) else raw_id)
        if page_id:
            pages.append(NotionPageInput(page_id=page_id, title=title))
    return pages


def build_draft(values: dict[str, Any], base: Project | None = None) -> ProjectDraft:
    """입력값(붙여넣은 URL 포함)을 저장 가능한 ProjectDraft로 변환합니다.

    base가 주어지면 values에 없는 필드는 base의 값을 유지합니다.
    이미 저장된 값은 정규화된 상태이므로 다시 적용해도 그대로입니다.
    """
    merged: dict[str, Any] = {}
    for name in SCALAR_FIELDS:
        if name in values:
            merged[name] = values[name]
        elif base is not None:
            merged[name] = getattr(base, name)
        else:
            merged[name] = None

    title = (merged["title"] or "").strip()
    if not title:
        raise InvalidProjectInputError("title은 필수입니다")

    if "notion_pages" in values:
        notion_pages = normalize_notion_pages(values["notion_pages"])
    elif base is not None:
        notion_pages = [NotionPageInput(page_id=p.page_id, title=p.title) for p in base.notion_pages]
    else:
        notion_pages = []

    draft = ProjectDraft(
        title=title,
        description=merged["description"],
        thumbnail_url=merged["thumbnail_url"],
        github_repo=extract_github_repo(merged["github_repo"]),
        figma_file_key=extract_figma_file_key(merged["figma_file_key"]),
        pl_board_id=normalize_board_id(merged["pl_board_id"]),
        notion_pages=notion_pages,
    )
    logger.info(
        "입력 정규화: github=%s, figma=%s, board=%s, notion=%d",
        draft.github_repo, draft.figma_file_key, draft.pl_board_id, len(draft.notion_pages),
    )
    return draft


def serialize_project(project: Project) -> dict[str, Any]:
    """API 응답용 dict로 변환합니다 (날짜는 YYYY-MM-DD)."""
    return {
        "id": project.id,
        "title": project.title,
        "description": project.description,
        "thumbnail_url": project.thumbnail_url,
        "github_repo": project.github_repo,
        "pl_board_id": project.pl_board_id,
        "figma_file_key": project.figma_file_key,
        "notion_pages": [
            {"id": page.id, "page_id": page.page_id, "title": page.title}
            for page in project.notion_pages
        ],
        "created_at": project.created_at.strftime("%Y-%m-%d") if project.created_at else None,
        "updated_at": project.updated_at.strftime("%Y-%m-%d") if project.updated_at else None,
    }
