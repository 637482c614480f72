"""프로젝트 / 외부 연동 API 라우트.

연동 엔드포인트는 예외를 던지지 않습니다. 모든 결과는 IntegrationResult로
받아 해당 상태 코드 그대로 응답합니다.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from projecthub.application.services.project_normalizer import serialize_project
from projecthub.configuration.container import Container
from projecthub.domain.errors import InvalidProjectInputError
from projecthub.domain.integrations import IntegrationResult
from projecthub.domain.project import Project

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Request Models
# =============================================================================


class NotionPageIn(BaseModel):
    page_id: str
    title: str | None = None


class ProjectCreateRequest(BaseModel):
    """프로젝트 생성 요청. 외부 링크는 붙여넣은 URL이어도 됩니다."""

    title: str
    description: str | None = None
    thumbnail_url: str | None = None
    github_repo: str | None = None
    figma_file_key: str | None = None
    pl_board_id: str | int | None = None
    notion_pages: list[NotionPageIn | str] = []


class ProjectUpdateRequest(BaseModel):
    """부분 수정. notion_pages를 보내면 페이지 목록 전체를 교체합니다."""

    title: str | None = None
    description: str | None = None
    thumbnail_url: str | None = None
    github_repo: str | None = None
    figma_file_key: str | None = None
    pl_board_id: str | int | None = None
    notion_pages: list[NotionPageIn | str] | None = None


# =============================================================================
# Helpers
# =============================================================================


def get_container(request: Request) -> Container:
    return request.app.state.container


def _to_response(result: IntegrationResult) -> JSONResponse:
    return JSONResponse(content=result.body, status_code=result.status_code)


def _project_not_found() -> JSONResponse:
    return JSONResponse(content={"message": "Project not found"}, status_code=404)


def _values(payload: BaseModel, exclude_unset: bool) -> dict[str, Any]:
    values = payload.model_dump(exclude_unset=exclude_unset)
    if values.get("notion_pages") is None:
        values.pop("notion_pages", None)
    return values


async def _load_project(container: Container, project_id: int) -> Project | None:
    return await container.get_project_use_case.execute(project_id)


# =============================================================================
# Projects
# =============================================================================


@router.get("/projects")
async def list_projects(container: Container = Depends(get_container)) -> dict[str, Any]:
    """최신 등록 순 프로젝트 목록"""
    projects = await container.list_projects_use_case.execute()
    return {"data": [serialize_project(p) for p in projects]}


@router.post("/projects", status_code=201)
async def create_project(
    payload: ProjectCreateRequest,
    container: Container = Depends(get_container),
) -> dict[str, Any]:
    """프로젝트 생성. 붙여넣은 URL은 저장 전에 정규화됩니다."""
    try:
        project = await container.create_project_use_case.execute(_values(payload, exclude_unset=False))
    except InvalidProjectInputError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return serialize_project(project)


@router.get("/projects/{project_id}")
async def get_project(project_id: int, container: Container = Depends(get_container)):
    project = await _load_project(container, project_id)
    if project is None:
        return _project_not_found()
    return serialize_project(project)


@router.put("/projects/{project_id}")
async def update_project(
    project_id: int,
    payload: ProjectUpdateRequest,
    container: Container = Depends(get_container),
):
    try:
        project = await container.update_project_use_case.execute(
            project_id, _values(payload, exclude_unset=True),
        )
    except InvalidProjectInputError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if project is None:
        return _project_not_found()
    return serialize_project(project)


@router.delete("/projects/{project_id}", status_code=204)
async def delete_project(project_id: int, container: Container = Depends(get_container)):
    deleted = await container.delete_project_use_case.execute(project_id)
    if not deleted:
        return _project_not_found()
    return Response(status_code=204)


# =============================================================================
# Integrations
# =============================================================================


@router.get("/projects/{project_id}/github")
async def get_github_summary(project_id: int, container: Container = Depends(get_container)):
    """저장소 정보 + 최근 커밋 5건"""
    project = await _load_project(container, project_id)
    if project is None:
        return _project_not_found()
    return _to_response(await container.get_github_summary_use_case.execute(project))


@router.get("/projects/{project_id}/notion")
async def get_notion_summaries(project_id: int, container: Container = Depends(get_container)):
    """연결된 Notion 페이지 요약. 실패한 페이지는 오류 레코드로 포함됩니다."""
    project = await _load_project(container, project_id)
    if project is None:
        return _project_not_found()
    return _to_response(await container.get_notion_summaries_use_case.execute(project))


@router.get("/projects/{project_id}/project-lite")
async def get_project_lite_summary(project_id: int, container: Container = Depends(get_container)):
    """Project-Lite 보드 요약 프록시"""
    project = await _load_project(container, project_id)
    if project is None:
        return _project_not_found()
    return _to_response(await container.get_project_lite_summary_use_case.execute(project))


@router.get("/news")
async def get_tech_news(container: Container = Depends(get_container)):
    """최신 기술 뉴스 (프로젝트와 무관)"""
    return _to_response(await container.get_tech_news_use_case.execute())
