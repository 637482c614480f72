import logging
from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path
from typing import AsyncIterator

import aiosqlite

from projecthub.domain.project import NotionPageInput, NotionPageRef, Project, ProjectDraft

logger = logging.getLogger(__name__)

_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS projects (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        title TEXT NOT NULL,
        description TEXT,
        thumbnail_url TEXT,
        github_repo TEXT,
        figma_file_key TEXT,
        pl_board_id INTEGER,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS notion_pages (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        project_id INTEGER NOT NULL,
        page_id TEXT NOT NULL,
        title TEXT,
        position INTEGER NOT NULL DEFAULT 0,
        created_at TEXT NOT NULL,
        FOREIGN KEY (project_id) REFERENCES projects(id) ON DELETE CASCADE
    )
    """,
    """
    CREATE INDEX IF NOT EXISTS idx_notion_pages_project
    ON notion_pages(project_id, position)
    """,
)


def _now() -> str:
    return datetime.now().isoformat(timespec="seconds")


class SqliteProjectRepository:
    """SQLite(aiosqlite) 기반 Project / NotionPage 저장소"""

    def __init__(self, db_path: str | Path):
        self._db_path = Path(db_path)
        self._initialized = False

    async def initialize(self) -> None:
        """DB 파일 디렉토리와 스키마를 준비합니다."""
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        async with aiosqlite.connect(self._db_path) as db:
            for statement in _SCHEMA:
                await db.execute(statement)
            await db.commit()
        self._initialized = True
        logger.info("SQLite 스키마 준비 완료: %s", self._db_path)

    # ------------------------------------------------------------------
    # Public methods
    # ------------------------------------------------------------------

    async def list_projects(self) -> list[Project]:
        async with self._connect() as db:
            cursor = await db.execute(
                "SELECT id FROM projects ORDER BY created_at DESC, id DESC"
            )
            rows = await cursor.fetchall()
            return [await self._fetch(db, row["id"]) for row in rows]

    async def get_project(self, project_id: int) -> Project | None:
        async with self._connect() as db:
            return await self._fetch(db, project_id)

    async def create_project(self, draft: ProjectDraft) -> Project:
        now = _now()
        async with self._connect() as db:
            try:
                cursor = await db.execute(
                    """
                    INSERT INTO projects (
                        title, description, thumbnail_url, github_repo,
                        figma_file_key, pl_board_id, created_at, updated_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        draft.title, draft.description, draft.thumbnail_url, draft.github_repo,
                        draft.figma_file_key, draft.pl_board_id, now, now,
                    ),
                )
                project_id = cursor.lastrowid
                await self._insert_pages(db, project_id, draft.notion_pages, now)
                await db.commit()
            except Exception:
                await db.rollback()
                raise

            logger.info("프로젝트 생성: id=%s, notion_pages=%d", project_id, len(draft.notion_pages))
            return await self._fetch(db, project_id)

    async def update_project(
        self,
        project_id: int,
        draft: ProjectDraft,
        replace_pages: bool,
    ) -> Project | None:
        now = _now()
        async with self._connect() as db:
            try:
                cursor = await db.execute(
                    """
                    UPDATE projects SET
                        title = ?, description = ?, thumbnail_url = ?, github_repo = ?,
                        figma_file_key = ?, pl_board_id = ?, updated_at = ?
                    WHERE id = ?
                    """,
                    (
                        draft.title, draft.description, draft.thumbnail_url, draft.github_repo,
                        draft.figma_file_key, draft.pl_board_id, now, project_id,
                    ),
                )
                if cursor.rowcount == 0:
                    await db.rollback()
                    return None

                if replace_pages:
                    # 비교 없이 전부 삭제 후 재생성
                    await db.execute("DELETE FROM notion_pages WHERE project_id = ?", (project_id,))
                    await self._insert_pages(db, project_id, draft.notion_pages, now)
                await db.commit()
            except Exception:
                await db.rollback()
                raise

            logger.info("프로젝트 수정: id=%s, replace_pages=%s", project_id, replace_pages)
            return await self._fetch(db, project_id)

    async def delete_project(self, project_id: int) -> bool:
        async with self._connect() as db:
            cursor = await db.execute("DELETE FROM projects WHERE id = ?", (project_id,))
            await db.commit()
            deleted = cursor.rowcount > 0
        logger.info("프로젝트 삭제: id=%s, deleted=%s", project_id, deleted)
        return deleted

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @asynccontextmanager
    async def _connect(self) -> AsyncIterator[aiosqlite.Connection]:
        if not self._initialized:
            await self.initialize()
        async with aiosqlite.connect(self._db_path) as db:
            db.row_factory = aiosqlite.Row
            await db.execute("PRAGMA foreign_keys = ON")
            yield db

    async def _insert_pages(
        self,
        db: aiosqlite.Connection,
        project_id: int,
        pages: list[NotionPageInput],
        now: str,
    ) -> None:
        await db.executemany(
            """
            INSERT INTO notion_pages (project_id, page_id, title, position, created_at)
            VALUES (?, ?, ?, ?, ?)
            """,
            [
                (project_id, page.page_id, page.title, position, now)
                for position, page in enumerate(pages)
            ],
        )

    async def _fetch(self, db: aiosqlite.Connection, project_id: int) -> Project | None:
        cursor = await db.execute("SELECT * FROM projects WHERE id = ?", (project_id,))
        row = await cursor.fetchone()
        if row is None:
            return None

        cursor = await db.execute(
            "SELECT * FROM notion_pages WHERE project_id = ? ORDER BY position, id",
            (project_id,),
        )
        page_rows = await cursor.fetchall()

        return Project(
            id=row["id"],
            title=row["title"],
            description=row["description"],
            thumbnail_url=row["thumbnail_url"],
            github_repo=row["github_repo"],
            figma_file_key=row["figma_file_key"],
            pl_board_id=row["pl_board_id"],
            notion_pages=tuple(
                NotionPageRef(
                    id=page["id"],
                    project_id=page["project_id"],
                    page_id=page["page_id"],
                    title=page["title"],
                )
                for page in page_rows
            ),
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )
