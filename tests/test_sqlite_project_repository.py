"""SqliteProjectRepository 테스트"""

import aiosqlite

from projecthub.domain.project import NotionPageInput, ProjectDraft


def _draft(title: str = "Dashboard", pages: tuple[str, ...] = ()) -> ProjectDraft:
    return ProjectDraft(
        title=title,
        github_repo="octo/hello",
        pl_board_id=7,
        notion_pages=[NotionPageInput(page_id=p, title=f"t-{p}") for p in pages],
    )


class TestSqliteProjectRepository:
    async def test_create_and_get(self, repository):
        created = await repository.create_project(_draft(pages=("a", "b")))

        loaded = await repository.get_project(created.id)

        assert loaded == created
        assert loaded.github_repo == "octo/hello"
        assert loaded.pl_board_id == 7
        assert loaded.notion_page_ids == ["a", "b"]
        assert loaded.created_at is not None

    async def test_get_missing(self, repository):
        assert await repository.get_project(999) is None

    async def test_list_newest_first(self, repository):
        first = await repository.create_project(_draft("first"))
        second = await repository.create_project(_draft("second"))

        projects = await repository.list_projects()

        assert [p.id for p in projects] == [second.id, first.id]

    async def test_update_replaces_pages(self, repository):
        created = await repository.create_project(_draft(pages=("a", "b")))
        old_ids = {p.id for p in created.notion_pages}

        updated = await repository.update_project(created.id, _draft("renamed", pages=("c",)), replace_pages=True)

        assert updated.title == "renamed"
        assert updated.notion_page_ids == ["c"]
        assert not old_ids & {p.id for p in updated.notion_pages}

    async def test_update_without_replace_keeps_pages(self, repository):
        created = await repository.create_project(_draft(pages=("a",)))

        updated = await repository.update_project(created.id, _draft("renamed"), replace_pages=False)

        assert [p.id for p in updated.notion_pages] == [p.id for p in created.notion_pages]

    async def test_update_missing(self, repository):
        assert await repository.update_project(42, _draft(), replace_pages=True) is None

    async def test_delete_cascades_pages(self, repository, tmp_path):
        created = await repository.create_project(_draft(pages=("a", "b")))

        assert await repository.delete_project(created.id) is True
        assert await repository.get_project(created.id) is None
        assert await repository.delete_project(created.id) is False

        async with aiosqlite.connect(tmp_path / "projecthub.db") as db:
            cursor = await db.execute("SELECT COUNT(*) FROM notion_pages")
            (count,) = await cursor.fetchone()
        assert count == 0
