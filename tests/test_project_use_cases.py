"""프로젝트 CRUD Use Case 테스트"""

import pytest

from projecthub.application.use_cases.create_project import CreateProjectUseCase
from projecthub.application.use_cases.delete_project import DeleteProjectUseCase
from projecthub.application.use_cases.update_project import UpdateProjectUseCase
from projecthub.domain.errors import InvalidProjectInputError
from projecthub.domain.project import project_summary_cache_key

PAGE_HEX = "0123456789abcdef0123456789abcdef"


class TestCreateProject:
    async def test_pasted_urls_are_normalized(self, repository):
        use_case = CreateProjectUseCase(project_repository=repository)

        project = await use_case.execute({
            "title": "  Dashboard  ",
            "github_repo": "https://github.com/octo/hello/tree/main",
            "figma_file_key": "https://www.figma.com/design/Key123/Name",
            "pl_board_id": "https://pl.test/boards/42",
            "notion_pages": [
                f"https://www.notion.so/Roadmap-{PAGE_HEX}",
                {"page_id": "  raw-id  ", "title": "Raw"},
                "   ",
            ],
        })

        assert project.title == "Dashboard"
        assert project.github_repo == "octo/hello"
        assert project.figma_file_key == "Key123"
        assert project.pl_board_id == 42
        assert project.notion_page_ids == [PAGE_HEX, "raw-id"]
        assert project.notion_pages[1].title == "Raw"

    async def test_title_required(self, repository):
        with pytest.raises(InvalidProjectInputError):
            await CreateProjectUseCase(project_repository=repository).execute({"title": "  "})

    @pytest.mark.parametrize("board", ["https://pl.test/boards/99999999999999999999", "0", -3])
    async def test_out_of_range_board_id(self, repository, board):
        with pytest.raises(InvalidProjectInputError):
            await CreateProjectUseCase(project_repository=repository).execute({"title": "x", "pl_board_id": board})

        assert await repository.list_projects() == []

    async def test_unparseable_board_id(self, repository):
        with pytest.raises(InvalidProjectInputError):
            await CreateProjectUseCase(project_repository=repository).execute(
                {"title": "x", "pl_board_id": "my-board"}
            )

        assert await repository.list_projects() == []


class TestUpdateProject:
    async def test_partial_update_keeps_other_fields(self, repository, cache):
        created = await CreateProjectUseCase(repository).execute(
            {"title": "a", "github_repo": "octo/hello", "notion_pages": ["p1"]}
        )
        cache.set(project_summary_cache_key(created.id), ["cached"], ttl_seconds=60)

        updated = await UpdateProjectUseCase(repository, cache).execute(created.id, {"title": "b"})

        assert updated.title == "b"
        assert updated.github_repo == "octo/hello"
        assert updated.notion_page_ids == ["p1"]
        assert cache.get(project_summary_cache_key(created.id)) == ["cached"]

    async def test_replacing_pages_invalidates_cache(self, repository, cache):
        created = await CreateProjectUseCase(repository).execute({"title": "a", "notion_pages": ["p1"]})
        cache.set(project_summary_cache_key(created.id), ["cached"], ttl_seconds=60)

        updated = await UpdateProjectUseCase(repository, cache).execute(
            created.id, {"notion_pages": ["p2", "p3"]}
        )

        assert updated.notion_page_ids == ["p2", "p3"]
        assert cache.get(project_summary_cache_key(created.id)) is None

    async def test_missing_project(self, repository, cache):
        assert await UpdateProjectUseCase(repository, cache).execute(404, {"title": "x"}) is None


class TestDeleteProject:
    async def test_delete_invalidates_cache(self, repository, cache):
        created = await CreateProjectUseCase(repository).execute({"title": "a"})
        cache.set(project_summary_cache_key(created.id), [], ttl_seconds=60)

        assert await DeleteProjectUseCase(repository, cache).execute(created.id) is True
        assert cache.get(project_summary_cache_key(created.id)) is None

    async def test_delete_missing(self, repository, cache):
        assert await DeleteProjectUseCase(repository, cache).execute(12345) is False
