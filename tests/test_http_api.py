"""HTTP API 테스트 (ASGITransport + 가짜 Port)"""

from typing import AsyncGenerator

import httpx
import pytest
from fakes import FakeGithubPort, FakeNotionPort, notion_page
from httpx import ASGITransport, AsyncClient

from projecthub.adapters.inbound.http.app import create_app
from projecthub.adapters.outbound.news_feed_adapter import NewsFeedAdapter
from projecthub.adapters.outbound.project_lite_adapter import ProjectLiteAdapter
from projecthub.configuration.container import create_container

PAGE_HEX = "fedcba9876543210fedcba9876543210"

FEED = """<?xml version="1.0"?>
<rss version="2.0"><channel>
  <item><title>One</title><link>https://news.test/1</link><pubDate>Mon, 05 Jan 2026 08:00:00 GMT</pubDate></item>
</channel></rss>"""


def _project_lite_handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/api/external/boards/42/summary":
        return httpx.Response(200, json={"board_title": "Sprint", "progress": {"rate": 75}})
    return httpx.Response(403, json={"message": "Forbidden"})


@pytest.fixture
def notion_port() -> FakeNotionPort:
    return FakeNotionPort(pages={PAGE_HEX: notion_page(PAGE_HEX, "Roadmap"), "other": notion_page("other")})


@pytest.fixture
async def client(settings, repository, cache, notion_port) -> AsyncGenerator[AsyncClient, None]:
    container = create_container(
        settings,
        cache=cache,
        project_repository=repository,
        github_port=FakeGithubPort(),
        notion_port=notion_port,
        project_lite_port=ProjectLiteAdapter(
            settings.project_lite_url, transport=httpx.MockTransport(_project_lite_handler),
        ),
        news_feed_port=NewsFeedAdapter(
            settings.news_feed_url, transport=httpx.MockTransport(lambda request: httpx.Response(200, text=FEED)),
        ),
    )
    async with AsyncClient(transport=ASGITransport(app=create_app(container)), base_url="http://test") as client:
        yield client


async def _create(client: AsyncClient, **payload) -> dict:
    payload.setdefault("title", "Dashboard")
    response = await client.post("/api/projects", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


class TestHealth:
    async def test_health(self, client):
        response = await client.get("/health")
        assert response.json() == {"status": "healthy"}


class TestProjectsApi:
    async def test_create_normalizes_links(self, client):
        project = await _create(
            client,
            github_repo="https://github.com/octo/hello",
            figma_file_key="https://www.figma.com/file/Key9/x",
            pl_board_id="https://pl.test/boards/42",
            notion_pages=[f"https://www.notion.so/Roadmap-{PAGE_HEX}", {"page_id": "other", "title": "Other"}],
        )

        assert project["github_repo"] == "octo/hello"
        assert project["figma_file_key"] == "Key9"
        assert project["pl_board_id"] == 42
        assert [p["page_id"] for p in project["notion_pages"]] == [PAGE_HEX, "other"]
        assert len(project["created_at"]) == len("2026-01-01")

    async def test_invalid_board_id(self, client):
        response = await client.post("/api/projects", json={"title": "x", "pl_board_id": "abc"})
        assert response.status_code == 422

    async def test_board_id_beyond_integer_range(self, client):
        response = await client.post(
            "/api/projects", json={"title": "x", "pl_board_id": "https://pl.test/boards/99999999999999999999"},
        )
        assert response.status_code == 422

    async def test_update_with_board_id_beyond_integer_range(self, client):
        project = await _create(client)

        response = await client.put(f"/api/projects/{project['id']}", json={"pl_board_id": 2**70})

        assert response.status_code == 422

    async def test_missing_title(self, client):
        response = await client.post("/api/projects", json={"description": "no title"})
        assert response.status_code == 422

    async def test_list_and_get(self, client):
        first = await _create(client, title="first")
        second = await _create(client, title="second")

        listed = (await client.get("/api/projects")).json()["data"]
        single = (await client.get(f"/api/projects/{first['id']}")).json()

        assert [p["id"] for p in listed] == [second["id"], first["id"]]
        assert single["title"] == "first"

    async def test_get_missing(self, client):
        response = await client.get("/api/projects/999")
        assert (response.status_code, response.json()) == (404, {"message": "Project not found"})

    async def test_update(self, client):
        project = await _create(client, github_repo="octo/hello", notion_pages=["a", "b"])

        response = await client.put(f"/api/projects/{project['id']}", json={"notion_pages": ["c"]})

        body = response.json()
        assert response.status_code == 200
        assert body["github_repo"] == "octo/hello"
        assert [p["page_id"] for p in body["notion_pages"]] == ["c"]

    async def test_update_missing(self, client):
        response = await client.put("/api/projects/999", json={"title": "x"})
        assert response.status_code == 404

    async def test_delete(self, client):
        project = await _create(client)

        assert (await client.delete(f"/api/projects/{project['id']}")).status_code == 204
        assert (await client.get(f"/api/projects/{project['id']}")).status_code == 404
        assert (await client.delete(f"/api/projects/{project['id']}")).status_code == 404


class TestIntegrationsApi:
    async def test_github_not_linked(self, client):
        project = await _create(client)

        response = await client.get(f"/api/projects/{project['id']}/github")

        assert (response.status_code, response.json()) == (404, {"message": "GitHub repository not linked"})

    async def test_github_summary(self, client):
        project = await _create(client, github_repo="octo/hello")

        response = await client.get(f"/api/projects/{project['id']}/github")

        assert response.status_code == 200
        assert response.json()["repo"]["full_name"] == "octo/hello"

    async def test_integration_for_missing_project(self, client):
        for suffix in ("github", "notion", "project-lite"):
            response = await client.get(f"/api/projects/999/{suffix}")
            assert response.status_code == 404

    async def test_notion_cache_and_invalidation(self, client, notion_port):
        project = await _create(client, notion_pages=[PAGE_HEX, "missing"])
        url = f"/api/projects/{project['id']}/notion"

        first = (await client.get(url)).json()["pages"]
        await client.get(url)

        assert first[0]["title"] == "Roadmap"
        assert first[1] == {"id": "missing", "error": "Failed to fetch page", "status": 404}
        assert notion_port.calls == [PAGE_HEX, "missing"]

        await client.put(f"/api/projects/{project['id']}", json={"notion_pages": ["other"]})
        refreshed = (await client.get(url)).json()["pages"]

        assert [p["id"] for p in refreshed] == ["other"]
        assert notion_port.calls == [PAGE_HEX, "missing", "other"]

    async def test_project_lite_passthrough(self, client):
        linked = await _create(client, pl_board_id=42)
        forbidden = await _create(client, pl_board_id="7")
        unlinked = await _create(client)

        ok = await client.get(f"/api/projects/{linked['id']}/project-lite")
        denied = await client.get(f"/api/projects/{forbidden['id']}/project-lite")
        missing = await client.get(f"/api/projects/{unlinked['id']}/project-lite")

        assert (ok.status_code, ok.json()["progress"]) == (200, {"rate": 75})
        assert (denied.status_code, denied.json()) == (403, {"message": "Forbidden"})
        assert (missing.status_code, missing.json()) == (404, {"message": "Project-Lite Board ID not set"})

    async def test_news(self, client):
        response = await client.get("/api/news")

        assert response.status_code == 200
        assert response.json()["articles"] == [{
            "title": "One",
            "link": "https://news.test/1",
            "pubDate": "2026-01-05",
            "creator": "",
            "thumbnail": None,
        }]
