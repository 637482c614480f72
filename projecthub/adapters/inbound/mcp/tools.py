import logging
import sys
import traceback

from mcp.server import Server
from mcp.types import TextContent, Tool

from projecthub.configuration.container import Container, build_container
from projecthub.domain.integrations import IntegrationResult
from projecthub.domain.project import Project

logger = logging.getLogger(__name__)


def _parse_project_id(arguments: dict) -> int:
    raw = arguments.get("project_id")
    if raw is None or str(raw).strip() == "":
        raise ValueError("project_id 파라미터가 필요합니다")
    try:
        return int(str(raw).strip())
    except ValueError as e:
        raise ValueError(f"project_id는 정수여야 합니다: {raw!r}") from e


def _format_failure(title: str, result: IntegrationResult) -> str:
    """실패한 IntegrationResult를 안내 메시지로 변환합니다."""
    message = result.body.get("message", "") if isinstance(result.body, dict) else str(result.body)
    text = f"# ⚠️ {title}\n\n"
    text += f"**상태 코드:** {result.status_code}\n"
    text += f"**메시지:** {message}\n"
    return text


def format_projects(projects: list[Project]) -> str:
    if not projects:
        return "등록된 프로젝트가 없습니다."

    text = "# 📁 프로젝트 목록\n\n"
    text += f"**총 {len(projects)}건**\n\n"
    text += "| ID | 제목 | GitHub | Figma | 보드 | Notion |\n"
    text += "|----|------|--------|-------|------|--------|\n"
    for p in projects:
        text += (
            f"| {p.id} | {p.title} | {p.github_repo or '-'} | {p.figma_file_key or '-'} "
            f"| {p.pl_board_id or '-'} | {len(p.notion_pages)}건 |\n"
        )
    return text


def format_github(project: Project, result: IntegrationResult) -> str:
    if not result.ok:
        return _format_failure("GitHub 정보를 가져오지 못했습니다", result)

    repo = result.body["repo"]
    commits = result.body["commits"]
    text = f"# 🐙 [{repo['full_name']}]({repo['html_url']})\n\n"
    if repo.get("description"):
        text += f"{repo['description']}\n\n"
    text += "| 항목 | 내용 |\n"
    text += "|------|------|\n"
    text += f"| **Stars** | {repo['stargazers_count']} |\n"
    text += f"| **Forks** | {repo['forks_count']} |\n"
    text += f"| **언어** | {repo.get('language') or '-'} |\n"
    text += f"| **마지막 푸시** | {repo.get('pushed_at') or '-'} |\n"

    text += "\n## 최근 커밋\n\n"
    if not commits:
        text += "커밋 정보를 가져오지 못했거나 커밋이 없습니다.\n"
    for c in commits:
        first_line = c["commit"]["message"].splitlines()[0] if c["commit"]["message"] else ""
        author = c["commit"]["author"]
        text += f"- [`{c['sha'][:7]}`]({c['html_url']}) {first_line} ({author['name']}, {author['date']})\n"
    return text


def format_notion(project: Project, result: IntegrationResult) -> str:
    if not result.ok:
        return _format_failure("Notion 페이지를 가져오지 못했습니다", result)

    pages = result.body["pages"]
    if not pages:
        return f"프로젝트 {project.id}에 연결된 Notion 페이지가 없습니다."

    text = f"# 📝 Notion 페이지 ({project.title})\n\n"
    for i, page in enumerate(pages, 1):
        if "error" in page:
            text += f"{i}. ❌ `{page['id']}` - {page['error']} (status {page['status']})\n"
        else:
            title = page.get("title") or "(제목 없음)"
            text += f"{i}. [{title}]({page['url']}) - 수정: {page.get('last_edited_time') or '-'}\n"
    return text


def format_board(project: Project, result: IntegrationResult) -> str:
    if not result.ok:
        return _format_failure("Project-Lite 보드 정보를 가져오지 못했습니다", result)

    data = result.body if isinstance(result.body, dict) else {}
    progress = data.get("progress") or {}
    tasks = data.get("tasks") or {}

    text = f"# 📊 {data.get('board_title', f'보드 {project.pl_board_id}')}\n\n"
    text += "| 항목 | 내용 |\n"
    text += "|------|------|\n"
    text += f"| **진행률** | {progress.get('rate', '-')}% |\n"
    text += f"| **완료 / 전체** | {progress.get('completed', '-')} / {progress.get('total', '-')} |\n"
    text += f"| **지연** | {progress.get('overdue_count', '-')}건 |\n"

    for label, key in (("오늘 마감", "today"), ("이번 주 마감", "week")):
        items = tasks.get(key) or []
        text += f"\n## {label} ({len(items)}건)\n\n"
        for task in items:
            mark = "x" if task.get("is_completed") else " "
            text += f"- [{mark}] {task.get('title', '')} ({task.get('end_date', '-')})\n"
    return text


def format_news(result: IntegrationResult) -> str:
    if not result.ok:
        return _format_failure("뉴스를 가져오지 못했습니다", result)

    articles = result.body["articles"]
    if not articles:
        return "조회된 기사가 없습니다."

    text = "# 📰 기술 뉴스\n\n"
    for i, article in enumerate(articles, 1):
        text += f"### {i}. [{article['title']}]({article['link']})\n\n"
        text += f"{article['pubDate'] or '날짜 없음'} · {article['creator'] or '작성자 미상'}\n\n"
    return text


async def _require_project(container: Container, arguments: dict) -> Project | list[TextContent]:
    project_id = _parse_project_id(arguments)
    project = await container.get_project_use_case.execute(project_id)
    if project is None:
        return [TextContent(
            type="text",
            text=f"# ⚠️ 프로젝트를 찾을 수 없습니다\n\n**프로젝트 ID:** {project_id}",
        )]
    return project


def register_tools(app: Server) -> None:
    """MCP Tool 핸들러를 서버에 등록합니다."""

    @app.call_tool()
    async def call_tool(name: str, arguments: dict):
        try:
            container = build_container()
            logger.info("=" * 60)
            logger.info("🔧 Tool 호출: %s", name)
            logger.info("인자: %s", arguments)
            logger.info("=" * 60)

            if name == "list_projects":
                projects = await container.list_projects_use_case.execute()
                return [TextContent(type="text", text=format_projects(projects))]

            if name == "get_tech_news":
                result = await container.get_tech_news_use_case.execute()
                return [TextContent(type="text", text=format_news(result))]

            if name in ("get_project_github", "get_project_notion", "get_project_board"):
                project = await _require_project(container, arguments)
                if not isinstance(project, Project):
                    return project

                if name == "get_project_github":
                    result = await container.get_github_summary_use_case.execute(project)
                    text = format_github(project, result)
                elif name == "get_project_notion":
                    result = await container.get_notion_summaries_use_case.execute(project)
                    text = format_notion(project, result)
                else:
                    result = await container.get_project_lite_summary_use_case.execute(project)
                    text = format_board(project, result)

                logger.info("✅ Tool 실행 완료: %s (status=%d)", name, result.status_code)
                return [TextContent(type="text", text=text)]

            raise ValueError(f"알 수 없는 tool: {name}")

        except Exception as e:
            logger.error("=" * 60)
            logger.error("❌ Tool 실행 실패!")
            logger.error("Tool: %s", name)
            logger.error("오류 타입: %s", type(e).__name__)
            logger.error("오류 메시지: %s", str(e))
            logger.error("=" * 60)
            traceback.print_exc(file=sys.stderr)

            error_message = f"""# ❌ 오류 발생

**Tool:** {name}
**오류 타입:** {type(e).__name__}
**오류 메시지:** {str(e)}

자세한 내용은 서버 로그를 확인하세요.
"""
            return [TextContent(type="text", text=error_message)]

    @app.list_tools()
    async def list_tools():
        project_id_schema = {
            "type": "object",
            "properties": {
                "project_id": {
                    "type": "integer",
                    "description": "프로젝트 ID (list_projects로 확인)",
                }
            },
            "required": ["project_id"],
        }

        return [
            Tool(
                name="list_projects",
                description="등록된 프로젝트 목록과 연결된 외부 도구(GitHub, Figma, Project-Lite, Notion)를 조회합니다.",
                inputSchema={"type": "object", "properties": {}},
            ),
            Tool(
                name="get_project_github",
                description="프로젝트에 연결된 GitHub 저장소 정보와 최근 커밋 5건을 조회합니다.",
                inputSchema=project_id_schema,
            ),
            Tool(
                name="get_project_notion",
                description="""프로젝트에 연결된 Notion 페이지 요약을 조회합니다.

결과는 1시간 동안 캐시되며, 페이지 목록을 수정하면 즉시 갱신됩니다.
일부 페이지 조회에 실패해도 나머지 결과는 표시됩니다.""",
                inputSchema=project_id_schema,
            ),
            Tool(
                name="get_project_board",
                description="프로젝트에 연결된 Project-Lite 보드의 진행률과 마감 임박 태스크를 조회합니다.",
                inputSchema=project_id_schema,
            ),
            Tool(
                name="get_tech_news",
                description="기술 뉴스 피드의 최신 기사 5건을 조회합니다.",
                inputSchema={"type": "object", "properties": {}},
            ),
        ]
