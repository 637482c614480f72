from dataclasses import dataclass
from functools import lru_cache

from projecthub.adapters.outbound.github_adapter import GithubAdapter
from projecthub.adapters.outbound.in_memory_cache import InMemoryCache
from projecthub.adapters.outbound.news_feed_adapter import NewsFeedAdapter
from projecthub.adapters.outbound.notion_adapter import NotionAdapter
from projecthub.adapters.outbound.project_lite_adapter import ProjectLiteAdapter
from projecthub.adapters.outbound.sqlite_project_repository import SqliteProjectRepository
from projecthub.application.ports.cache_port import CachePort
from projecthub.application.ports.github_port import GithubPort
from projecthub.application.ports.news_feed_port import NewsFeedPort
from projecthub.application.ports.notion_port import NotionPort
from projecthub.application.ports.project_lite_port import ProjectLitePort
from projecthub.application.ports.project_repository_port import ProjectRepositoryPort
from projecthub.application.use_cases.create_project import CreateProjectUseCase
from projecthub.application.use_cases.delete_project import DeleteProjectUseCase
from projecthub.application.use_cases.get_github_summary import GetGithubSummaryUseCase
from projecthub.application.use_cases.get_notion_summaries import GetNotionSummariesUseCase
from projecthub.application.use_cases.get_project import GetProjectUseCase
from projecthub.application.use_cases.get_project_lite_summary import GetProjectLiteSummaryUseCase
from projecthub.application.use_cases.get_tech_news import GetTechNewsUseCase
from projecthub.application.use_cases.list_projects import ListProjectsUseCase
from projecthub.application.use_cases.update_project import UpdateProjectUseCase
from projecthub.configuration.settings import Settings, build_settings


@dataclass(frozen=True)
class Container:
    settings: Settings
    list_projects_use_case: ListProjectsUseCase
    get_project_use_case: GetProjectUseCase
    create_project_use_case: CreateProjectUseCase
    update_project_use_case: UpdateProjectUseCase
    delete_project_use_case: DeleteProjectUseCase
    get_github_summary_use_case: GetGithubSummaryUseCase
    get_notion_summaries_use_case: GetNotionSummariesUseCase
    get_project_lite_summary_use_case: GetProjectLiteSummaryUseCase
    get_tech_news_use_case: GetTechNewsUseCase


def create_container(
    settings: Settings,
    *,
    cache: CachePort | None = None,
    project_repository: ProjectRepositoryPort | None = None,
    github_port: GithubPort | None = None,
    notion_port: NotionPort | None = None,
    project_lite_port: ProjectLitePort | None = None,
    news_feed_port: NewsFeedPort | None = None,
) -> Container:
    """설정으로부터 어댑터와 Use Case를 조립합니다. 테스트에서는 어댑터를 교체할 수 있습니다."""
    # 캐시는 프로세스 수명 동안 하나를 공유하고 Use Case에 명시적으로 주입
    cache = cache or InMemoryCache()
    project_repository = project_repository or SqliteProjectRepository(settings.database_path)

    github_port = github_port or GithubAdapter(
        token=settings.github_token,
        base_url=settings.github_api_url,
    )
    notion_port = notion_port or NotionAdapter(
        token=settings.notion_token,
        base_url=settings.notion_api_url,
        notion_version=settings.notion_version,
    )
    project_lite_port = project_lite_port or ProjectLiteAdapter(base_url=settings.project_lite_url)
    news_feed_port = news_feed_port or NewsFeedAdapter(feed_url=settings.news_feed_url)

    # 프로젝트 관리 Use Cases
    list_projects_use_case = ListProjectsUseCase(project_repository=project_repository)
    get_project_use_case = GetProjectUseCase(project_repository=project_repository)
    create_project_use_case = CreateProjectUseCase(project_repository=project_repository)
    update_project_use_case = UpdateProjectUseCase(
        project_repository=project_repository,
        cache=cache,
    )
    delete_project_use_case = DeleteProjectUseCase(
        project_repository=project_repository,
        cache=cache,
    )

    # 외부 연동 Use Cases
    get_github_summary_use_case = GetGithubSummaryUseCase(github_port=github_port)
    get_notion_summaries_use_case = GetNotionSummariesUseCase(
        notion_port=notion_port,
        cache=cache,
        cache_ttl_seconds=settings.notion_cache_ttl_seconds,
    )
    get_project_lite_summary_use_case = GetProjectLiteSummaryUseCase(
        project_lite_port=project_lite_port,
    )
    get_tech_news_use_case = GetTechNewsUseCase(news_feed_port=news_feed_port)

    return Container(
        settings=settings,
        list_projects_use_case=list_projects_use_case,
        get_project_use_case=get_project_use_case,
        create_project_use_case=create_project_use_case,
        update_project_use_case=update_project_use_case,
        delete_project_use_case=delete_project_use_case,
        get_github_summary_use_case=get_github_summary_use_case,
        get_notion_summaries_use_case=get_notion_summaries_use_case,
        get_project_lite_summary_use_case=get_project_lite_summary_use_case,
        get_tech_news_use_case=get_tech_news_use_case,
    )


@lru_cache(maxsize=1)
def build_container() -> Container:
    return create_container(build_settings())


def clear_container() -> None:
    build_container.cache_clear()
