import asyncio
import logging

from projecthub.application.ports.github_port import GithubPort
from projecthub.domain.errors import ConfigurationError, IntegrationError, UpstreamHttpError
from projecthub.domain.integrations import GithubCommit, GithubRepository, GithubSummary, IntegrationResult
from projecthub.domain.project import Project

logger = logging.getLogger(__name__)

COMMIT_LIMIT = 5


class GetGithubSummaryUseCase:
    """프로젝트에 연결된 GitHub 저장소 정보와 최근 커밋을 조회하는 Use Case"""

    def __init__(self, github_port: GithubPort):
        self.github_port = github_port

    async def execute(self, project: Project) -> IntegrationResult:
        """
        저장소 메타데이터와 최근 커밋 5건을 조회합니다.

        - 저장소 조회 실패: GitHub 상태 코드로 전체 실패
        - 커밋 조회만 실패: commits=[] 로 성공 처리
        - 연결 실패: 503
        """
        logger.info("📋 GetGithubSummaryUseCase 실행: project_id=%s, repo=%s", project.id, project.github_repo)

        if not project.github_repo:
            return IntegrationResult.failure(404, "GitHub repository not linked")

        try:
            self.github_port.ensure_configured()
        except ConfigurationError:
            return IntegrationResult.failure(500, "Server configuration error")

        repo_result, commits_result = await asyncio.gather(
            self.github_port.get_repository(project.github_repo),
            self.github_port.get_commits(project.github_repo, limit=COMMIT_LIMIT),
            return_exceptions=True,
        )

        if isinstance(repo_result, UpstreamHttpError):
            logger.warning("저장소 조회 실패: repo=%s, status=%d", project.github_repo, repo_result.status_code)
            return IntegrationResult.failure(
                repo_result.status_code, "Repository not found or access denied",
            )
        if isinstance(repo_result, ConfigurationError):
            return IntegrationResult.failure(500, "Server configuration error")
        if isinstance(repo_result, IntegrationError):
            return IntegrationResult.failure(503, "GitHub service unavailable")
        if isinstance(repo_result, BaseException):
            logger.error("❌ GitHub 조회 중 예상치 못한 오류: %s", repo_result)
            return IntegrationResult.failure(503, "GitHub service unavailable")

        if isinstance(commits_result, BaseException):
            logger.warning("커밋 조회 실패, 빈 목록으로 대체: %s", commits_result)
            commits = []
        else:
            commits = [GithubCommit.from_api(c) for c in commits_result]

        summary = GithubSummary(
            repository=GithubRepository.from_api(repo_result),
            commits=commits,
        )
        logger.info("✅ GitHub 요약 완료: %s (커밋 %d건)", summary.repository.full_name, len(commits))
        return IntegrationResult.success(summary.to_dict())
