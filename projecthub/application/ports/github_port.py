from typing import Any, Protocol


class GithubPort(Protocol):
    """GitHub REST API 계약 (Port)"""

    def ensure_configured(self) -> None:
        """인증 정보가 없으면 ConfigurationError를 발생시킵니다."""
        ...

    async def get_repository(self, repo: str) -> dict[str, Any]:
        """저장소 메타데이터를 조회합니다. repo는 'owner/repo' 형식."""
        ...

    async def get_commits(self, repo: str, limit: int = 5) -> list[dict[str, Any]]:
        """최근 커밋 목록을 조회합니다."""
        ...
