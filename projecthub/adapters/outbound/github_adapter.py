import logging
from typing import Any

import httpx

from projecthub.domain.errors import ConfigurationError, UpstreamConnectionError, UpstreamHttpError

logger = logging.getLogger(__name__)

_DEFAULT_BASE_URL = "https://api.github.com"
_TIMEOUT_SECONDS = 10.0


class GithubAdapter:
    """GitHub REST API와 통신하는 Outbound Adapter"""

    def __init__(
        self,
        token: str,
        base_url: str = _DEFAULT_BASE_URL,
        timeout: float = _TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def ensure_configured(self) -> None:
        """토큰이 없으면 ConfigurationError를 발생시킵니다."""
        if not self.token:
            logger.critical("GITHUB_TOKEN이 설정되지 않았습니다")
            raise ConfigurationError("GitHub 토큰이 설정되지 않았습니다")

    async def get_repository(self, repo: str) -> dict[str, Any]:
        """저장소 메타데이터를 조회합니다."""
        url = f"{self.base_url}/repos/{repo}"
        logger.info("🌐 GitHub 저장소 조회: %s", repo)
        data = await self._request("GET", url)
        if not isinstance(data, dict):
            raise UpstreamHttpError("GitHub 응답 형식 오류", status_code=502)
        logger.info("✅ 저장소 조회 완료: %s (⭐ %s)", data.get("full_name"), data.get("stargazers_count"))
        return data

    async def get_commits(self, repo: str, limit: int = 5) -> list[dict[str, Any]]:
        """최근 커밋 목록을 조회합니다."""
        url = f"{self.base_url}/repos/{repo}/commits"
        logger.info("🌐 GitHub 커밋 조회: %s (최대 %d건)", repo, limit)
        data = await self._request("GET", url, params={"per_page": limit})
        commits = [c for c in data[:limit] if isinstance(c, dict)] if isinstance(data, list) else []
        logger.info("✅ 커밋 조회 완료: %d건", len(commits))
        return commits

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _client(self) -> httpx.AsyncClient:
        """인증 헤더와 timeout이 설정된 httpx.AsyncClient를 반환합니다."""
        self.ensure_configured()
        return httpx.AsyncClient(
            headers={
                "Authorization": f"Bearer {self.token}",
                "Accept": "application/vnd.github+json",
            },
            timeout=self.timeout,
            transport=self._transport,
        )

    async def _request(self, method: str, url: str, **kwargs) -> Any:
        """공통 HTTP 요청. JSON 응답을 반환합니다."""
        try:
            async with self._client() as client:
                response = await client.request(method, url, **kwargs)
                logger.info("HTTP Status: %d", response.status_code)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            logger.warning("❌ GitHub HTTP 오류: %d - %s", e.response.status_code, e.response.text[:200])
            raise UpstreamHttpError(
                f"GitHub API 오류: {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.TransportError as e:
            logger.warning("❌ GitHub 연결 실패: %s", str(e))
            raise UpstreamConnectionError(f"GitHub 서버 연결 실패: {self.base_url}") from e
        except httpx.InvalidURL as e:
            logger.warning("❌ GitHub 요청 URL 생성 실패: %s", str(e))
            raise UpstreamHttpError("잘못된 GitHub 저장소 경로", status_code=400) from e
        except httpx.HTTPError as e:
            logger.warning("❌ GitHub 요청 실패: %s", str(e))
            raise UpstreamHttpError("GitHub 요청 실패", status_code=502) from e
        except ValueError as e:
            logger.warning("❌ GitHub 응답 JSON 파싱 실패: %s", str(e))
            raise UpstreamHttpError("GitHub 응답 형식 오류", status_code=502) from e
