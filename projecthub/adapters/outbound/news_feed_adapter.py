import logging

import httpx

from projecthub.domain.errors import ConfigurationError, UpstreamConnectionError, UpstreamHttpError

logger = logging.getLogger(__name__)

DEFAULT_FEED_URL = "https://zenn.dev/feed"
_TIMEOUT_SECONDS = 10.0


class NewsFeedAdapter:
    """기술 뉴스 RSS 피드를 가져오는 Outbound Adapter (프로젝트와 무관한 단일 피드)"""

    def __init__(
        self,
        feed_url: str = DEFAULT_FEED_URL,
        timeout: float = _TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.feed_url = feed_url
        self.timeout = timeout
        self._transport = transport

    async def fetch_feed(self) -> str:
        """피드 XML 원문을 반환합니다."""
        if not self.feed_url:
            logger.critical("NEWS_FEED_URL이 설정되지 않았습니다")
            raise ConfigurationError("뉴스 피드 URL이 설정되지 않았습니다")

        logger.info("🌐 뉴스 피드 조회: %s", self.feed_url)
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(self.feed_url)
                logger.info("HTTP Status: %d", response.status_code)
                response.raise_for_status()
                return response.text
        except httpx.HTTPStatusError as e:
            logger.warning("❌ 뉴스 피드 HTTP 오류: %d", e.response.status_code)
            raise UpstreamHttpError(
                f"뉴스 피드 조회 실패: {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.TransportError as e:
            logger.warning("❌ 뉴스 피드 연결 실패: %s", str(e))
            raise UpstreamConnectionError(f"뉴스 피드 연결 실패: {self.feed_url}") from e
