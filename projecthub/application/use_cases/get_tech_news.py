import logging

from projecthub.application.ports.news_feed_port import NewsFeedPort
from projecthub.domain.errors import (
    ConfigurationError,
    FeedFormatError,
    UpstreamConnectionError,
    UpstreamHttpError,
)
from projecthub.domain.integrations import IntegrationResult
from projecthub.domain.news_feed import DEFAULT_ARTICLE_LIMIT, parse_feed

logger = logging.getLogger(__name__)


class GetTechNewsUseCase:
    """기술 뉴스 피드의 최신 기사를 조회하는 Use Case"""

    def __init__(self, news_feed_port: NewsFeedPort, limit: int = DEFAULT_ARTICLE_LIMIT):
        self.news_feed_port = news_feed_port
        self.limit = limit

    async def execute(self) -> IntegrationResult:
        logger.info("📋 GetTechNewsUseCase 실행")

        try:
            xml_text = await self.news_feed_port.fetch_feed()
        except ConfigurationError:
            return IntegrationResult.failure(500, "Server configuration error")
        except UpstreamHttpError:
            return IntegrationResult.failure(502, "Failed to fetch news feed")
        except UpstreamConnectionError:
            return IntegrationResult.failure(503, "Failed to fetch news feed")

        try:
            articles = parse_feed(xml_text, limit=self.limit)
        except FeedFormatError as e:
            logger.warning("❌ 뉴스 피드 파싱 실패: %s", e.message)
            return IntegrationResult.failure(502, "Failed to parse news feed")

        logger.info("✅ 뉴스 조회 완료: %d건", len(articles))
        return IntegrationResult.success({"articles": [a.to_dict() for a in articles]})
