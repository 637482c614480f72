from typing import Protocol


class NewsFeedPort(Protocol):
    """기술 뉴스 피드 계약 (Port)"""

    async def fetch_feed(self) -> str:
        """피드 XML 원문을 가져옵니다."""
        ...
