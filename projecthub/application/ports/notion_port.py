from typing import Any, Protocol


class NotionPort(Protocol):
    """Notion API 계약 (Port)"""

    def ensure_configured(self) -> None:
        """인증 정보가 없으면 ConfigurationError를 발생시킵니다."""
        ...

    async def retrieve_page(self, page_id: str) -> dict[str, Any]:
        """단일 페이지 정보를 조회합니다."""
        ...
