import logging
from typing import Any

import httpx

from projecthub.domain.errors import ConfigurationError, UpstreamConnectionError, UpstreamHttpError

logger = logging.getLogger(__name__)

_DEFAULT_BASE_URL = "https://api.notion.com/v1"
_DEFAULT_NOTION_VERSION = "2022-06-28"
_TIMEOUT_SECONDS = 10.0


class NotionAdapter:
    """Notion REST API와 통신하는 Outbound Adapter"""

    def __init__(
        self,
        token: str,
        base_url: str = _DEFAULT_BASE_URL,
        notion_version: str = _DEFAULT_NOTION_VERSION,
        timeout: float = _TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.notion_version = notion_version
        self.timeout = timeout
        self._transport = transport

    def ensure_configured(self) -> None:
        """토큰이 없으면 ConfigurationError를 발생시킵니다."""
        if not self.token:
            logger.critical("NOTION_TOKEN이 설정되지 않았습니다")
            raise ConfigurationError("Notion 토큰이 설정되지 않았습니다")

    async def retrieve_page(self, page_id: str) -> dict[str, Any]:
        """단일 페이지 정보를 조회합니다."""
        self.ensure_configured()
        url = f"{self.base_url}/pages/{page_id}"
        logger.info("🌐 Notion 페이지 조회: page_id=%s", page_id)

        try:
            async with httpx.AsyncClient(
                headers={
                    "Authorization": f"Bearer {self.token}",
                    "Notion-Version": self.notion_version,
                },
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(url)
                logger.info("HTTP Status: %d (page_id=%s)", response.status_code, page_id)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "❌ Notion HTTP 오류: page_id=%s, %d - %s",
                page_id, e.response.status_code, e.response.text[:200],
            )
            raise UpstreamHttpError(
                f"Notion 페이지 조회 실패: {page_id}",
                status_code=e.response.status_code,
            ) from e
        except httpx.TransportError as e:
            logger.warning("❌ Notion 연결 실패: page_id=%s, %s", page_id, str(e))
            raise UpstreamConnectionError(f"Notion 서버 연결 실패: {self.base_url}") from e
        except httpx.InvalidURL as e:
            # 저장된 page_id는 입력값 그대로일 수 있음
            logger.warning("❌ Notion 요청 URL 생성 실패: page_id=%r, %s", page_id, str(e))
            raise UpstreamHttpError(f"잘못된 Notion 페이지 ID: {page_id!r}", status_code=400) from e
        except httpx.HTTPError as e:
            logger.warning("❌ Notion 요청 실패: page_id=%s, %s", page_id, str(e))
            raise UpstreamHttpError(f"Notion 요청 실패: {page_id}", status_code=502) from e
        except ValueError as e:
            logger.warning("❌ Notion 응답 JSON 파싱 실패: page_id=%s", page_id)
            raise UpstreamHttpError("Notion 응답 형식 오류", status_code=502) from e

        if not isinstance(data, dict):
            logger.warning("❌ Notion 응답이 객체가 아님: page_id=%s, type=%s", page_id, type(data).__name__)
            raise UpstreamHttpError("Notion 응답 형식 오류", status_code=502)
        return data
