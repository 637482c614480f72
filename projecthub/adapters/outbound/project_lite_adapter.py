import logging
from typing import Any

import httpx

from projecthub.domain.errors import ConfigurationError, UpstreamConnectionError, UpstreamHttpError

logger = logging.getLogger(__name__)

_TIMEOUT_SECONDS = 5.0


class ProjectLiteAdapter:
    """Project-Lite 외부 보드 API와 통신하는 Outbound Adapter

    재시도는 하지 않습니다. 실패 응답은 본문과 상태 코드를 그대로 담아 전달합니다.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = _TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or "").rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def get_board_summary(self, board_id: int) -> Any:
        """보드 요약 정보를 조회합니다."""
        if not self.base_url:
            logger.critical("PROJECT_LITE_URL이 설정되지 않았습니다")
            raise ConfigurationError("Project-Lite URL이 설정되지 않았습니다")

        url = f"{self.base_url}/api/external/boards/{board_id}/summary"
        logger.info("🌐 Project-Lite 보드 요약 조회: board_id=%s", board_id)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(url, headers={"Accept": "application/json"})
        except httpx.TransportError as e:
            raise UpstreamConnectionError(f"Project-Lite 서버 연결 실패: {self.base_url}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("❌ Project-Lite 요청 실패: %s", str(e))
            raise UpstreamHttpError(
                "Project-Lite 요청 실패",
                status_code=502,
                body={"message": "Invalid response from Project-Lite"},
            ) from e

        logger.info("HTTP Status: %d", response.status_code)
        # 리다이렉트를 따라간 뒤에도 2xx가 아니면 상태 코드 그대로 중계
        if not response.is_success:
            raise UpstreamHttpError(
                f"Project-Lite API 오류: {response.status_code}",
                status_code=response.status_code,
                body=_relay_body(response),
            )
        return _relay_body(response)


def _relay_body(response: httpx.Response) -> Any:
    """응답 본문을 JSON으로 해석합니다. JSON이 아니면 message로 감쌉니다."""
    try:
        return response.json()
    except ValueError:
        return {"message": response.text[:500]}
