from typing import Any, Protocol


class ProjectLitePort(Protocol):
    """Project-Lite 태스크 보드 API 계약 (Port)"""

    async def get_board_summary(self, board_id: int) -> Any:
        """보드 요약 정보를 조회합니다. 실패 시 UpstreamHttpError에 원본 본문을 담아 발생시킵니다."""
        ...
