from typing import Any, Protocol


class CachePort(Protocol):
    """TTL 기반 Key-Value 캐시 계약"""

    def get(self, key: str) -> Any | None:
        """값을 조회합니다. 없거나 만료되었으면 None을 반환합니다."""
        ...

    def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        """값을 저장합니다."""
        ...

    def delete(self, key: str) -> None:
        """값을 삭제합니다. 키가 없어도 오류가 아닙니다."""
        ...
