import logging
import threading
from datetime import datetime, timedelta
from typing import Any

logger = logging.getLogger(__name__)


class InMemoryCache:
    """In-memory Key-Value 캐시 (TTL 기반 자동 만료, 단일 프로세스용)"""

    def __init__(self, clock=datetime.now):
        self._entries: dict[str, tuple[Any, datetime]] = {}
        self._clock = clock
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                logger.info("만료된 캐시 삭제: key=%s", key)
                return None
            return value

    def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        expires_at = self._clock() + timedelta(seconds=ttl_seconds)
        with self._lock:
            self._entries[key] = (value, expires_at)
        logger.info("캐시 저장: key=%s, ttl=%ds", key, ttl_seconds)

    def delete(self, key: str) -> None:
        with self._lock:
            removed = self._entries.pop(key, None)
        if removed is not None:
            logger.info("캐시 삭제: key=%s", key)

    def cleanup_expired(self) -> int:
        now = self._clock()
        with self._lock:
            expired = [key for key, (_, expires_at) in self._entries.items() if now >= expires_at]
            for key in expired:
                del self._entries[key]
        if expired:
            logger.info("만료 캐시 정리: %d건 삭제", len(expired))
        return len(expired)
