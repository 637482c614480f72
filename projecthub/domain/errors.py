from typing import Any


class IntegrationError(Exception):
    """외부 연동 계층의 기본 예외 (HTTP 상태 코드 포함)"""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ConfigurationError(IntegrationError):
    """토큰/URL 등 서버 설정 누락. 재시도해도 해결되지 않는 치명적 오류"""

    status_code = 500


class UpstreamHttpError(IntegrationError):
    """외부 서비스가 2xx 이외의 응답을 반환함"""

    def __init__(self, message: str, status_code: int, body: Any = None):
        super().__init__(message, status_code)
        self.body = body


class UpstreamConnectionError(IntegrationError):
    """타임아웃, DNS 실패, 연결 끊김 등 응답 자체를 받지 못함"""

    status_code = 503


class FeedFormatError(IntegrationError):
    """피드 XML을 파싱할 수 없음"""

    status_code = 502


class InvalidProjectInputError(ValueError):
    """프로젝트 입력값 검증 실패"""
