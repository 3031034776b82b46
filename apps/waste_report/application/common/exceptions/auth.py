"""인증 관련 애플리케이션 예외."""

from waste_report.application.common.exceptions.base import ApplicationError


class UnauthorizedError(ApplicationError):
    """인증 실패 (토큰 누락 또는 검증 실패)."""

    code = "UNAUTHORIZED"
    status_code = 401

    def __init__(self, reason: str = "Missing authorization header") -> None:
        super().__init__(reason)
