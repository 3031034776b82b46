"""외부 저장소 장애 관련 애플리케이션 예외.

요청을 중단시키는 치명적 오류만 정의합니다.
포인트 적립/알림 실패는 예외로 전파하지 않습니다.
"""

from waste_report.application.common.exceptions.base import ApplicationError


class InfrastructureError(ApplicationError):
    """외부 인프라 장애 (500)."""

    code = "INTERNAL_ERROR"
    status_code = 500

    def __init__(self, message: str, detail: str | None = None) -> None:
        self.detail = detail
        super().__init__(message)


class ImageStorageError(InfrastructureError):
    """이미지 업로드 실패."""

    code = "STORAGE_ERROR"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__("Failed to upload image", detail)


class ReportPersistError(InfrastructureError):
    """신고 저장 실패."""

    code = "PERSIST_ERROR"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__("Failed to save waste report", detail)
