"""검증 관련 애플리케이션 예외."""

from __future__ import annotations

from typing import Iterable

from waste_report.application.common.exceptions.base import ApplicationError


class BadRequestError(ApplicationError):
    """잘못된 요청."""

    code = "BAD_REQUEST"
    status_code = 400


class MissingFieldsError(BadRequestError):
    """필수 입력 누락."""

    code = "MISSING_FIELDS"

    def __init__(self, fields: Iterable[str] = ("image", "latitude", "longitude")) -> None:
        self.fields = tuple(fields)
        super().__init__(f"Missing required fields: {', '.join(self.fields)}")


class InvalidImageError(BadRequestError):
    """base64 디코딩 불가 이미지."""

    code = "INVALID_IMAGE"

    def __init__(self) -> None:
        super().__init__("Image must be a valid base64 string")


class PayloadTooLargeError(ApplicationError):
    """이미지 크기 초과."""

    code = "PAYLOAD_TOO_LARGE"
    status_code = 413

    def __init__(self, max_bytes: int) -> None:
        self.max_bytes = max_bytes
        max_mb = max_bytes // (1024 * 1024)
        super().__init__(f"Image too large. Maximum size is {max_mb}MB")
