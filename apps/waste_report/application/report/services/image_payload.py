"""Image Payload Parser.

base64 이미지(data URL 접두사 허용)를 검증하고 디코딩합니다.
"""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass

from waste_report.application.common.exceptions import InvalidImageError, PayloadTooLargeError

DEFAULT_CONTENT_TYPE = "image/jpeg"

CONTENT_TYPE_EXTENSIONS: dict[str, str] = {
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
    "image/gif": "gif",
    "image/heic": "heic",
}

_DATA_URL_PATTERN = re.compile(r"^data:(?P<header>[^,]*),(?P<data>.*)$", re.DOTALL)
_WHITESPACE_PATTERN = re.compile(r"\s+")


@dataclass(frozen=True)
class ImagePayload:
    """디코딩된 이미지."""

    data: bytes
    content_type: str = DEFAULT_CONTENT_TYPE
    filename: str | None = None

    @property
    def extension(self) -> str:
        return CONTENT_TYPE_EXTENSIONS.get(self.content_type, "jpg")

    @property
    def size(self) -> int:
        return len(self.data)


def parse_image_payload(raw: str, *, max_bytes: int, max_encoded_chars: int) -> ImagePayload:
    """base64 이미지 문자열 파싱.

    Args:
        raw: base64 문자열 (예: "data:image/png;name=bottle.png;base64,iVBOR...")
        max_bytes: 디코딩 후 최대 바이트
        max_encoded_chars: 인코딩 상태 최대 길이

    Returns:
        ImagePayload

    Raises:
        PayloadTooLargeError: 크기 초과
        InvalidImageError: base64 디코딩 실패
    """
    if len(raw) > max_encoded_chars:
        raise PayloadTooLargeError(max_bytes)

    content_type = DEFAULT_CONTENT_TYPE
    filename: str | None = None
    encoded = raw

    match = _DATA_URL_PATTERN.match(raw)
    if match:
        encoded = match.group("data")
        parts = [part.strip() for part in match.group("header").split(";") if part.strip()]
        if parts and "/" in parts[0] and "=" not in parts[0]:
            declared = parts.pop(0).lower()
            # 허용 목록 외 타입은 기본값으로 저장
            if declared in CONTENT_TYPE_EXTENSIONS:
                content_type = declared
        for part in parts:
            key, _, value = part.partition("=")
            if key.lower() == "name" and value:
                filename = value

    encoded = _WHITESPACE_PATTERN.sub("", encoded)
    try:
        data = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidImageError() from exc

    if not data:
        raise InvalidImageError()
    if len(data) > max_bytes:
        raise PayloadTooLargeError(max_bytes)

    return ImagePayload(data=data, content_type=content_type, filename=filename)
