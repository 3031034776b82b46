"""Blob Store Port - 이미지 저장."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BlobStore(ABC):
    """이미지 바이트 저장 Port."""

    @abstractmethod
    async def put(self, data: bytes, path_hint: str, content_type: str) -> str:
        """바이트 저장 후 조회 가능한 URL 반환.

        Args:
            data: 저장할 바이트
            path_hint: 저장 경로 (예: waste-reports/{user_id}/{ts}.jpg)
            content_type: MIME 타입

        Returns:
            공개 URL
        """
        raise NotImplementedError
