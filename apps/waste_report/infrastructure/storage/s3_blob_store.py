"""S3 Blob Store.

이미지를 S3에 업로드하고 CDN URL을 반환합니다.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

import boto3

from waste_report.application.report.ports import BlobStore

if TYPE_CHECKING:
    from botocore.client import BaseClient

logger = logging.getLogger(__name__)


class S3BlobStore(BlobStore):
    """boto3 기반 BlobStore 구현체.

    boto3 호출은 블로킹이므로 워커 스레드에서 실행합니다.
    """

    def __init__(
        self,
        bucket: str,
        cdn_base_url: str | None = None,
        region: str = "ap-northeast-2",
        s3_client: "BaseClient | None" = None,
    ) -> None:
        """초기화.

        Args:
            bucket: S3 버킷 이름
            cdn_base_url: 공개 URL 베이스 (없으면 S3 virtual-hosted URL)
            region: AWS 리전
            s3_client: 주입용 클라이언트 (테스트)
        """
        self._bucket = bucket
        self._region = region
        self._cdn_base_url = cdn_base_url.rstrip("/") if cdn_base_url else None
        self._s3_client = s3_client or boto3.client("s3", region_name=region)

    async def put(self, data: bytes, path_hint: str, content_type: str) -> str:
        key = path_hint.lstrip("/")
        await asyncio.to_thread(
            self._s3_client.put_object,
            Bucket=self._bucket,
            Key=key,
            Body=data,
            ContentType=content_type,
        )
        logger.info(
            "image_uploaded",
            extra={"bucket": self._bucket, "key": key, "size": len(data)},
        )
        return self._public_url(key)

    def _public_url(self, key: str) -> str:
        if self._cdn_base_url:
            return f"{self._cdn_base_url}/{key}"
        return f"https://{self._bucket}.s3.{self._region}.amazonaws.com/{key}"
