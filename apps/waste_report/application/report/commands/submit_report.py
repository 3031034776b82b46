"""Submit Report Command - 폐기물 신고 접수.

검증 → 이미지 저장 → 분류 → 구역 검사 → 저장 → 포인트 적립 → 알림 순으로
요청 하나를 순차 처리합니다.

- 검증 실패는 외부 쓰기 전에 즉시 반환
- 이미지 저장/신고 저장 실패는 요청 중단 (500)
- 구역 조회 실패는 "구역 밖"으로 처리 (fail-open)
- 포인트 적립/알림 실패는 로깅 후 성공 응답 유지 (best-effort)
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Awaitable
from uuid import uuid4

from waste_report.application.classify.ports import WasteClassifier
from waste_report.application.common.exceptions import (
    ImageStorageError,
    MissingFieldsError,
    ReportPersistError,
    UnauthorizedError,
)
from waste_report.application.common.ports import IdentityVerifier, UserIdentity
from waste_report.application.report.dto import IllegalDumpingAlert, SideEffectOutcome
from waste_report.application.report.ports import (
    BlobStore,
    NotificationSink,
    PointsLedger,
    ReportRepository,
)
from waste_report.application.report.services import ZoneMatcher, parse_image_payload
from waste_report.domain.entities import NewWasteReport
from waste_report.domain.enums import NotificationStatus
from waste_report.domain.services import EcoPointsPolicy
from waste_report.domain.value_objects import Coordinates, DisposalGuide

logger = logging.getLogger(__name__)

# 10MB (raw), base64 인코딩 시 약 13MB
MAX_IMAGE_BYTES = 10 * 1024 * 1024
MAX_IMAGE_BASE64_CHARS = 13_000_000
EXTERNAL_CALL_TIMEOUT = 10.0

IMAGE_PATH_PREFIX = "waste-reports"

ILLEGAL_DUMPING_MESSAGE = "⚠️ Illegal dumping detected! Municipal authorities have been notified."
SUCCESS_MESSAGE = (
    "✅ Waste classified successfully! Thank you for helping keep our environment clean."
)


@dataclass
class SubmitReportRequest:
    """신고 접수 요청 DTO."""

    auth_token: str | None
    image_base64: str | None
    latitude: float | None
    longitude: float | None
    filename: str | None = None


@dataclass
class SubmitReportResponse:
    """신고 접수 응답 DTO."""

    report_id: str
    waste_type: str
    disposal_method: str
    confidence: float
    eco_points_awarded: int
    gps_location: str
    is_illegal_dumping: bool
    message: str
    points_credited: bool
    notification: NotificationStatus
    status: str = "success"


class SubmitReportCommand:
    """폐기물 신고 접수 Command.

    요청마다 독립적으로 실행되며 인스턴스 상태를 변경하지 않습니다.
    """

    def __init__(
        self,
        identity_verifier: IdentityVerifier,
        blob_store: BlobStore,
        classifier: WasteClassifier,
        zone_matcher: ZoneMatcher,
        report_repository: ReportRepository,
        points_ledger: PointsLedger,
        notification_sink: NotificationSink,
        disposal_guide: DisposalGuide | None = None,
        points_policy: EcoPointsPolicy | None = None,
        max_image_bytes: int = MAX_IMAGE_BYTES,
        max_image_base64_chars: int = MAX_IMAGE_BASE64_CHARS,
        timeout_seconds: float = EXTERNAL_CALL_TIMEOUT,
    ):
        """초기화.

        Args:
            identity_verifier: 토큰 검증기
            blob_store: 이미지 저장소
            classifier: 폐기물 분류기
            zone_matcher: 불법투기 구역 매처
            report_repository: 신고 저장소
            points_ledger: 포인트 원장
            notification_sink: 알림 발행기
            disposal_guide: 배출 안내 테이블 (기본값 사용 시 None)
            points_policy: 포인트 지급 정책 (기본 tiered)
            max_image_bytes: 디코딩 후 이미지 최대 크기
            max_image_base64_chars: base64 문자열 최대 길이
            timeout_seconds: 외부 호출별 타임아웃 (초)
        """
        self._identity_verifier = identity_verifier
        self._blob_store = blob_store
        self._classifier = classifier
        self._zone_matcher = zone_matcher
        self._report_repository = report_repository
        self._points_ledger = points_ledger
        self._notification_sink = notification_sink
        self._disposal_guide = disposal_guide or DisposalGuide()
        self._points_policy = points_policy or EcoPointsPolicy()
        self._max_image_bytes = max_image_bytes
        self._max_image_base64_chars = max_image_base64_chars
        self._timeout = timeout_seconds

    async def execute(self, request: SubmitReportRequest) -> SubmitReportResponse:
        """신고 접수 실행.

        Args:
            request: 접수 요청

        Returns:
            분류 결과와 포인트, 불법투기 여부를 담은 응답

        Raises:
            UnauthorizedError: 토큰 누락/검증 실패
            MissingFieldsError: 필수 입력 누락
            InvalidCoordinatesError: 좌표 범위 위반
            InvalidImageError: base64 디코딩 실패
            PayloadTooLargeError: 이미지 크기 초과
            ImageStorageError: 이미지 업로드 실패
            ReportPersistError: 신고 저장 실패
        """
        # 1. 인증
        user = await self._authenticate(request.auth_token)

        # 2~4. 입력 검증 (외부 쓰기 전)
        missing = [
            name
            for name, value in (
                ("image", request.image_base64),
                ("latitude", request.latitude),
                ("longitude", request.longitude),
            )
            if value is None or value == ""
        ]
        if missing:
            raise MissingFieldsError(missing)

        coordinates = Coordinates(latitude=request.latitude, longitude=request.longitude)
        image = parse_image_payload(
            request.image_base64,
            max_bytes=self._max_image_bytes,
            max_encoded_chars=self._max_image_base64_chars,
        )

        # 5. 이미지 저장
        image_url = await self._store_image(
            user.user_id, image.data, image.extension, image.content_type
        )

        # 6. 분류
        classification = self._classifier.classify(image.data, request.filename or image.filename)

        # 7. 불법투기 구역 검사 (fail-open)
        zone_check = await self._zone_matcher.check(coordinates.latitude, coordinates.longitude)
        if zone_check.lookup_error:
            logger.warning(
                "zone_lookup_failed",
                extra={"user_id": user.user_id, "error": zone_check.lookup_error},
            )

        # 8~9. 배출 방법, 포인트
        disposal_method = self._disposal_guide.method_for(classification.waste_type)
        points = self._points_policy.points_for(classification.confidence)

        # 10. 신고 저장
        draft = NewWasteReport(
            user_id=user.user_id,
            image_url=image_url,
            waste_type=classification.waste_type,
            disposal_method=disposal_method,
            latitude=coordinates.latitude,
            longitude=coordinates.longitude,
            confidence=classification.confidence,
            points_awarded=points,
            is_illegal_dumping=zone_check.is_illegal_dumping,
        )
        try:
            report = await asyncio.wait_for(
                self._report_repository.insert(draft), timeout=self._timeout
            )
        except Exception as e:
            logger.error(
                "waste_report_persist_failed",
                extra={"user_id": user.user_id, "image_url": image_url},
                exc_info=True,
            )
            raise ReportPersistError(str(e) or type(e).__name__) from e

        gps_location = coordinates.as_location_string()

        # 11. 포인트 적립 (best-effort)
        points_outcome = await self._run_best_effort(
            "points_credit",
            self._points_ledger.increment(user.user_id, points),
            report_id=str(report.id),
        )

        # 12. 불법투기 알림 (best-effort)
        notification = NotificationStatus.NOT_SENT
        if report.is_illegal_dumping:
            alert = IllegalDumpingAlert(
                report_id=str(report.id),
                location=gps_location,
                user_id=user.user_id,
            )
            notify_outcome = await self._run_best_effort(
                "illegal_dumping_notification",
                self._notification_sink.emit(alert),
                report_id=str(report.id),
            )
            notification = (
                NotificationStatus.SENT if notify_outcome.succeeded else NotificationStatus.FAILED
            )

        logger.info(
            "waste_report_submitted",
            extra={
                "report_id": str(report.id),
                "user_id": user.user_id,
                "waste_type": classification.waste_type.value,
                "confidence": classification.rounded_confidence,
                "points": points,
                "is_illegal_dumping": report.is_illegal_dumping,
                "matched_zone_id": zone_check.matched_zone_id,
                "points_credited": points_outcome.succeeded,
                "notification": notification.value,
            },
        )

        # 13. 응답
        return SubmitReportResponse(
            report_id=str(report.id),
            waste_type=classification.waste_type.value,
            disposal_method=disposal_method,
            confidence=classification.rounded_confidence,
            eco_points_awarded=points,
            gps_location=gps_location,
            is_illegal_dumping=report.is_illegal_dumping,
            message=ILLEGAL_DUMPING_MESSAGE if report.is_illegal_dumping else SUCCESS_MESSAGE,
            points_credited=points_outcome.succeeded,
            notification=notification,
        )

    async def _authenticate(self, token: str | None) -> UserIdentity:
        if not token:
            raise UnauthorizedError("Missing authorization header")
        try:
            return await asyncio.wait_for(
                self._identity_verifier.verify(token), timeout=self._timeout
            )
        except UnauthorizedError:
            raise
        except Exception as e:
            logger.warning("identity_verification_failed", extra={"error": str(e)})
            raise UnauthorizedError("Invalid authorization") from e

    async def _store_image(
        self, user_id: str, data: bytes, extension: str, content_type: str
    ) -> str:
        stem = f"{int(time.time() * 1000)}-{uuid4().hex}"
        path_hint = f"{IMAGE_PATH_PREFIX}/{user_id}/{stem}.{extension}"
        try:
            return await asyncio.wait_for(
                self._blob_store.put(data, path_hint, content_type), timeout=self._timeout
            )
        except Exception as e:
            logger.error(
                "image_upload_failed",
                extra={"user_id": user_id, "path": path_hint},
                exc_info=True,
            )
            raise ImageStorageError(str(e) or type(e).__name__) from e

    async def _run_best_effort(
        self, name: str, call: Awaitable[None], **context: str
    ) -> SideEffectOutcome:
        """부수효과 실행. 실패는 한 번 로깅하고 재시도하지 않습니다."""
        try:
            await asyncio.wait_for(call, timeout=self._timeout)
        except Exception as e:
            error = str(e) or type(e).__name__
            logger.warning(f"{name}_failed", extra={**context, "error": error})
            return SideEffectOutcome.failed(name, error)
        return SideEffectOutcome.ok(name)
