"""Waste Report Dependencies - FastAPI Dependency Injection."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Header

from waste_report.application.classify.ports import WasteClassifier
from waste_report.application.classify.services import HeuristicWasteClassifier
from waste_report.application.common.exceptions import UnauthorizedError
from waste_report.application.common.ports import IdentityVerifier, UserIdentity
from waste_report.application.report.commands import SubmitReportCommand
from waste_report.application.report.ports import (
    BlobStore,
    NotificationSink,
    PointsLedger,
    ReportRepository,
    ZoneReader,
)
from waste_report.application.report.queries import (
    GetReportQuery,
    GetWasteTypesQuery,
    ListUserReportsQuery,
)
from waste_report.application.report.services import ZoneMatcher
from waste_report.domain.services import EcoPointsPolicy
from waste_report.domain.value_objects import DisposalGuide
from waste_report.infrastructure.auth import JwtIdentityVerifier
from waste_report.infrastructure.auth.jwt_identity_verifier import strip_bearer
from waste_report.infrastructure.messaging import (
    RedisStreamsNotificationSink,
    get_streams_client,
)
from waste_report.infrastructure.persistence_postgres.adapters import (
    SqlaPointsLedger,
    SqlaReportRepository,
    SqlaZoneReader,
)
from waste_report.infrastructure.storage import S3BlobStore
from waste_report.setup.config import Settings, get_settings
from waste_report.setup.database import get_session_factory

# ─────────────────────────────────────────────────────────────────────────────
# Infrastructure Dependencies
# ─────────────────────────────────────────────────────────────────────────────


@lru_cache
def get_identity_verifier() -> IdentityVerifier:
    """JWT Identity Verifier 인스턴스 반환."""
    settings = get_settings()
    return JwtIdentityVerifier(
        secret=settings.jwt_secret_key.get_secret_value(),
        algorithm=settings.jwt_algorithm,
        audience=settings.jwt_audience,
        issuer=settings.jwt_issuer,
    )


@lru_cache
def get_blob_store() -> BlobStore:
    """S3 Blob Store 인스턴스 반환."""
    settings = get_settings()
    return S3BlobStore(
        bucket=settings.s3_bucket,
        cdn_base_url=settings.cdn_base_url,
        region=settings.aws_region,
    )


@lru_cache
def get_classifier() -> WasteClassifier:
    """Heuristic Classifier 인스턴스 반환."""
    settings = get_settings()
    return HeuristicWasteClassifier(
        seed=settings.classifier_seed,
        signal_window=settings.classifier_signal_window,
        large_payload_bytes=settings.large_payload_bytes,
    )


@lru_cache
def get_disposal_guide() -> DisposalGuide:
    """배출 안내 테이블 (프로세스당 1회 생성)."""
    return DisposalGuide()


def get_zone_reader() -> ZoneReader:
    return SqlaZoneReader(get_session_factory())


def get_report_repository() -> ReportRepository:
    return SqlaReportRepository(get_session_factory())


def get_points_ledger() -> PointsLedger:
    return SqlaPointsLedger(get_session_factory())


def get_notification_sink() -> NotificationSink:
    settings = get_settings()
    return RedisStreamsNotificationSink(
        redis_client=get_streams_client(),
        stream_key=settings.alert_stream_key,
        maxlen=settings.alert_stream_maxlen,
    )


# ─────────────────────────────────────────────────────────────────────────────
# Auth
# ─────────────────────────────────────────────────────────────────────────────


async def get_current_user(
    identity_verifier: Annotated[IdentityVerifier, Depends(get_identity_verifier)],
    authorization: Annotated[str | None, Header()] = None,
) -> UserIdentity:
    """Bearer 토큰 검증 후 사용자 반환 (조회 API용)."""
    token = strip_bearer(authorization)
    if token is None:
        raise UnauthorizedError("Missing authorization header")
    return await identity_verifier.verify(token)


# ─────────────────────────────────────────────────────────────────────────────
# Application Dependencies (Commands / Queries)
# ─────────────────────────────────────────────────────────────────────────────


def get_submit_command(
    settings: Annotated[Settings, Depends(get_settings)],
    identity_verifier: Annotated[IdentityVerifier, Depends(get_identity_verifier)],
    blob_store: Annotated[BlobStore, Depends(get_blob_store)],
    classifier: Annotated[WasteClassifier, Depends(get_classifier)],
    zone_reader: Annotated[ZoneReader, Depends(get_zone_reader)],
    report_repository: Annotated[ReportRepository, Depends(get_report_repository)],
    points_ledger: Annotated[PointsLedger, Depends(get_points_ledger)],
    notification_sink: Annotated[NotificationSink, Depends(get_notification_sink)],
    disposal_guide: Annotated[DisposalGuide, Depends(get_disposal_guide)],
) -> SubmitReportCommand:
    """Submit Report Command 인스턴스 반환."""
    timeout = settings.external_call_timeout_seconds
    return SubmitReportCommand(
        identity_verifier=identity_verifier,
        blob_store=blob_store,
        classifier=classifier,
        zone_matcher=ZoneMatcher(zone_reader, timeout_seconds=timeout),
        report_repository=report_repository,
        points_ledger=points_ledger,
        notification_sink=notification_sink,
        disposal_guide=disposal_guide,
        points_policy=EcoPointsPolicy(scheme=settings.points_scheme),
        max_image_bytes=settings.max_image_bytes,
        max_image_base64_chars=settings.max_image_base64_chars,
        timeout_seconds=timeout,
    )


def get_report_query(
    report_repository: Annotated[ReportRepository, Depends(get_report_repository)],
) -> GetReportQuery:
    return GetReportQuery(report_repository=report_repository)


def get_list_reports_query(
    report_repository: Annotated[ReportRepository, Depends(get_report_repository)],
) -> ListUserReportsQuery:
    return ListUserReportsQuery(report_repository=report_repository)


def get_waste_types_query(
    disposal_guide: Annotated[DisposalGuide, Depends(get_disposal_guide)],
) -> GetWasteTypesQuery:
    """Get Waste Types Query 인스턴스 반환.

    Note:
        배출 안내는 정적 데이터이므로 외부 의존성 없이 반환합니다.
    """
    return GetWasteTypesQuery(disposal_guide=disposal_guide)


# ─────────────────────────────────────────────────────────────────────────────
# Type Aliases for Dependency Injection
# ─────────────────────────────────────────────────────────────────────────────


SettingsDep = Annotated[Settings, Depends(get_settings)]
CurrentUserDep = Annotated[UserIdentity, Depends(get_current_user)]
SubmitCommandDep = Annotated[SubmitReportCommand, Depends(get_submit_command)]
GetReportQueryDep = Annotated[GetReportQuery, Depends(get_report_query)]
ListReportsQueryDep = Annotated[ListUserReportsQuery, Depends(get_list_reports_query)]
GetWasteTypesQueryDep = Annotated[GetWasteTypesQuery, Depends(get_waste_types_query)]
