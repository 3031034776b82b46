"""Pytest configuration for waste report tests."""

from __future__ import annotations

import base64
import os
from unittest.mock import AsyncMock

import pytest

# Settings의 필수 값 (모듈 import 전에 설정)
os.environ.setdefault("WASTE_REPORT_JWT_SECRET_KEY", "test-secret-key-for-waste-report")

from waste_report.application.classify.services import HeuristicWasteClassifier  # noqa: E402
from waste_report.application.common.ports import IdentityVerifier, UserIdentity  # noqa: E402
from waste_report.application.report.commands import SubmitReportCommand  # noqa: E402
from waste_report.application.report.ports import (  # noqa: E402
    BlobStore,
    NotificationSink,
    PointsLedger,
    ReportRepository,
    ZoneReader,
)
from waste_report.application.report.services import ZoneMatcher  # noqa: E402
from waste_report.tests.factories import IMAGE_URL, TEST_USER_ID, to_report  # noqa: E402


@pytest.fixture
def anyio_backend():
    """Use asyncio backend for anyio."""
    return "asyncio"


@pytest.fixture
def image_base64() -> str:
    """작은 JPEG 형태 바이트의 base64."""
    return base64.b64encode(b"\xff\xd8\xff\xe0" + b"\x00" * 256).decode()


@pytest.fixture
def identity_verifier() -> AsyncMock:
    verifier = AsyncMock(spec=IdentityVerifier)
    verifier.verify.return_value = UserIdentity(user_id=TEST_USER_ID)
    return verifier


@pytest.fixture
def blob_store() -> AsyncMock:
    store = AsyncMock(spec=BlobStore)
    store.put.return_value = IMAGE_URL
    return store


@pytest.fixture
def zone_reader() -> AsyncMock:
    reader = AsyncMock(spec=ZoneReader)
    reader.list_active.return_value = []
    return reader


@pytest.fixture
def report_repository() -> AsyncMock:
    repository = AsyncMock(spec=ReportRepository)
    repository.insert.side_effect = to_report
    return repository


@pytest.fixture
def points_ledger() -> AsyncMock:
    return AsyncMock(spec=PointsLedger)


@pytest.fixture
def notification_sink() -> AsyncMock:
    return AsyncMock(spec=NotificationSink)


@pytest.fixture
def classifier() -> HeuristicWasteClassifier:
    return HeuristicWasteClassifier(seed=42)


@pytest.fixture
def submit_command(
    identity_verifier,
    blob_store,
    classifier,
    zone_reader,
    report_repository,
    points_ledger,
    notification_sink,
) -> SubmitReportCommand:
    return SubmitReportCommand(
        identity_verifier=identity_verifier,
        blob_store=blob_store,
        classifier=classifier,
        zone_matcher=ZoneMatcher(zone_reader, timeout_seconds=1.0),
        report_repository=report_repository,
        points_ledger=points_ledger,
        notification_sink=notification_sink,
        timeout_seconds=1.0,
    )
