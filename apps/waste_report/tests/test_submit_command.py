"""SubmitReportCommand 테스트."""

from __future__ import annotations

import asyncio
import base64
import logging

import pytest

from waste_report.application.common.exceptions import (
    ImageStorageError,
    InvalidImageError,
    MissingFieldsError,
    PayloadTooLargeError,
    ReportPersistError,
    UnauthorizedError,
)
from waste_report.application.report.commands import SubmitReportCommand, SubmitReportRequest
from waste_report.application.report.commands.submit_report import (
    ILLEGAL_DUMPING_MESSAGE,
    SUCCESS_MESSAGE,
)
from waste_report.application.report.dto import IllegalDumpingAlert
from waste_report.application.report.services import ZoneMatcher
from waste_report.domain.entities import DumpingZone
from waste_report.domain.enums import NotificationStatus, WasteType
from waste_report.domain.exceptions import InvalidCoordinatesError
from waste_report.domain.services import EcoPointsPolicy, PointsScheme

from waste_report.tests.factories import IMAGE_URL, TEST_TOKEN, TEST_USER_ID


def _request(image: str | None, lat: float | None = 0.0, lon: float | None = 0.0, **kwargs):
    return SubmitReportRequest(
        auth_token=kwargs.pop("token", TEST_TOKEN),
        image_base64=image,
        latitude=lat,
        longitude=lon,
        **kwargs,
    )


class TestSubmitReportHappyPath:
    """정상 접수."""

    @pytest.mark.anyio
    async def test_plastic_outside_zones(
        self, submit_command, image_base64, blob_store, report_repository, points_ledger,
        notification_sink,
    ) -> None:
        response = await submit_command.execute(
            _request(image_base64, filename="plastic_bottle.jpg")
        )

        assert response.status == "success"
        assert response.waste_type == "Plastic"
        assert response.confidence > 0.85
        assert response.is_illegal_dumping is False
        assert response.eco_points_awarded >= 10
        assert response.gps_location == "0,0"
        assert response.message == SUCCESS_MESSAGE
        assert response.points_credited is True
        assert response.notification is NotificationStatus.NOT_SENT

        blob_store.put.assert_awaited_once()
        report_repository.insert.assert_awaited_once()
        points_ledger.increment.assert_awaited_once_with(TEST_USER_ID, response.eco_points_awarded)
        notification_sink.emit.assert_not_awaited()

    @pytest.mark.anyio
    async def test_upload_path_and_content_type(self, submit_command, blob_store) -> None:
        raw = "data:image/png;base64," + base64.b64encode(b"png-bytes").decode()

        await submit_command.execute(_request(raw))

        data, path_hint, content_type = blob_store.put.await_args.args
        assert data == b"png-bytes"
        assert path_hint.startswith(f"waste-reports/{TEST_USER_ID}/")
        assert path_hint.endswith(".png")
        assert content_type == "image/png"

    @pytest.mark.anyio
    async def test_non_image_content_type_stored_as_jpeg(self, submit_command, blob_store) -> None:
        raw = "data:text/html;base64," + base64.b64encode(b"<script>alert(1)</script>").decode()

        await submit_command.execute(_request(raw))

        _, path_hint, content_type = blob_store.put.await_args.args
        assert content_type == "image/jpeg"
        assert path_hint.endswith(".jpg")

    @pytest.mark.anyio
    async def test_upload_keys_unique_per_submission(
        self, submit_command, image_base64, blob_store
    ) -> None:
        await submit_command.execute(_request(image_base64))
        await submit_command.execute(_request(image_base64))

        first, second = (call.args[1] for call in blob_store.put.await_args_list)
        assert first != second

    @pytest.mark.anyio
    async def test_report_persisted_with_derived_fields(
        self, submit_command, image_base64, report_repository
    ) -> None:
        response = await submit_command.execute(
            _request(image_base64, lat=37.5, lon=127.0, filename="plastic_bottle.jpg")
        )

        draft = report_repository.insert.await_args.args[0]
        assert draft.user_id == TEST_USER_ID
        assert draft.image_url == IMAGE_URL
        assert draft.waste_type is WasteType.PLASTIC
        assert draft.disposal_method == response.disposal_method
        assert draft.points_awarded == response.eco_points_awarded
        assert (draft.latitude, draft.longitude) == (37.5, 127.0)

    @pytest.mark.anyio
    async def test_tiered_points(self, submit_command, image_base64) -> None:
        # plastic + bottle 파일명 → 신뢰도 0.95 이상
        response = await submit_command.execute(
            _request(image_base64, filename="plastic_bottle.jpg")
        )
        assert response.eco_points_awarded == 15

    @pytest.mark.anyio
    async def test_flat_points(
        self, identity_verifier, blob_store, classifier, zone_reader, report_repository,
        points_ledger, notification_sink, image_base64,
    ) -> None:
        command = SubmitReportCommand(
            identity_verifier=identity_verifier,
            blob_store=blob_store,
            classifier=classifier,
            zone_matcher=ZoneMatcher(zone_reader),
            report_repository=report_repository,
            points_ledger=points_ledger,
            notification_sink=notification_sink,
            points_policy=EcoPointsPolicy(scheme=PointsScheme.FLAT),
        )

        response = await command.execute(_request(image_base64, filename="plastic_bottle.jpg"))

        assert response.eco_points_awarded == 10


class TestIllegalDumping:
    """불법투기 구역 처리."""

    @pytest.mark.anyio
    async def test_zone_match_emits_one_alert(
        self, submit_command, image_base64, zone_reader, notification_sink
    ) -> None:
        zone_reader.list_active.return_value = [
            DumpingZone(id=1, latitude=0, longitude=0, radius_meters=100)
        ]

        response = await submit_command.execute(
            _request(image_base64, filename="plastic_bottle.jpg")
        )

        assert response.is_illegal_dumping is True
        assert response.message == ILLEGAL_DUMPING_MESSAGE
        assert response.notification is NotificationStatus.SENT
        notification_sink.emit.assert_awaited_once()

        alert = notification_sink.emit.await_args.args[0]
        assert isinstance(alert, IllegalDumpingAlert)
        assert alert.report_id == response.report_id
        assert alert.location == "0,0"
        assert alert.priority == "high"
        assert alert.message == "New illegal dumping report at 0,0"

    @pytest.mark.anyio
    async def test_zone_lookup_failure_fails_open(
        self, submit_command, image_base64, zone_reader, notification_sink, caplog
    ) -> None:
        zone_reader.list_active.side_effect = ConnectionError("zones unavailable")

        with caplog.at_level(logging.WARNING):
            response = await submit_command.execute(_request(image_base64))

        assert response.is_illegal_dumping is False
        notification_sink.emit.assert_not_awaited()
        assert "zone_lookup_failed" in caplog.messages


class TestValidation:
    """외부 쓰기 전 검증."""

    @pytest.mark.anyio
    @pytest.mark.parametrize("token", [None, ""])
    async def test_missing_token(
        self, submit_command, image_base64, blob_store, report_repository, token
    ) -> None:
        with pytest.raises(UnauthorizedError) as exc_info:
            await submit_command.execute(_request(image_base64, token=token))

        assert exc_info.value.message == "Missing authorization header"
        blob_store.put.assert_not_awaited()
        report_repository.insert.assert_not_awaited()

    @pytest.mark.anyio
    async def test_invalid_token(
        self, submit_command, image_base64, identity_verifier, blob_store
    ) -> None:
        identity_verifier.verify.side_effect = UnauthorizedError("Invalid authorization")

        with pytest.raises(UnauthorizedError):
            await submit_command.execute(_request(image_base64))

        blob_store.put.assert_not_awaited()

    @pytest.mark.anyio
    async def test_verifier_outage_is_unauthorized(
        self, submit_command, image_base64, identity_verifier
    ) -> None:
        identity_verifier.verify.side_effect = RuntimeError("auth backend down")

        with pytest.raises(UnauthorizedError):
            await submit_command.execute(_request(image_base64))

    @pytest.mark.anyio
    async def test_auth_checked_before_fields(self, submit_command) -> None:
        with pytest.raises(UnauthorizedError):
            await submit_command.execute(_request(None, lat=None, lon=None, token=None))

    @pytest.mark.anyio
    async def test_missing_fields(self, submit_command, blob_store) -> None:
        with pytest.raises(MissingFieldsError) as exc_info:
            await submit_command.execute(_request(None, lat=None))

        assert exc_info.value.fields == ("image", "latitude")
        blob_store.put.assert_not_awaited()

    @pytest.mark.anyio
    async def test_out_of_range_latitude(self, submit_command, image_base64, blob_store) -> None:
        with pytest.raises(InvalidCoordinatesError):
            await submit_command.execute(_request(image_base64, lat=95))

        blob_store.put.assert_not_awaited()

    @pytest.mark.anyio
    async def test_undecodable_image(self, submit_command, blob_store) -> None:
        with pytest.raises(InvalidImageError):
            await submit_command.execute(_request("%%%not-base64%%%"))

        blob_store.put.assert_not_awaited()

    @pytest.mark.anyio
    async def test_oversized_image(self, submit_command, blob_store, monkeypatch) -> None:
        classify_calls = []
        monkeypatch.setattr(
            submit_command._classifier,
            "classify",
            lambda *args, **kwargs: classify_calls.append(args),
        )
        raw = base64.b64encode(b"\x00" * (11 * 1024 * 1024)).decode()

        with pytest.raises(PayloadTooLargeError):
            await submit_command.execute(_request(raw))

        assert classify_calls == []
        blob_store.put.assert_not_awaited()


class TestFatalFailures:
    """요청을 중단시키는 저장 실패."""

    @pytest.mark.anyio
    async def test_upload_failure(
        self, submit_command, image_base64, blob_store, report_repository
    ) -> None:
        blob_store.put.side_effect = OSError("s3 unreachable")

        with pytest.raises(ImageStorageError) as exc_info:
            await submit_command.execute(_request(image_base64))

        assert exc_info.value.status_code == 500
        assert exc_info.value.detail == "s3 unreachable"
        report_repository.insert.assert_not_awaited()

    @pytest.mark.anyio
    async def test_upload_timeout(self, submit_command, image_base64, blob_store) -> None:
        async def slow_put(*args):
            await asyncio.sleep(5)

        blob_store.put.side_effect = slow_put

        with pytest.raises(ImageStorageError):
            await submit_command.execute(_request(image_base64))

    @pytest.mark.anyio
    async def test_persist_failure(
        self, submit_command, image_base64, report_repository, points_ledger
    ) -> None:
        report_repository.insert.side_effect = RuntimeError("insert failed")

        with pytest.raises(ReportPersistError) as exc_info:
            await submit_command.execute(_request(image_base64))

        assert exc_info.value.message == "Failed to save waste report"
        points_ledger.increment.assert_not_awaited()


class TestBestEffortSideEffects:
    """포인트/알림 실패는 응답에 영향 없음."""

    @pytest.mark.anyio
    async def test_points_failure_still_succeeds(
        self, submit_command, image_base64, points_ledger, caplog
    ) -> None:
        points_ledger.increment.side_effect = RuntimeError("ledger down")

        with caplog.at_level(logging.WARNING):
            response = await submit_command.execute(_request(image_base64))

        assert response.status == "success"
        assert response.points_credited is False
        assert response.eco_points_awarded >= 10
        assert caplog.messages.count("points_credit_failed") == 1

    @pytest.mark.anyio
    async def test_notification_failure_still_succeeds(
        self, submit_command, image_base64, zone_reader, notification_sink
    ) -> None:
        zone_reader.list_active.return_value = [DumpingZone(id=1, latitude=0, longitude=0)]
        notification_sink.emit.side_effect = ConnectionError("redis down")

        response = await submit_command.execute(_request(image_base64))

        assert response.is_illegal_dumping is True
        assert response.notification is NotificationStatus.FAILED
        notification_sink.emit.assert_awaited_once()
