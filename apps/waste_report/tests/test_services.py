"""Application Services 테스트 (ZoneMatcher, 이미지 파싱)."""

from __future__ import annotations

import asyncio
import base64
from unittest.mock import AsyncMock

import pytest

from waste_report.application.common.exceptions import InvalidImageError, PayloadTooLargeError
from waste_report.application.report.ports import ZoneReader
from waste_report.application.report.services import ZoneMatcher, parse_image_payload
from waste_report.domain.entities import DumpingZone

MAX_BYTES = 1024
MAX_CHARS = 2048


class TestFindMatchingZone:
    """순수 매칭 로직."""

    def test_center_point_matches(self) -> None:
        zone = DumpingZone(id=1, latitude=0, longitude=0, radius_meters=100)
        assert ZoneMatcher.find_matching_zone([zone], 0, 0) == zone

    def test_outside_radius(self) -> None:
        # 경도 0.001도 ≈ 111m
        zone = DumpingZone(id=1, latitude=0, longitude=0, radius_meters=100)
        assert ZoneMatcher.find_matching_zone([zone], 0, 0.001) is None

    def test_inside_radius(self) -> None:
        zone = DumpingZone(id=1, latitude=0, longitude=0, radius_meters=120)
        assert ZoneMatcher.find_matching_zone([zone], 0, 0.001) == zone

    def test_inactive_zone_never_matches(self) -> None:
        zone = DumpingZone(id=1, latitude=0, longitude=0, radius_meters=10_000, is_active=False)
        assert ZoneMatcher.find_matching_zone([zone], 0, 0) is None

    def test_default_radius_applied(self) -> None:
        zone = DumpingZone(id=1, latitude=0, longitude=0, radius_meters=None)
        assert ZoneMatcher.find_matching_zone([zone], 0, 0.0008) == zone

    def test_first_matching_zone_wins(self) -> None:
        first = DumpingZone(id=1, latitude=0, longitude=0, radius_meters=500)
        second = DumpingZone(id=2, latitude=0, longitude=0, radius_meters=500)
        assert ZoneMatcher.find_matching_zone([first, second], 0, 0).id == 1


class TestZoneMatcherCheck:
    """Zone Reader 연동 (fail-open)."""

    @pytest.mark.anyio
    async def test_match(self) -> None:
        reader = AsyncMock(spec=ZoneReader)
        reader.list_active.return_value = [DumpingZone(id=7, latitude=10, longitude=20)]
        matcher = ZoneMatcher(reader)

        result = await matcher.check(10, 20)

        assert result.is_illegal_dumping is True
        assert result.matched_zone_id == 7
        assert result.lookup_error is None

    @pytest.mark.anyio
    async def test_no_zones(self) -> None:
        reader = AsyncMock(spec=ZoneReader)
        reader.list_active.return_value = []

        assert await ZoneMatcher(reader).is_illegal_dumping_zone(0, 0) is False

    @pytest.mark.anyio
    async def test_lookup_failure_fails_open(self) -> None:
        reader = AsyncMock(spec=ZoneReader)
        reader.list_active.side_effect = ConnectionError("db down")

        result = await ZoneMatcher(reader).check(0, 0)

        assert result.is_illegal_dumping is False
        assert result.lookup_error == "db down"

    @pytest.mark.anyio
    async def test_lookup_timeout_fails_open(self) -> None:
        async def slow():
            await asyncio.sleep(1)
            return []

        reader = AsyncMock(spec=ZoneReader)
        reader.list_active.side_effect = slow

        result = await ZoneMatcher(reader, timeout_seconds=0.01).check(0, 0)

        assert result.is_illegal_dumping is False
        assert result.lookup_error == "zone lookup timed out"


class TestParseImagePayload:
    """base64 이미지 파싱."""

    def test_plain_base64(self) -> None:
        raw = base64.b64encode(b"image-bytes").decode()

        payload = parse_image_payload(raw, max_bytes=MAX_BYTES, max_encoded_chars=MAX_CHARS)

        assert payload.data == b"image-bytes"
        assert payload.content_type == "image/jpeg"
        assert payload.extension == "jpg"
        assert payload.filename is None

    def test_data_url(self) -> None:
        raw = "data:image/png;name=bottle.png;base64," + base64.b64encode(b"png").decode()

        payload = parse_image_payload(raw, max_bytes=MAX_BYTES, max_encoded_chars=MAX_CHARS)

        assert payload.data == b"png"
        assert payload.content_type == "image/png"
        assert payload.extension == "png"
        assert payload.filename == "bottle.png"

    @pytest.mark.parametrize(
        "declared", ["text/html", "image/svg+xml", "application/octet-stream"]
    )
    def test_unlisted_content_type_falls_back_to_jpeg(self, declared) -> None:
        raw = f"data:{declared};base64," + base64.b64encode(b"<svg/>").decode()

        payload = parse_image_payload(raw, max_bytes=MAX_BYTES, max_encoded_chars=MAX_CHARS)

        assert payload.content_type == "image/jpeg"
        assert payload.extension == "jpg"

    def test_whitespace_tolerated(self) -> None:
        encoded = base64.b64encode(b"x" * 120).decode()
        raw = "\n".join(encoded[i : i + 76] for i in range(0, len(encoded), 76))

        payload = parse_image_payload(raw, max_bytes=MAX_BYTES, max_encoded_chars=MAX_CHARS)

        assert payload.size == 120

    @pytest.mark.parametrize("raw", ["not base64!!", "abc", "data:image/png;base64,"])
    def test_invalid(self, raw) -> None:
        with pytest.raises(InvalidImageError):
            parse_image_payload(raw, max_bytes=MAX_BYTES, max_encoded_chars=MAX_CHARS)

    def test_encoded_length_limit(self) -> None:
        raw = "A" * (MAX_CHARS + 1)
        with pytest.raises(PayloadTooLargeError) as exc_info:
            parse_image_payload(raw, max_bytes=MAX_BYTES, max_encoded_chars=MAX_CHARS)
        assert exc_info.value.status_code == 413

    def test_decoded_size_limit(self) -> None:
        raw = base64.b64encode(b"\x00" * (MAX_BYTES + 1)).decode()
        with pytest.raises(PayloadTooLargeError):
            parse_image_payload(raw, max_bytes=MAX_BYTES, max_encoded_chars=MAX_CHARS)

    def test_size_message(self) -> None:
        error = PayloadTooLargeError(10 * 1024 * 1024)
        assert error.message == "Image too large. Maximum size is 10MB"
