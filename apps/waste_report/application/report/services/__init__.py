"""Report Services."""

from waste_report.application.report.services.image_payload import (
    ImagePayload,
    parse_image_payload,
)
from waste_report.application.report.services.zone_matcher import ZoneCheckResult, ZoneMatcher

__all__ = ["ImagePayload", "ZoneCheckResult", "ZoneMatcher", "parse_image_payload"]
