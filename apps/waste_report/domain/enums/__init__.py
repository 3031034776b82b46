"""Waste Report Domain Enums."""

from waste_report.domain.enums.notification_status import NotificationStatus
from waste_report.domain.enums.waste_type import WasteType

__all__ = ["NotificationStatus", "WasteType"]
