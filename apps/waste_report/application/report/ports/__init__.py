"""Report Ports - Blob Store, Zone Reader, Report Repository, Points Ledger, Notification Sink."""

from waste_report.application.report.ports.blob_store import BlobStore
from waste_report.application.report.ports.notification_sink import NotificationSink
from waste_report.application.report.ports.points_ledger import PointsLedger
from waste_report.application.report.ports.report_repository import ReportRepository
from waste_report.application.report.ports.zone_reader import ZoneReader

__all__ = [
    "BlobStore",
    "NotificationSink",
    "PointsLedger",
    "ReportRepository",
    "ZoneReader",
]
