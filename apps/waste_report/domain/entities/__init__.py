"""Waste Report Entities."""

from waste_report.domain.entities.dumping_zone import DEFAULT_ZONE_RADIUS_METERS, DumpingZone
from waste_report.domain.entities.waste_report import NewWasteReport, WasteReport

__all__ = [
    "DEFAULT_ZONE_RADIUS_METERS",
    "DumpingZone",
    "NewWasteReport",
    "WasteReport",
]
