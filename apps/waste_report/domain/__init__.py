"""Waste Report Domain Layer."""

from waste_report.domain.entities import DumpingZone, NewWasteReport, WasteReport
from waste_report.domain.enums import WasteType
from waste_report.domain.value_objects import ClassificationResult, Coordinates, DisposalGuide

__all__ = [
    "ClassificationResult",
    "Coordinates",
    "DisposalGuide",
    "DumpingZone",
    "NewWasteReport",
    "WasteReport",
    "WasteType",
]
