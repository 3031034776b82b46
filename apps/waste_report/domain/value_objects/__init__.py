"""Waste Report Value Objects."""

from waste_report.domain.value_objects.classification import ClassificationResult
from waste_report.domain.value_objects.coordinates import Coordinates
from waste_report.domain.value_objects.disposal_guide import DEFAULT_DISPOSAL_METHODS, DisposalGuide

__all__ = [
    "ClassificationResult",
    "Coordinates",
    "DEFAULT_DISPOSAL_METHODS",
    "DisposalGuide",
]
