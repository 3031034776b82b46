"""Classify Ports."""

from waste_report.application.classify.ports.classifier import WasteClassifier

__all__ = ["WasteClassifier"]
