"""Classify Services."""

from waste_report.application.classify.services.heuristic_classifier import (
    DEFAULT_RULES,
    ClassificationRule,
    HeuristicWasteClassifier,
)

__all__ = ["ClassificationRule", "DEFAULT_RULES", "HeuristicWasteClassifier"]
