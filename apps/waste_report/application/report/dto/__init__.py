"""Report DTOs."""

from waste_report.application.report.dto.alert import IllegalDumpingAlert
from waste_report.application.report.dto.outcome import SideEffectOutcome

__all__ = ["IllegalDumpingAlert", "SideEffectOutcome"]
