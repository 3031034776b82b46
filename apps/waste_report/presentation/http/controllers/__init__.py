"""HTTP Controllers."""

from waste_report.presentation.http.controllers.health import router as health_router
from waste_report.presentation.http.controllers.waste_report import (
    legacy_router,
)
from waste_report.presentation.http.controllers.waste_report import (
    router as waste_report_router,
)

__all__ = ["health_router", "legacy_router", "waste_report_router"]
