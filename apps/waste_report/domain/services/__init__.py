"""Waste Report Domain Services."""

from waste_report.domain.services.eco_points import EcoPointsPolicy, PointsScheme
from waste_report.domain.services.geo import EARTH_RADIUS_METERS, distance_meters

__all__ = [
    "EARTH_RADIUS_METERS",
    "EcoPointsPolicy",
    "PointsScheme",
    "distance_meters",
]
