"""Spherical-Earth geometry: chord distance, radio horizon and DMS conversion."""

from earth_geo.dms import DMS, format_dms, from_dms, to_dms_float, to_dms_int
from earth_geo.geo import distance, max_comm_radius, max_line_of_sight
from earth_geo.point import (
    DEFAULT_GROUND_POINT,
    EARTH_RADIUS_KM,
    GeoPoint,
    InvalidPointError,
)

__all__ = [
    "DEFAULT_GROUND_POINT",
    "DMS",
    "EARTH_RADIUS_KM",
    "GeoPoint",
    "InvalidPointError",
    "distance",
    "format_dms",
    "from_dms",
    "max_comm_radius",
    "max_line_of_sight",
    "to_dms_float",
    "to_dms_int",
]
