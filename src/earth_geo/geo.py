"""Chord distance and line-of-sight geometry on a spherical Earth.

All functions are total over floats: out-of-domain input (an altitude deep
below the surface, a signal range the geometry cannot satisfy) yields NaN
rather than an exception.
"""

from __future__ import annotations

import logging

import numpy as np

from earth_geo.point import DEFAULT_GROUND_POINT, EARTH_RADIUS_KM, GeoPoint

logger = logging.getLogger(__name__)


def _horizon_km(altitude: float) -> np.float64:
    """Distance from an observer at ``altitude`` to its geometric horizon."""
    h = np.float64(altitude)
    with np.errstate(invalid="ignore", over="ignore"):
        return np.sqrt(h * (h + 2 * EARTH_RADIUS_KM))


def distance(a: GeoPoint, b: GeoPoint) -> float:
    """Straight-line (chord) distance between two points in kilometers.

    Both points are projected onto the surface sphere, so altitude does not
    contribute and the result is never the great-circle arc length.
    """
    return float(np.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2 + (a.z - b.z) ** 2))


def max_line_of_sight(a: GeoPoint, b: GeoPoint) -> float:
    """Maximum line-of-sight distance between two observers in kilometers.

    Sum of each observer's horizon distance ``sqrt(h * (h + 2R))``.
    """
    result = float(_horizon_km(a.altitude) + _horizon_km(b.altitude))
    if np.isnan(result):
        logger.debug(
            "Line of sight undefined for altitudes %s km and %s km",
            a.altitude, b.altitude,
        )
    return result


def max_comm_radius(p: GeoPoint, signal_distance: float) -> float:
    """Maximum ground range at which ``p`` reaches a ground-level station.

    Args:
        p: The elevated station. Only its altitude is used.
        signal_distance: Maximum straight-line distance the signal travels (km).

    Returns:
        The smaller of the range allowed by the signal distance and the
        line-of-sight distance from ``p`` to a ground-level point (km).
    """
    r = np.float64(EARTH_RADIUS_KM)
    s = np.float64(signal_distance) / 2
    h = np.float64(p.altitude) / 2

    by_horizon = max_line_of_sight(p, DEFAULT_GROUND_POINT)

    with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
        by_signal = 2 * np.sqrt((r + s + h) * (s + h) * (r - s + h) * (s - h)) / (r + p.altitude)
        # np.minimum propagates NaN from either side
        result = float(np.minimum(by_signal, by_horizon))
    if np.isnan(result):
        logger.debug(
            "Communication radius undefined for altitude %s km, signal distance %s km",
            p.altitude, signal_distance,
        )
    return result
