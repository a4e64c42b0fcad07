"""GeoPoint value object and its Cartesian projection onto the reference sphere."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, asdict

import numpy as np

EARTH_RADIUS_KM = 6371.004  # Mean Earth radius


class InvalidPointError(ValueError):
    """Raised when a point cannot be built from text or JSON."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Invalid point: {'; '.join(errors)}")


@dataclass(frozen=True)
class GeoPoint:
    """A point on or above the spherical Earth.

    Longitude and latitude are in degrees, altitude in kilometers. No range
    is enforced; see ``validate`` for an explicit check.
    """

    longitude: float = 0.0
    latitude: float = 0.0
    altitude: float = 0.0

    # Altitude is ignored by the projection: every point lands on the
    # surface sphere of radius EARTH_RADIUS_KM. Non-finite angles give NaN.

    @property
    def x(self) -> float:
        with np.errstate(invalid="ignore"):
            return float(
                EARTH_RADIUS_KM
                * np.cos(self.latitude * np.pi / 180)
                * np.cos(self.longitude * np.pi / 180)
            )

    @property
    def y(self) -> float:
        with np.errstate(invalid="ignore"):
            return float(
                EARTH_RADIUS_KM
                * np.cos(self.latitude * np.pi / 180)
                * np.sin(self.longitude * np.pi / 180)
            )

    @property
    def z(self) -> float:
        with np.errstate(invalid="ignore"):
            return float(EARTH_RADIUS_KM * np.sin(self.latitude * np.pi / 180))

    def cartesian(self) -> tuple[float, float, float]:
        return self.x, self.y, self.z

    def validate(self) -> list[str]:
        """Check geodetic ranges. Returns list of problems (empty = valid)."""
        errors: list[str] = []

        for name in ("longitude", "latitude", "altitude"):
            value = getattr(self, name)
            if not math.isfinite(value):
                errors.append(f"{name} {value} is not finite")

        if math.isfinite(self.longitude) and not -180 <= self.longitude <= 180:
            errors.append(f"longitude {self.longitude} out of range [-180, 180]")

        if math.isfinite(self.latitude) and not -90 <= self.latitude <= 90:
            errors.append(f"latitude {self.latitude} out of range [-90, 90]")

        # Below the centre of the sphere the horizon formulas have no real root
        if math.isfinite(self.altitude) and self.altitude < -EARTH_RADIUS_KM:
            errors.append(f"altitude {self.altitude} is below -{EARTH_RADIUS_KM} km")

        return errors

    def to_json(self) -> str:
        return json.dumps(asdict(self))

    @classmethod
    def from_json(cls, raw: str) -> GeoPoint:
        try:
            d = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise InvalidPointError([f"malformed JSON: {exc.msg}"]) from exc

        if not isinstance(d, dict):
            raise InvalidPointError(["JSON payload is not an object"])

        errors: list[str] = []
        values: dict[str, float] = {}
        for key in ("longitude", "latitude", "altitude"):
            if key not in d:
                continue
            value = d[key]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                errors.append(f"{key} {value!r} is not a number")
            else:
                values[key] = float(value)

        unknown = sorted(set(d) - {"longitude", "latitude", "altitude"})
        if unknown:
            errors.append(f"unknown field(s): {', '.join(unknown)}")

        if errors:
            raise InvalidPointError(errors)
        return cls(**values)

    @classmethod
    def parse(cls, text: str) -> GeoPoint:
        """Parse ``"lon,lat"`` or ``"lon,lat,alt"`` (altitude defaults to 0)."""
        parts = [p.strip() for p in text.split(",")]
        if len(parts) not in (2, 3):
            raise InvalidPointError(
                [f"expected 'lon,lat' or 'lon,lat,alt', got {text!r}"]
            )

        errors: list[str] = []
        numbers: list[float] = []
        for name, part in zip(("longitude", "latitude", "altitude"), parts):
            try:
                numbers.append(float(part))
            except ValueError:
                errors.append(f"{name} {part!r} is not a number")

        if errors:
            raise InvalidPointError(errors)
        return cls(*numbers)


# Ground-level point at the origin of the geographic grid, used as the far
# end when only the near station's horizon matters.
DEFAULT_GROUND_POINT = GeoPoint()
