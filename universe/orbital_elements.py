"""
Keplerian orbital elements of the major planets (J2000 epoch).

Simplified element set: one osculating ellipse per planet, no secular rates.
Values are tuned for a legible orrery rather than for ephemeris accuracy.

Units:
    semimajor_axis              : AU
    eccentricity                : dimensionless, 0 <= e < 1
    inclination                 : degrees
    longitude_of_ascending_node : degrees
    argument_of_perihelion      : degrees
    mean_anomaly_at_epoch       : degrees at J2000
    orbital_period              : Earth years
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from typing import Dict

from core.astro_time import DAYS_PER_YEAR

logger = logging.getLogger(__name__)


# Parabolic/hyperbolic orbits are outside the model: clamp just below 1
MAX_ECCENTRICITY = 0.999


def _normalize_deg(x: float) -> float:
    return x % 360.0


@dataclass(frozen=True)
class OrbitalElements:
    semimajor_axis:              float = 1.0
    eccentricity:                float = 0.0
    inclination:                 float = 0.0
    longitude_of_ascending_node: float = 0.0
    argument_of_perihelion:      float = 0.0
    mean_anomaly_at_epoch:       float = 0.0
    orbital_period:              float = 1.0

    @property
    def is_central(self) -> bool:
        """The central star (a = 0) sits at the origin and is never solved."""
        return self.semimajor_axis == 0.0

    @property
    def mean_motion_deg_per_day(self) -> float:
        if self.orbital_period <= 0.0:
            return 0.0
        return 360.0 / (self.orbital_period * DAYS_PER_YEAR)

    def normalized(self) -> "OrbitalElements":
        """Copy with angles in [0, 360) and eccentricity clamped to [0, 0.999]."""
        e = self.eccentricity
        if not 0.0 <= e <= MAX_ECCENTRICITY:
            logger.warning("Eccentricity %.4f out of range, clamping", e)
            e = min(max(e, 0.0), MAX_ECCENTRICITY)
        if self.orbital_period <= 0.0 and not self.is_central:
            logger.warning("Non-positive orbital period %.4f, body will not move",
                           self.orbital_period)
        return replace(
            self,
            eccentricity=e,
            inclination=_normalize_deg(self.inclination),
            longitude_of_ascending_node=_normalize_deg(self.longitude_of_ascending_node),
            argument_of_perihelion=_normalize_deg(self.argument_of_perihelion),
            mean_anomaly_at_epoch=_normalize_deg(self.mean_anomaly_at_epoch),
        )


# ---------------------------------------------------------------------------
# Planet table
# ---------------------------------------------------------------------------

def _elements(a, e, i, Om, w, M0, T) -> OrbitalElements:
    return OrbitalElements(
        semimajor_axis=a, eccentricity=e, inclination=i,
        longitude_of_ascending_node=Om, argument_of_perihelion=w,
        mean_anomaly_at_epoch=M0, orbital_period=T,
    )


# Format: (a, e, i, Om, w, M0, T)
PLANET_ORBITAL_ELEMENTS: Dict[str, OrbitalElements] = {
    "mercury": _elements(0.387,  0.206, 7.0, 48.3,  29.1,  174.8, 0.241),
    "venus":   _elements(0.723,  0.007, 3.4, 76.7,  54.9,  50.4,  0.615),
    "earth":   _elements(1.0,    0.017, 0.0, 174.9, 288.1, 357.5, 1.0),
    "mars":    _elements(1.524,  0.093, 1.8, 49.6,  286.5, 19.4,  1.881),
    "jupiter": _elements(5.203,  0.048, 1.3, 100.5, 273.9, 20.0,  11.86),
    "saturn":  _elements(9.537,  0.056, 2.5, 113.7, 339.4, 317.0, 29.46),
    "uranus":  _elements(19.191, 0.046, 0.8, 74.0,  96.7,  142.0, 84.01),
    "neptune": _elements(30.069, 0.01,  1.8, 131.8, 273.2, 267.0, 164.8),
}
