"""
Orbital solver: simulated time -> 3D position of each body.

Pipeline (per body, independent of every other body):

    days since J2000
      └── mean anomaly M
            └── eccentric anomaly E   (Kepler: E - e·sin E = M, Newton–Raphson)
                  └── true anomaly v
                        └── orbital-plane position (r cos v, r sin v, 0)
                              └── ecliptic rotation (ω, i, Ω)      -> AU
                                    └── scale_for_display()         -> scene units

Nothing is cached: every call recomputes from the elements and the timestamp.
Bodies with a = 0 (the central star) sit at the origin by convention.
"""

from __future__ import annotations
import logging
import math
from datetime import datetime
from typing import Dict, Mapping, Tuple

from core.astro_time import days_since_j2000
from core.types import ORIGIN, Position3D
from .orbital_elements import OrbitalElements, PLANET_ORBITAL_ELEMENTS

logger = logging.getLogger(__name__)


KEPLER_TOLERANCE      = 1e-6
KEPLER_MAX_ITERATIONS = 10

DEFAULT_SCALE_FACTOR  = 6.0
# Scene units; no body is drawn closer to the star than this
MIN_DISPLAY_DISTANCE  = 6.0


# ---------------------------------------------------------------------------
# Anomalies
# ---------------------------------------------------------------------------

def mean_anomaly(elements: OrbitalElements, days: float) -> float:
    """Mean anomaly (degrees, [0, 360)) after `days` days from J2000."""
    M = elements.mean_anomaly_at_epoch + elements.mean_motion_deg_per_day * days
    return M % 360.0


def kepler_residual(E_deg: float, e: float, M_deg: float) -> float:
    """|E - e·sin E - M| in radians."""
    E = math.radians(E_deg)
    return abs(E - e * math.sin(E) - math.radians(M_deg))


def solve_kepler(M_deg: float, e: float,
                 tol: float = KEPLER_TOLERANCE,
                 max_iter: int = KEPLER_MAX_ITERATIONS) -> float:
    """
    Solve Kepler's equation M = E - e*sin(E), seeded at E0 = M.
    Returns eccentric anomaly E in degrees.

    Stops as soon as the residual drops below tol; after max_iter steps the
    current estimate is returned as-is (no convergence error).
    """
    M = math.radians(M_deg)
    E = M
    for _ in range(max_iter):
        delta = E - e * math.sin(E) - M
        if abs(delta) < tol:
            break
        E -= delta / (1.0 - e * math.cos(E))
    return math.degrees(E)


def true_anomaly(E_deg: float, e: float) -> float:
    """True anomaly (degrees, [0, 360)) from eccentric anomaly."""
    E = math.radians(E_deg)
    v = math.atan2(math.sqrt(1.0 - e*e) * math.sin(E), math.cos(E) - e)
    return math.degrees(v) % 360.0


# ---------------------------------------------------------------------------
# Coordinates
# ---------------------------------------------------------------------------

def orbital_plane_position(a: float, e: float,
                           v_deg: float) -> Tuple[float, float, float]:
    """Heliocentric position in the orbital plane (AU), perihelion on +x."""
    v = math.radians(v_deg)
    r = a * (1.0 - e*e) / (1.0 + e * math.cos(v))
    return r * math.cos(v), r * math.sin(v), 0.0


def rotate_to_ecliptic(x: float, y: float,
                       i_deg: float, Om_deg: float, w_deg: float) -> Position3D:
    """Rotate an orbital-plane vector by ω, i, Ω into the ecliptic frame."""
    i_r  = math.radians(i_deg)
    Om_r = math.radians(Om_deg)
    w_r  = math.radians(w_deg)

    cos_w, sin_w   = math.cos(w_r),  math.sin(w_r)
    cos_Om, sin_Om = math.cos(Om_r), math.sin(Om_r)
    cos_i, sin_i   = math.cos(i_r),  math.sin(i_r)

    x_ecl = x*(cos_w*cos_Om - sin_w*sin_Om*cos_i) + y*(-sin_w*cos_Om - cos_w*sin_Om*cos_i)
    y_ecl = x*(cos_w*sin_Om + sin_w*cos_Om*cos_i) + y*(-sin_w*sin_Om + cos_w*cos_Om*cos_i)
    z_ecl = x*(sin_w*sin_i)                       + y*(cos_w*sin_i)
    return Position3D(x_ecl, y_ecl, z_ecl)


def compute_position(elements: OrbitalElements, timestamp: datetime) -> Position3D:
    """Heliocentric ecliptic position (AU) of a body at timestamp."""
    if elements.is_central:
        return ORIGIN
    el = elements.normalized()

    M = mean_anomaly(el, days_since_j2000(timestamp))
    E = solve_kepler(M, el.eccentricity)
    v = true_anomaly(E, el.eccentricity)
    x, y, _ = orbital_plane_position(el.semimajor_axis, el.eccentricity, v)

    return rotate_to_ecliptic(x, y, el.inclination,
                              el.longitude_of_ascending_node,
                              el.argument_of_perihelion)


# ---------------------------------------------------------------------------
# Visualisation scaling
# ---------------------------------------------------------------------------

def display_distance(distance_au: float,
                     scale_factor: float = DEFAULT_SCALE_FACTOR) -> float:
    """Logarithmic AU -> scene-units radius, floored at MIN_DISPLAY_DISTANCE."""
    scaled = math.log(distance_au * 5.0 + 1.0) * scale_factor * 2.0
    return max(scaled, MIN_DISPLAY_DISTANCE)


def scale_for_display(position: Position3D,
                      scale_factor: float = DEFAULT_SCALE_FACTOR) -> Position3D:
    """
    Map a raw ecliptic position to scene units.

    The radius is compressed logarithmically so the outer planets stay on
    screen, and the ecliptic y/z axes are swapped (the scene is y-up).
    """
    d = position.length()
    scale = display_distance(d, scale_factor) / d if d > 0 else 1.0
    return Position3D(position.x * scale,
                      position.z * scale,
                      position.y * scale)


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------

def position_for(body_id: str, timestamp: datetime,
                 elements_table: Mapping[str, OrbitalElements] = PLANET_ORBITAL_ELEMENTS
                 ) -> Position3D:
    """Raw position of a body by id. Unknown ids log an error and give (0,0,0)."""
    elements = elements_table.get(body_id)
    if elements is None:
        logger.error("No orbital elements found for body: %s", body_id)
        return ORIGIN
    return compute_position(elements, timestamp)


def all_positions(elements_table: Mapping[str, OrbitalElements],
                  timestamp: datetime,
                  scale_factor: float = DEFAULT_SCALE_FACTOR) -> Dict[str, Position3D]:
    """Scene-unit positions of every body in the table."""
    return {
        body_id: scale_for_display(compute_position(elements, timestamp), scale_factor)
        for body_id, elements in elements_table.items()
    }


def satellite_position(parent: Position3D, orbital_radius: float,
                       period_days: float, timestamp: datetime,
                       phase_deg: float = 0.0) -> Position3D:
    """
    Circular display orbit (scene units) around an already-scaled parent.
    The orbit lies in the scene's horizontal x/z plane.
    """
    if period_days <= 0.0:
        angle = math.radians(phase_deg)
    else:
        turns = days_since_j2000(timestamp) / period_days
        angle = math.radians(phase_deg) + 2.0 * math.pi * (turns % 1.0)
    return Position3D(parent.x + orbital_radius * math.cos(angle),
                      parent.y,
                      parent.z + orbital_radius * math.sin(angle))
