"""
Universe module: orbital mechanics and the catalog of displayed bodies.

Usage:
    from datetime import datetime, timezone
    from universe import scene_positions, position_for

    now = datetime.now(timezone.utc)
    positions = scene_positions(now)          # {body_id: Position3D}, scene units
    earth_au = position_for("earth", now)     # raw heliocentric ecliptic AU
"""

from .orbital_elements import (
    OrbitalElements,
    PLANET_ORBITAL_ELEMENTS,
    MAX_ECCENTRICITY,
)
from .orbital_solver import (
    mean_anomaly,
    solve_kepler,
    kepler_residual,
    true_anomaly,
    orbital_plane_position,
    rotate_to_ecliptic,
    compute_position,
    display_distance,
    scale_for_display,
    position_for,
    all_positions,
    satellite_position,
    DEFAULT_SCALE_FACTOR,
    MIN_DISPLAY_DISTANCE,
)

__all__ = [
    "OrbitalElements",
    "PLANET_ORBITAL_ELEMENTS",
    "MAX_ECCENTRICITY",
    "mean_anomaly",
    "solve_kepler",
    "kepler_residual",
    "true_anomaly",
    "orbital_plane_position",
    "rotate_to_ecliptic",
    "compute_position",
    "display_distance",
    "scale_for_display",
    "position_for",
    "all_positions",
    "satellite_position",
    "DEFAULT_SCALE_FACTOR",
    "MIN_DISPLAY_DISTANCE",
]

# Displayed bodies
from .catalog import (
    BodyInfo,
    BODIES,
    get_body,
    texture_request_for,
    rings_request_for,
    scene_positions,
)

__all__ += [
    "BodyInfo",
    "BODIES",
    "get_body",
    "texture_request_for",
    "rings_request_for",
    "scene_positions",
]
