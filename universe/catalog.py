"""
Catalog of the bodies shown in the orrery.

Each BodyInfo carries the display metadata (name, radius in scene units,
base colour) and the recipe for its procedural texture. Orbits of the
planets come from PLANET_ORBITAL_ELEMENTS; the Moon follows a circular
display orbit around Earth; the Sun and the black hole are fixed.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional

from core.types import ORIGIN, Position3D
from textures.request import DEFAULT_RESOLUTION, TextureRequest, TextureType
from .orbital_elements import PLANET_ORBITAL_ELEMENTS
from .orbital_solver import (DEFAULT_SCALE_FACTOR, compute_position,
                             satellite_position, scale_for_display)

logger = logging.getLogger(__name__)


RING_COLOR  = "#e0c090"
RING_DETAIL = 6.0


@dataclass(frozen=True)
class BodyInfo:
    id:              str
    name:            str
    radius:          float                  # scene units
    base_color:      str
    description:     str = ""
    texture_type:    Optional[TextureType] = TextureType.ROCKY
    noise_intensity: float = 0.5
    detail:          float = 4.0
    is_moon:         bool = False
    has_rings:       bool = False
    emissive:        bool = False
    is_black_hole:   bool = False
    # satellites only
    parent_id:           Optional[str] = None
    orbital_radius:      float = 0.0        # scene units around the parent
    orbital_period_days: float = 0.0
    # bodies that never move
    fixed_position:  Optional[Position3D] = None

    @property
    def is_satellite(self) -> bool:
        return self.parent_id is not None


# ── Bodies ────────────────────────────────────────────────────────────────────

BODIES: Dict[str, BodyInfo] = {b.id: b for b in (
    BodyInfo(id="sun", name="Sun", radius=5.5, base_color="#ffdd20",
             texture_type=TextureType.SUN, emissive=True, fixed_position=ORIGIN,
             description="Central star of the system, a G2V main sequence star "
                         "holding 99.8% of its mass. Surface near 5,500 °C, core near 15 million °C."),
    BodyInfo(id="mercury", name="Mercury", radius=0.8, base_color="#b5a794",
             texture_type=TextureType.MERCURY,
             description="Smallest planet and closest to the Sun. Airless, heavily cratered, "
                         "430 °C by day and -180 °C at night."),
    BodyInfo(id="venus", name="Venus", radius=1.2, base_color="#e8cc9f",
             texture_type=TextureType.VENUS,
             description="Earth-sized planet under a crushing CO2 atmosphere and sulphuric "
                         "acid clouds. Hottest surface in the Solar System, 462 °C."),
    BodyInfo(id="earth", name="Earth", radius=1.3, base_color="#3091dc",
             texture_type=TextureType.EARTH,
             description="Our home: 71% ocean, a nitrogen-oxygen atmosphere and one large moon."),
    BodyInfo(id="moon", name="Moon", radius=0.35, base_color="#c8c8c8",
             texture_type=TextureType.ROCKY, is_moon=True, noise_intensity=0.7, detail=5.0,
             parent_id="earth", orbital_radius=3.0, orbital_period_days=27.32,
             description="Earth's only natural satellite, 384,400 km away, tidally locked "
                         "with a 27.3 day orbit."),
    BodyInfo(id="mars", name="Mars", radius=1.1, base_color="#d1541e",
             texture_type=TextureType.MARS,
             description="The red planet: iron-oxide dust, polar ice caps and Olympus Mons, "
                         "the tallest volcano in the Solar System."),
    BodyInfo(id="jupiter", name="Jupiter", radius=3.5, base_color="#f0b578",
             texture_type=TextureType.GAS,
             description="Largest planet, a gas giant whose Great Red Spot storm is wider than Earth."),
    BodyInfo(id="saturn", name="Saturn", radius=3.0, base_color="#f0cb88",
             texture_type=TextureType.GAS, has_rings=True,
             description="Gas giant with bright rings of ice and dust; less dense than water."),
    BodyInfo(id="uranus", name="Uranus", radius=2.2, base_color="#a6d7e9",
             texture_type=TextureType.GAS,
             description="Ice giant rotating on its side; methane gives its blue-green tint."),
    BodyInfo(id="neptune", name="Neptune", radius=2.1, base_color="#4a6add",
             texture_type=TextureType.GAS,
             description="Outermost planet, home of the fastest winds measured, up to 2,100 km/h."),
    BodyInfo(id="blackhole", name="Black Hole", radius=4.0, base_color="#000000",
             texture_type=None, is_black_hole=True, fixed_position=Position3D(90.0, 0.0, 0.0),
             description="A collapsed star whose gravity traps even light, wrapped in an "
                         "accretion disk."),
)}


def get_body(body_id: str) -> Optional[BodyInfo]:
    body = BODIES.get(body_id.lower())
    if body is None:
        logger.warning("Unknown body: %s", body_id)
    return body


# ── Texture recipes ───────────────────────────────────────────────────────────

def texture_request_for(body_id: str, resolution: int = DEFAULT_RESOLUTION,
                        seed: Optional[int] = None) -> Optional[TextureRequest]:
    """Surface texture request for a body, None if it has no texture."""
    body = get_body(body_id)
    if body is None or body.texture_type is None:
        return None
    return TextureRequest(
        base_color=body.base_color,
        type=body.texture_type,
        noise_intensity=body.noise_intensity,
        resolution=resolution,
        detail=body.detail,
        is_moon=body.is_moon,
        seed=seed,
    )


def rings_request_for(body_id: str, resolution: int = DEFAULT_RESOLUTION,
                      seed: Optional[int] = None) -> Optional[TextureRequest]:
    body = get_body(body_id)
    if body is None or not body.has_rings:
        return None
    return TextureRequest(
        base_color=RING_COLOR,
        type=TextureType.RINGS,
        resolution=resolution,
        detail=RING_DETAIL,
        seed=seed,
    )


# ── Positions ─────────────────────────────────────────────────────────────────

def scene_positions(timestamp: datetime,
                    scale_factor: float = DEFAULT_SCALE_FACTOR) -> Dict[str, Position3D]:
    """Scene-unit position of every catalog body at timestamp."""
    positions: Dict[str, Position3D] = {}
    for body in BODIES.values():
        if body.fixed_position is not None:
            positions[body.id] = body.fixed_position
        elif body.id in PLANET_ORBITAL_ELEMENTS:
            raw = compute_position(PLANET_ORBITAL_ELEMENTS[body.id], timestamp)
            positions[body.id] = scale_for_display(raw, scale_factor)

    for body in BODIES.values():
        if body.is_satellite:
            parent = positions.get(body.parent_id, ORIGIN)
            positions[body.id] = satellite_position(
                parent, body.orbital_radius, body.orbital_period_days, timestamp)
    return positions
