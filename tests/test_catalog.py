import logging
import math

import pytest

from core.astro_time import J2000
from core.types import ORIGIN
from textures.request import TextureType
from universe.catalog import (BODIES, RING_COLOR, get_body, rings_request_for,
                              scene_positions, texture_request_for)
from universe.orbital_solver import MIN_DISPLAY_DISTANCE


def test_catalog_contents():
    assert set(BODIES) == {"sun", "mercury", "venus", "earth", "moon", "mars",
                           "jupiter", "saturn", "uranus", "neptune", "blackhole"}
    assert BODIES["jupiter"].base_color == "#f0b578"
    assert BODIES["saturn"].has_rings


def test_lookup_is_case_insensitive():
    assert get_body("Jupiter") is BODIES["jupiter"]


def test_unknown_body_warns(caplog):
    with caplog.at_level(logging.WARNING):
        assert get_body("pluto") is None
        assert texture_request_for("pluto") is None
    assert "pluto" in caplog.text


@pytest.mark.parametrize("body_id, texture_type", [
    ("sun", TextureType.SUN),
    ("mercury", TextureType.MERCURY),
    ("venus", TextureType.VENUS),
    ("earth", TextureType.EARTH),
    ("mars", TextureType.MARS),
    ("jupiter", TextureType.GAS),
    ("neptune", TextureType.GAS),
])
def test_texture_types(body_id, texture_type):
    req = texture_request_for(body_id, resolution=64)
    assert req.type is texture_type
    assert req.resolution == 64
    assert req.noise_intensity == 0.5
    assert req.detail == 4.0


def test_moon_recipe():
    req = texture_request_for("moon", seed=3)
    assert req.type is TextureType.ROCKY
    assert req.is_moon
    assert req.noise_intensity == pytest.approx(0.7)
    assert req.detail == 5.0
    assert req.seed == 3


def test_black_hole_has_no_texture():
    assert texture_request_for("blackhole") is None


def test_rings():
    req = rings_request_for("saturn", resolution=32)
    assert req.type is TextureType.RINGS
    assert req.base_color == RING_COLOR
    assert req.detail == 6.0
    assert rings_request_for("earth") is None


class TestScenePositions:
    def test_every_body_placed(self):
        positions = scene_positions(J2000)
        assert set(positions) == set(BODIES)

    def test_fixed_bodies(self):
        positions = scene_positions(J2000)
        assert positions["sun"] == ORIGIN
        assert positions["blackhole"].as_tuple() == (90.0, 0.0, 0.0)

    def test_planets_outside_minimum_radius(self):
        positions = scene_positions(J2000)
        for body_id in ("mercury", "venus", "earth", "mars", "jupiter", "saturn", "uranus", "neptune"):
            assert positions[body_id].length() >= MIN_DISPLAY_DISTANCE - 1e-9

    def test_moon_circles_earth(self):
        positions = scene_positions(J2000)
        earth, moon = positions["earth"], positions["moon"]
        assert math.hypot(moon.x - earth.x, moon.z - earth.z) == pytest.approx(3.0)
        assert moon.y == earth.y
