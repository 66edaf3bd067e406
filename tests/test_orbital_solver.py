import logging
import math
from datetime import timedelta

import pytest

from core.astro_time import J2000
from core.types import ORIGIN, Position3D
from universe.orbital_elements import PLANET_ORBITAL_ELEMENTS, OrbitalElements
from universe.orbital_solver import (
    MIN_DISPLAY_DISTANCE,
    all_positions,
    compute_position,
    display_distance,
    kepler_residual,
    mean_anomaly,
    position_for,
    satellite_position,
    scale_for_display,
    solve_kepler,
    true_anomaly,
)


class TestKepler:
    @pytest.mark.parametrize("e", [0.0, 0.05, 0.2, 0.5, 0.7, 0.85])
    def test_converges_below_tolerance(self, e):
        for M in range(0, 360, 15):
            E = solve_kepler(float(M), e)
            assert kepler_residual(E, e, float(M)) < 1e-6

    def test_circular_orbit_anomalies_coincide(self):
        for M in (0.0, 45.0, 123.4, 359.0):
            E = solve_kepler(M, 0.0)
            assert E == pytest.approx(M, abs=1e-9)
            assert true_anomaly(E, 0.0) == pytest.approx(M, abs=1e-9)

    def test_true_anomaly_leads_mean_anomaly_after_perihelion(self):
        e = 0.3
        E = solve_kepler(60.0, e)
        assert true_anomaly(E, e) > E > 60.0

    def test_non_convergence_is_silent(self):
        E = solve_kepler(1.0, 0.999, max_iter=1)
        assert math.isfinite(E)


class TestPositions:
    def test_earth_at_j2000(self):
        earth = PLANET_ORBITAL_ELEMENTS["earth"]
        assert mean_anomaly(earth, 0.0) == pytest.approx(357.5)
        r = compute_position(earth, J2000).length()
        assert 0.982 <= r <= 1.018

    @pytest.mark.parametrize("body_id", ["mercury", "earth", "mars", "jupiter"])
    def test_position_repeats_after_one_period(self, body_id):
        el = PLANET_ORBITAL_ELEMENTS[body_id]
        later = J2000 + timedelta(days=el.orbital_period * 365.25)
        a = compute_position(el, J2000)
        b = compute_position(el, later)
        assert b.x == pytest.approx(a.x, abs=1e-6)
        assert b.y == pytest.approx(a.y, abs=1e-6)
        assert b.z == pytest.approx(a.z, abs=1e-6)

    def test_distance_stays_between_perihelion_and_aphelion(self):
        el = PLANET_ORBITAL_ELEMENTS["mercury"]
        for day in range(0, 88, 4):
            r = compute_position(el, J2000 + timedelta(days=day)).length()
            assert el.semimajor_axis * (1 - el.eccentricity) - 1e-9 <= r
            assert r <= el.semimajor_axis * (1 + el.eccentricity) + 1e-9

    def test_zero_inclination_stays_in_ecliptic(self):
        el = OrbitalElements(semimajor_axis=2.0, eccentricity=0.1, inclination=0.0,
                             longitude_of_ascending_node=40.0, argument_of_perihelion=10.0,
                             mean_anomaly_at_epoch=33.0, orbital_period=2.8)
        assert compute_position(el, J2000).z == pytest.approx(0.0, abs=1e-12)

    def test_central_body_sits_at_origin(self):
        assert compute_position(OrbitalElements(semimajor_axis=0.0), J2000) == ORIGIN

    def test_unknown_body_logs_error_and_returns_origin(self, caplog):
        with caplog.at_level(logging.ERROR):
            pos = position_for("vulcan", J2000)
        assert pos == ORIGIN
        assert "vulcan" in caplog.text

    def test_out_of_range_eccentricity_is_clamped(self, caplog):
        with caplog.at_level(logging.WARNING):
            el = OrbitalElements(eccentricity=1.5).normalized()
        assert el.eccentricity == pytest.approx(0.999)
        assert "clamping" in caplog.text

    def test_zero_period_does_not_move(self):
        el = OrbitalElements(semimajor_axis=1.0, orbital_period=0.0)
        a = compute_position(el, J2000)
        b = compute_position(el, J2000 + timedelta(days=100))
        assert a == b


class TestDisplayScaling:
    def test_tiny_distance_is_floored(self):
        scaled = scale_for_display(Position3D(1e-9, 0.0, 0.0))
        assert scaled.length() == pytest.approx(MIN_DISPLAY_DISTANCE)

    def test_zero_vector_is_unchanged(self):
        assert scale_for_display(ORIGIN) == ORIGIN

    def test_axes_are_swapped(self):
        scaled = scale_for_display(Position3D(1.0, 2.0, 3.0))
        assert scaled.y / scaled.z == pytest.approx(3.0 / 2.0)
        assert scaled.x / scaled.z == pytest.approx(1.0 / 2.0)
        assert scaled.length() == pytest.approx(display_distance(math.sqrt(14.0)))

    def test_log_compression_keeps_order(self):
        assert display_distance(30.0) > display_distance(5.0) > display_distance(1.0)
        assert display_distance(1.0) == pytest.approx(math.log(6.0) * 12.0)

    def test_all_positions_respect_minimum(self):
        positions = all_positions(PLANET_ORBITAL_ELEMENTS, J2000)
        assert set(positions) == set(PLANET_ORBITAL_ELEMENTS)
        for pos in positions.values():
            assert pos.length() >= MIN_DISPLAY_DISTANCE - 1e-9


class TestSatellite:
    def test_orbit_radius_around_parent(self):
        parent = Position3D(20.0, 1.5, -4.0)
        for day in (0, 5, 13, 27):
            pos = satellite_position(parent, 3.0, 27.32, J2000 + timedelta(days=day))
            assert math.hypot(pos.x - parent.x, pos.z - parent.z) == pytest.approx(3.0)
            assert pos.y == parent.y

    def test_returns_to_start_after_period(self):
        parent = Position3D(10.0, 0.0, 0.0)
        a = satellite_position(parent, 3.0, 27.32, J2000)
        b = satellite_position(parent, 3.0, 27.32, J2000 + timedelta(days=27.32))
        assert b.x == pytest.approx(a.x, abs=1e-6)
        assert b.z == pytest.approx(a.z, abs=1e-6)
