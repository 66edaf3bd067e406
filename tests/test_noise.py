import numpy as np
import pytest

from textures.noise import (colatitude, fractal_noise, improved_noise,
                            sphere_coordinates)


def _samples(n=2000, seed=3):
    rng = np.random.default_rng(seed)
    return rng.uniform(-50, 50, size=(3, n))


def test_lattice_points_are_mid_grey():
    assert float(improved_noise(3.0, 5.0, 7.0)) == 0.5
    assert float(improved_noise(-2.0, 0.0, 11.0)) == 0.5


def test_noise_is_bounded_and_centred():
    x, y, z = _samples()
    n = improved_noise(x, y, z)
    assert n.min() >= -0.05
    assert n.max() <= 1.05
    assert n.mean() == pytest.approx(0.5, abs=0.05)


def test_noise_is_deterministic():
    x, y, z = _samples(200)
    assert np.array_equal(improved_noise(x, y, z), improved_noise(x, y, z))


def test_noise_broadcasts():
    xs = np.linspace(0, 4, 7)[np.newaxis, :]
    ys = np.linspace(0, 4, 5)[:, np.newaxis]
    assert improved_noise(xs, ys, 0.3).shape == (5, 7)


def test_noise_is_continuous():
    x = np.linspace(0.0, 3.0, 3001)
    n = improved_noise(x, 0.37, 0.61)
    assert np.abs(np.diff(n)).max() < 0.01


def test_single_octave_fractal_matches_base_noise():
    x, y, z = _samples(100)
    assert np.allclose(fractal_noise(x, y, z, 1, 0.5), improved_noise(x, y, z))


def test_fractal_noise_stays_in_range():
    x, y, z = _samples(500)
    n = fractal_noise(x, y, z, 6, 0.6)
    assert n.min() >= -0.05
    assert n.max() <= 1.05


def test_sphere_coordinates_lie_on_unit_sphere():
    xs, ys, zs = sphere_coordinates(32)
    assert xs.shape == ys.shape == zs.shape == (32, 32)
    assert np.allclose(xs**2 + ys**2 + zs**2, 1.0)
    # first row is the north pole
    assert np.allclose(zs[0], 1.0)


def test_colatitude_rows():
    phi = colatitude(16)
    assert phi.shape == (16, 1)
    assert phi[0, 0] == 0.0
    assert phi[-1, 0] == pytest.approx(np.pi * 15 / 16)
