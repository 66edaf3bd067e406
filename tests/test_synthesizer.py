import logging

import numpy as np
import pytest

from textures import TextureRequest, TextureType, synthesize
from textures.colour import parse_colour, rgb_to_hsl
from textures import gas, sun
from textures.gas import STORM_COLOURS, band_count, gas_bands
from textures.rings import RING_GAPS, in_gap, ring_layer
from textures.sun import plasma_field
from textures.synthesizer import apply_brightness_contrast
from textures.canvas import new_surface

RES = 48


def _request(texture_type, colour="#b0b0b0", **kw):
    kw.setdefault("resolution", RES)
    kw.setdefault("seed", 42)
    return TextureRequest(base_color=colour, type=texture_type, **kw)


class TestRequest:
    def test_type_from_string(self):
        assert TextureRequest(type="GAS").type is TextureType.GAS

    def test_unknown_type_raises(self):
        with pytest.raises(ValueError):
            TextureRequest(type="plasma")

    def test_bad_colour_raises(self):
        with pytest.raises(ValueError):
            TextureRequest(base_color="#zzzzzz")

    def test_knobs_are_clamped(self):
        req = TextureRequest(noise_intensity=3.0, detail=-2.0)
        assert req.noise_intensity == 1.0
        assert req.detail == 0.0

    def test_requests_are_hashable(self):
        a = TextureRequest(base_color=(10, 20, 30), seed=1)
        b = TextureRequest(base_color=[10, 20, 30], seed=1)
        assert a == b
        assert len({a, b}) == 1


class TestSynthesize:
    @pytest.mark.parametrize("texture_type", list(TextureType))
    def test_shape_and_dtype(self, texture_type):
        image = synthesize(_request(texture_type))
        assert image.shape == (RES, RES, 4)
        assert image.dtype == np.uint8

    @pytest.mark.parametrize("texture_type", list(TextureType))
    def test_same_seed_same_image(self, texture_type):
        a = synthesize(_request(texture_type, seed=7))
        b = synthesize(_request(texture_type, seed=7))
        assert np.array_equal(a, b)

    def test_different_seeds_move_craters(self):
        a = synthesize(_request(TextureType.ROCKY, seed=1))
        b = synthesize(_request(TextureType.ROCKY, seed=2))
        assert not np.array_equal(a, b)

    def test_moon_differs_from_plain_rocky(self):
        plain = synthesize(_request(TextureType.ROCKY, "#c8c8c8"))
        moon = synthesize(_request(TextureType.ROCKY, "#c8c8c8", is_moon=True,
                                   noise_intensity=0.7, detail=5))
        assert not np.array_equal(plain, moon)

    def test_sun_is_warm(self):
        image = synthesize(_request(TextureType.SUN, "#ffdd20")).astype(float)
        assert image[..., 0].mean() > image[..., 2].mean()

    def test_planet_textures_are_opaque(self):
        for texture_type in (TextureType.ROCKY, TextureType.EARTH, TextureType.GAS):
            image = synthesize(_request(texture_type))
            assert image[..., 3].min() == 255

    def test_rings_have_transparent_corners_and_hole(self):
        image = synthesize(_request(TextureType.RINGS, "#e0c090", resolution=64, detail=6))
        for y, x in ((0, 0), (0, 63), (63, 0), (63, 63)):
            assert image[y, x, 3] == 0
        assert image[32, 32, 3] < 64
        assert image[..., 3].max() > 128

    @pytest.mark.parametrize("resolution", [0, -5])
    def test_bad_resolution_gives_empty_image(self, resolution, caplog):
        with caplog.at_level(logging.ERROR):
            image = synthesize(_request(TextureType.ROCKY, resolution=resolution))
        assert image.shape == (0, 0, 4)
        assert image.dtype == np.uint8
        assert "drawing surface" in caplog.text

    def test_unseeded_requests_still_render(self):
        image = synthesize(TextureRequest("#a6d7e9", "gas", resolution=16))
        assert image.shape == (16, 16, 4)


class TestGasBands:
    def test_band_count_follows_colour_temperature(self):
        assert band_count(parse_colour("#f0b578")) == 12
        assert band_count(parse_colour("#4a6add")) == 8

    @pytest.mark.parametrize("colour, bands", [("#f0b578", 12), ("#4a6add", 8)])
    def test_bands_without_turbulence(self, colour, bands):
        rgb, _ = gas_bands(96, parse_colour(colour), 0.0, 4.0)
        # rows are uniform, and the colour changes exactly at band edges
        assert np.allclose(rgb, rgb[:, :1, :])
        rows = rgb[:, 0, :]
        runs = 1 + sum(not np.array_equal(rows[i], rows[i - 1]) for i in range(1, len(rows)))
        assert runs == bands

    @pytest.mark.parametrize("colour, period", [("#f0b578", 16), ("#4a6add", 24)])
    def test_band_period_from_autocorrelation(self, colour, period):
        rgb, _ = gas_bands(96, parse_colour(colour), 0.0, 4.0)
        _, sat, _ = rgb_to_hsl(rgb[:, 0, :])
        scan = sat - sat.mean()
        lags = range(4, 48)
        corr = [float(np.dot(scan[:-lag], scan[lag:])) for lag in lags]
        # saturation alternates band to band: one period spans two bands
        assert lags[int(np.argmax(corr))] == period


class TestRings:
    def test_gap_lookup(self):
        assert in_gap(RING_GAPS[0])
        assert not in_gap(0.5)

    def test_gap_pixels_are_clear(self):
        rgb, alpha = ring_layer(200, parse_colour("#e0c090"), 6.0)
        # ring annulus spans radius 60..94 px around (100, 100)
        assert alpha[99, 183] == 0.0     # nr ~ 0.69, Cassini-like gap
        assert alpha[99, 170] > 0.6      # nr ~ 0.31, solid ring
        assert alpha[100, 100] == 0.0    # inside the inner edge


def test_brightness_contrast_keeps_mid_grey():
    s = new_surface(2, (128 / 255.0,) * 3)
    apply_brightness_contrast(s, 0.0, 0.0)
    assert np.allclose(s[..., :3], 128 / 255.0)


def test_brightness_contrast_saturates_white():
    s = new_surface(2, (1.0, 1.0, 1.0))
    apply_brightness_contrast(s, 0.1, 0.3)
    assert np.allclose(s[..., :3], 1.0)


class TestGasStorms:
    @staticmethod
    def _storm_paints(monkeypatch, colour):
        painted = []
        real = gas.fill_ellipse

        def recording(surface, cx, cy, rx, ry, rotation, paint):
            # swirls use gradients; storms are solid colours
            if isinstance(paint, tuple):
                painted.append(paint)
            real(surface, cx, cy, rx, ry, rotation, paint)

        monkeypatch.setattr(gas, "fill_ellipse", recording)
        for seed in range(10):
            synthesize(_request(TextureType.GAS, colour, resolution=128, seed=seed))
        return painted

    def test_jupiter_like_storms_are_red_brown(self, monkeypatch):
        painted = self._storm_paints(monkeypatch, "#f0b578")
        assert painted
        assert set(painted) == {STORM_COLOURS[0]}

    def test_neptune_like_storms_are_white(self, monkeypatch):
        painted = self._storm_paints(monkeypatch, "#4a6add")
        assert painted
        assert set(painted) == {STORM_COLOURS[1]}


class TestSunAnimation:
    def test_time_seed_moves_plasma(self):
        still, inside = plasma_field(48, 4.0, 0.0)
        moved, _ = plasma_field(48, 4.0, 2.5)
        assert not np.allclose(still[inside], moved[inside])

    def test_time_seed_reaches_the_plasma(self, monkeypatch):
        seen = []
        real = sun.plasma_field

        def recording(resolution, detail, time_seed=0.0):
            seen.append(time_seed)
            return real(resolution, detail, time_seed)

        monkeypatch.setattr(sun, "plasma_field", recording)
        synthesize(_request(TextureType.SUN, "#ffdd20", seed=3, time_seed=2.5))
        assert seen == [2.5]

    def test_same_time_seed_same_frame(self):
        a = synthesize(_request(TextureType.SUN, "#ffdd20", seed=3, time_seed=1.25))
        b = synthesize(_request(TextureType.SUN, "#ffdd20", seed=3, time_seed=1.25))
        assert np.array_equal(a, b)
