import numpy as np
import pytest

from textures.colour import (hsl_to_rgb, lerp, offset_hsl, parse_colour, rgb_to_hsl,
                             rgba, to_hex, where)


class TestParse:
    def test_long_and_short_hex(self):
        assert np.allclose(parse_colour("#ff0000"), [1, 0, 0])
        assert np.allclose(parse_colour("#f00"), [1, 0, 0])

    def test_tuple(self):
        assert np.allclose(parse_colour((255, 51, 0)), [1.0, 0.2, 0.0])

    @pytest.mark.parametrize("bad", ["nothex", "#12345", "#gggggg", (1, 2)])
    def test_rejects_garbage(self, bad):
        with pytest.raises(ValueError):
            parse_colour(bad)

    def test_hex_round_trip(self):
        assert to_hex(parse_colour("#3091dc")) == "#3091dc"


class TestHSL:
    @pytest.mark.parametrize("hex_colour", ["#f0b578", "#4a6add", "#808080", "#c1440e"])
    def test_conversion_is_reversible(self, hex_colour):
        rgb = parse_colour(hex_colour)
        assert np.allclose(hsl_to_rgb(*rgb_to_hsl(rgb)), rgb)

    def test_known_values(self):
        h, s, l = rgb_to_hsl(parse_colour("#ff0000"))
        assert (float(h), float(s), float(l)) == pytest.approx((0.0, 1.0, 0.5))
        h, s, l = rgb_to_hsl(parse_colour("#0000ff"))
        assert float(h) == pytest.approx(2.0 / 3.0)

    def test_hue_wraps(self):
        assert np.allclose(hsl_to_rgb(1.25, 1.0, 0.5), hsl_to_rgb(0.25, 1.0, 0.5))

    def test_offset_clamps_lightness(self):
        assert np.allclose(offset_hsl(parse_colour("#336699"), dl=2.0), [1, 1, 1])
        assert np.allclose(offset_hsl(parse_colour("#336699"), dl=-2.0), [0, 0, 0])

    def test_offset_broadcasts_over_image(self):
        dl = np.linspace(-0.2, 0.2, 12).reshape(3, 4)
        out = offset_hsl(parse_colour("#808080"), dl=dl)
        assert out.shape == (3, 4, 3)
        assert out[0, 0, 0] < out[-1, -1, 0]


def test_lerp_midpoint():
    assert np.allclose(lerp([0, 0, 0], [1, 0.5, 0], 0.5), [0.5, 0.25, 0])


def test_lerp_per_pixel():
    t = np.array([[0.0, 1.0]])
    out = lerp([0, 0, 0], [1, 1, 1], t)
    assert out.shape == (1, 2, 3)
    assert np.allclose(out[0, 1], 1.0)


def test_where_picks_per_pixel():
    mask = np.array([[True, False]])
    out = where(mask, [1, 0, 0], [0, 0, 1])
    assert np.allclose(out[0, 0], [1, 0, 0])
    assert np.allclose(out[0, 1], [0, 0, 1])


def test_rgba_scales_channels_only():
    assert rgba(255, 0, 51, 0.4) == pytest.approx((1.0, 0.0, 0.2, 0.4))
