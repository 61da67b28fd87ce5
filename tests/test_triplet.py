"""Tests for chart_colour.core.triplet — byte normalization, tint and CSS helpers."""

import pytest
from chart_colour.core.triplet import (
    NO_DATA,
    apply_tint,
    css_rgb,
    css_rgba,
    has_data,
    normalize,
    rgb_to_hex,
    rgb_with_tint,
    triplet_from_colour,
)
from chart_colour.core.types import ColourValue


class TestNormalize:
    def test_all_negative_ones_is_white(self):
        assert normalize((-1, -1, -1)) == (255, 255, 255)

    def test_mixed_signs(self):
        assert normalize((10, -20, 120)) == (10, 236, 120)

    def test_min_signed_byte(self):
        assert normalize((-128, 0, 127)) == (128, 0, 127)

    def test_unsigned_bytes_pass_through(self):
        assert normalize(bytes([255, 128, 0])) == (255, 128, 0)

    def test_every_signed_byte_lands_in_range(self):
        for v in range(-128, 128):
            r, g, b = normalize((v, v, v))
            assert 0 <= r <= 255
            assert r == g == b

    def test_wrong_length(self):
        with pytest.raises(ValueError):
            normalize((1, 2))

    def test_non_integer(self):
        with pytest.raises(ValueError):
            normalize(('a', 'b', 'c'))

    def test_out_of_byte_range(self):
        with pytest.raises(ValueError):
            normalize((300, 0, 0))

    def test_none_is_type_error(self):
        with pytest.raises(TypeError):
            normalize(None)


class TestApplyTint:
    def test_zero_tint_unchanged(self):
        assert apply_tint(68, 0) == 68

    def test_lighten_half(self):
        assert apply_tint(0, 0.5) == 127
        assert apply_tint(255, 0.5) == 255

    def test_lighten_quarter_truncates(self):
        # 68 * 0.75 + 63.75 = 114.75
        assert apply_tint(68, 0.25) == 114

    def test_darken_half(self):
        assert apply_tint(255, -0.5) == 127

    def test_full_darken_is_black(self):
        assert apply_tint(200, -1.0) == 0

    def test_full_lighten_is_white(self):
        assert apply_tint(0, 1.0) == 255


class TestTripletFromColour:
    def test_none_gives_sentinel(self):
        assert triplet_from_colour(None) == (256, 256, 256)
        assert triplet_from_colour(None) == NO_DATA

    def test_sentinel_has_no_data(self):
        assert not has_data(NO_DATA)
        assert not has_data((0, 256, 0))
        assert has_data((255, 255, 255))

    def test_tint_applied(self):
        colour = ColourValue(rgb=(0, 0, 0), tint=0.5)
        assert triplet_from_colour(colour) == (127, 127, 127)

    def test_rgb_with_tint_leaves_colour_alone(self):
        colour = ColourValue(rgb=(255, 255, 255), tint=-0.5)
        assert rgb_with_tint(colour) == (127, 127, 127)
        assert colour.rgb == (255, 255, 255)


class TestFormatting:
    def test_hex(self):
        assert rgb_to_hex((68, 114, 196)) == '#4472c4'

    def test_hex_of_sentinel_is_none(self):
        assert rgb_to_hex(NO_DATA) is None

    def test_css_rgb(self):
        assert css_rgb((68, 114, 196)) == 'rgb(68,114,196)'

    def test_css_rgba_unset_alpha_is_opaque(self):
        assert css_rgba(ColourValue(rgb=(1, 2, 3))) == 'rgba(1,2,3,1)'

    def test_css_rgba_with_alpha(self):
        assert css_rgba(ColourValue(rgb=(1, 2, 3), alpha=0.5)) == 'rgba(1,2,3,0.5)'
