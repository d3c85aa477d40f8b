"""Tests for palette_forge.core.convert — hex/RGB/HSL/HSB/CMYK conversions."""

import pytest
from palette_forge.core.convert import (
    clamp,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    is_valid_hex,
    normalize_hue,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsb,
    rgb_to_hsl,
    round_half_up,
)
from palette_forge.core.types import CMYK, HSB, HSL, RGB


class TestHexToRgb:
    def test_blue500(self):
        assert hex_to_rgb('#3b82f6') == RGB(59, 130, 246)

    def test_no_hash(self):
        assert hex_to_rgb('ff0000') == RGB(255, 0, 0)

    def test_uppercase(self):
        assert hex_to_rgb('#FFFFFF') == RGB(255, 255, 255)

    def test_short_hex_duplicates_digits(self):
        assert hex_to_rgb('#fff') == RGB(255, 255, 255)
        assert hex_to_rgb('0f0') == RGB(0, 255, 0)
        assert hex_to_rgb('#abc') == RGB(0xAA, 0xBB, 0xCC)

    @pytest.mark.parametrize('bad', ['', 'invalid', '#ff', '#ffff', '#ffffffff', '#ggg', '#12345g', '-fffff', '#+1234'])
    def test_invalid_returns_none(self, bad):
        assert hex_to_rgb(bad) is None


class TestRgbToHex:
    def test_blue500(self):
        assert rgb_to_hex(59, 130, 246) == '#3b82f6'

    def test_zero_padding(self):
        assert rgb_to_hex(0, 1, 15) == '#00010f'

    def test_channels_clamped(self):
        assert rgb_to_hex(300, -5, 15) == '#ff000f'

    @pytest.mark.parametrize('rgb', [(0, 0, 0), (255, 255, 255), (59, 130, 246), (1, 128, 254), (17, 34, 51)])
    def test_round_trip_through_hex(self, rgb):
        assert hex_to_rgb(rgb_to_hex(*rgb)).as_tuple() == rgb

    def test_round_trip_sweep(self):
        channel = [*range(0, 256, 15), 254]
        for r in channel:
            for g in channel:
                for b in channel:
                    assert hex_to_rgb(rgb_to_hex(r, g, b)).as_tuple() == (r, g, b)


class TestIsValidHex:
    @pytest.mark.parametrize('ok', ['#abc', 'abc', '#AABBCC', '3b82f6'])
    def test_valid(self, ok):
        assert is_valid_hex(ok)

    @pytest.mark.parametrize('bad', ['', '#abcd', 'xyz', '#3b82f', '##abc', '#abcabcabc', '#fff\n', '3b82f6\n'])
    def test_invalid(self, bad):
        assert not is_valid_hex(bad)

    @pytest.mark.parametrize('text', ['#fff\n', '3b82f6\n', ' #abc'])
    def test_agrees_with_hex_to_rgb(self, text):
        assert is_valid_hex(text) == (hex_to_rgb(text) is not None)


class TestRgbToHsl:
    def test_blue500(self):
        assert rgb_to_hsl(59, 130, 246) == HSL(217, 91, 60)

    def test_achromatic(self):
        assert rgb_to_hsl(255, 255, 255) == HSL(0, 0, 100)
        assert rgb_to_hsl(0, 0, 0) == HSL(0, 0, 0)
        assert rgb_to_hsl(128, 128, 128).s == 0

    def test_primaries(self):
        assert rgb_to_hsl(255, 0, 0) == HSL(0, 100, 50)
        assert rgb_to_hsl(0, 255, 0) == HSL(120, 100, 50)
        assert rgb_to_hsl(0, 0, 255) == HSL(240, 100, 50)

    def test_light_branch_saturation(self):
        # l > 0.5 uses d / (2 - max - min)
        assert rgb_to_hsl(255, 128, 128) == HSL(0, 100, 75)

    def test_hue_near_360_wraps_to_zero(self):
        assert rgb_to_hsl(255, 0, 2).h == 0


class TestHslToRgb:
    def test_primaries(self):
        assert hsl_to_rgb(0, 100, 50) == RGB(255, 0, 0)
        assert hsl_to_rgb(120, 100, 50) == RGB(0, 255, 0)
        assert hsl_to_rgb(240, 100, 50) == RGB(0, 0, 255)

    def test_achromatic_rounds_half_up(self):
        # 0.5 * 255 = 127.5
        assert hsl_to_rgb(0, 0, 50) == RGB(128, 128, 128)

    def test_blue500(self):
        assert hsl_to_rgb(217, 91, 60) == RGB(60, 131, 246)

    @pytest.mark.parametrize(
        'hsl',
        [(217, 91, 60), (0, 100, 50), (37, 91, 40), (300, 60, 45), (180, 75, 65), (359, 80, 50), (90, 55, 30)],
    )
    def test_round_trip_within_one(self, hsl):
        h, s, l = hsl  # noqa: E741
        rgb = hsl_to_rgb(h, s, l)
        back = rgb_to_hsl(rgb.r, rgb.g, rgb.b)
        hue_diff = min(abs(back.h - h), 360 - abs(back.h - h))
        assert hue_diff <= 1
        assert abs(back.s - s) <= 1
        assert abs(back.l - l) <= 1

    def test_round_trip_sweep(self):
        # 8-bit channels leave up to two units of drift once chroma is this high
        for h in range(0, 360, 15):
            for s in range(55, 101, 15):
                for l in range(35, 66, 10):  # noqa: E741
                    rgb = hsl_to_rgb(h, s, l)
                    back = rgb_to_hsl(rgb.r, rgb.g, rgb.b)
                    hue_diff = min(abs(back.h - h), 360 - abs(back.h - h))
                    assert hue_diff <= 2, (h, s, l, back)
                    assert abs(back.s - s) <= 2, (h, s, l, back)
                    assert abs(back.l - l) <= 1, (h, s, l, back)


class TestRgbToHsb:
    def test_blue500(self):
        assert rgb_to_hsb(59, 130, 246) == HSB(217, 76, 96)

    def test_black_has_zero_saturation(self):
        assert rgb_to_hsb(0, 0, 0) == HSB(0, 0, 0)

    def test_white(self):
        assert rgb_to_hsb(255, 255, 255) == HSB(0, 0, 100)


class TestRgbToCmyk:
    def test_black_guards_divide_by_zero(self):
        assert rgb_to_cmyk(0, 0, 0) == CMYK(0, 0, 0, 100)

    def test_white(self):
        assert rgb_to_cmyk(255, 255, 255) == CMYK(0, 0, 0, 0)

    def test_red(self):
        assert rgb_to_cmyk(255, 0, 0) == CMYK(0, 100, 100, 0)

    def test_blue500(self):
        assert rgb_to_cmyk(59, 130, 246) == CMYK(76, 47, 0, 4)


class TestHelpers:
    def test_round_half_up_not_bankers(self):
        assert round_half_up(46.5) == 47
        assert round_half_up(127.5) == 128
        assert round_half_up(0.49) == 0

    def test_normalize_hue(self):
        assert normalize_hue(360) == 0
        assert normalize_hue(397) == 37
        assert normalize_hue(-30) == 330

    def test_clamp(self):
        assert clamp(120) == 100
        assert clamp(-3) == 0
        assert clamp(95, 10, 90) == 90

    def test_hex_to_hsl(self):
        assert hex_to_hsl('#3b82f6') == HSL(217, 91, 60)
        assert hex_to_hsl('nope') is None

    def test_hsl_to_hex(self):
        assert hsl_to_hex(HSL(0, 100, 50)) == '#ff0000'
