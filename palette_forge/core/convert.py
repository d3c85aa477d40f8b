"""Colour space conversions: hex, RGB, HSL, HSB/HSV, CMYK.

All outputs expressed in degrees or percent are rounded to integers, half
up. The rounding is part of the display contract: conversions are lossy on
purpose, and `rgb_to_hsl(hsl_to_rgb(c))` recovers `c` only within +-1.

Malformed hex is the only invalid input. It is signalled by returning None,
never by raising.
"""

import math
import re

from palette_forge.core.types import CMYK, HSB, HSL, RGB

_HEX_RE = re.compile(r'#?([0-9a-fA-F]{3}){1,2}')


def round_half_up(x: float) -> int:
    """Round to nearest integer, .5 away from zero for positives (not banker's)."""
    return int(math.floor(x + 0.5))


def normalize_hue(h: float) -> int:
    """Wrap a hue in degrees into [0, 360)."""
    return int((h % 360 + 360) % 360)


def clamp(v: float, lo: float = 0, hi: float = 100) -> int:
    return int(max(lo, min(hi, v)))


def is_valid_hex(s: str) -> bool:
    """True for 3 or 6 hex digits with an optional leading '#'."""
    return bool(s) and _HEX_RE.fullmatch(s) is not None


def hex_to_rgb(hex_str: str) -> RGB | None:
    """Parse '#rrggbb', 'rrggbb', '#rgb' or 'rgb'. Returns None for anything else."""
    if not hex_str:
        return None
    h = hex_str[1:] if hex_str.startswith('#') else hex_str
    if len(h) == 3:
        h = ''.join(c * 2 for c in h)
    if len(h) != 6 or not is_valid_hex(h):
        return None
    value = int(h, 16)
    return RGB((value >> 16) & 255, (value >> 8) & 255, value & 255)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Encode channels as '#rrggbb'. Channels are clamped to [0, 255] first."""
    return '#' + ''.join(f'{clamp(c, 0, 255):02x}' for c in (r, g, b))


def _hue(r: float, g: float, b: float, mx: float, d: float) -> float:
    """Hue in [0, 1) for unit-scale channels with max mx and chroma d > 0."""
    if mx == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif mx == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    return h / 6


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    r_, g_, b_ = r / 255, g / 255, b / 255
    mx = max(r_, g_, b_)
    mn = min(r_, g_, b_)
    light = (mx + mn) / 2

    if mx == mn:
        # achromatic
        h = s = 0.0
    else:
        d = mx - mn
        s = d / (2 - mx - mn) if light > 0.5 else d / (mx + mn)
        h = _hue(r_, g_, b_, mx, d)

    return HSL(
        normalize_hue(round_half_up(h * 360)),
        round_half_up(s * 100),
        round_half_up(light * 100),
    )


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: int, s: int, l: int) -> RGB:  # noqa: E741
    h_, s_, l_ = h / 360, s / 100, l / 100

    if s_ == 0:
        r = g = b = l_
    else:
        q = l_ * (1 + s_) if l_ < 0.5 else l_ + s_ - l_ * s_
        p = 2 * l_ - q
        r = _hue_to_channel(p, q, h_ + 1 / 3)
        g = _hue_to_channel(p, q, h_)
        b = _hue_to_channel(p, q, h_ - 1 / 3)

    return RGB(round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255))


def rgb_to_hsb(r: int, g: int, b: int) -> HSB:
    r_, g_, b_ = r / 255, g / 255, b / 255
    mx = max(r_, g_, b_)
    mn = min(r_, g_, b_)
    d = mx - mn
    s = 0.0 if mx == 0 else d / mx
    h = 0.0 if mx == mn else _hue(r_, g_, b_, mx, d)
    return HSB(normalize_hue(round_half_up(h * 360)), round_half_up(s * 100), round_half_up(mx * 100))


def rgb_to_cmyk(r: int, g: int, b: int) -> CMYK:
    c = 1 - r / 255
    m = 1 - g / 255
    y = 1 - b / 255
    k = min(c, m, y)

    if k == 1:
        # pure black, c/m/y would divide by zero
        c = m = y = 0.0
    else:
        c = (c - k) / (1 - k)
        m = (m - k) / (1 - k)
        y = (y - k) / (1 - k)

    return CMYK(round_half_up(c * 100), round_half_up(m * 100), round_half_up(y * 100), round_half_up(k * 100))


def hsl_to_hex(color: HSL) -> str:
    rgb = hsl_to_rgb(color.h, color.s, color.l)
    return rgb_to_hex(rgb.r, rgb.g, rgb.b)


def hex_to_hsl(hex_str: str) -> HSL | None:
    """Parse a hex string straight into HSL. None for malformed input."""
    rgb = hex_to_rgb(hex_str)
    if rgb is None:
        return None
    return rgb_to_hsl(rgb.r, rgb.g, rgb.b)
