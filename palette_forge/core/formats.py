"""Display formatting of a colour: hex, rgb, hsl, hsb, cmyk."""

from collections.abc import Callable

from palette_forge.core.convert import hsl_to_rgb, rgb_to_cmyk, rgb_to_hex, rgb_to_hsb
from palette_forge.core.types import HSL

DEFAULT_FORMAT = 'hex'


def _hex(c: HSL) -> str:
    rgb = hsl_to_rgb(c.h, c.s, c.l)
    return rgb_to_hex(rgb.r, rgb.g, rgb.b)


def _rgb(c: HSL) -> str:
    rgb = hsl_to_rgb(c.h, c.s, c.l)
    return f'rgb({rgb.r}, {rgb.g}, {rgb.b})'


def _hsl(c: HSL) -> str:
    return f'hsl({c.h}, {c.s}%, {c.l}%)'


def _hsb(c: HSL) -> str:
    rgb = hsl_to_rgb(c.h, c.s, c.l)
    hsb = rgb_to_hsb(rgb.r, rgb.g, rgb.b)
    return f'hsb({hsb.h}, {hsb.s}%, {hsb.b}%)'


def _cmyk(c: HSL) -> str:
    rgb = hsl_to_rgb(c.h, c.s, c.l)
    cmyk = rgb_to_cmyk(rgb.r, rgb.g, rgb.b)
    return f'cmyk({cmyk.c}%, {cmyk.m}%, {cmyk.y}%, {cmyk.k}%)'


_FORMATTERS: dict[str, Callable[[HSL], str]] = {
    'hex': _hex,
    'rgb': _rgb,
    'hsl': _hsl,
    'hsb': _hsb,
    'cmyk': _cmyk,
}

FORMATS: tuple[str, ...] = tuple(_FORMATTERS)


def format_color(color: HSL, fmt: str = DEFAULT_FORMAT) -> str:
    """Format color for display. Unknown formats fall back to hex."""
    return _FORMATTERS.get(fmt, _hex)(color)
