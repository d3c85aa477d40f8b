"""Build display-ready Swatches from HSL colours."""

from palette_forge.core.contrast import text_contrast
from palette_forge.core.convert import hsl_to_rgb, rgb_to_hex
from palette_forge.core.formats import DEFAULT_FORMAT, format_color
from palette_forge.core.names import Namer, NearestNamer
from palette_forge.core.scale import generate_scale
from palette_forge.core.types import HSL, Swatch

_default_namer = NearestNamer()


def make_swatch(
    slot: int,
    color: HSL,
    fmt: str = DEFAULT_FORMAT,
    namer: Namer | None = None,
    locked: bool = False,
    key: int | None = None,
) -> Swatch:
    rgb = hsl_to_rgb(color.h, color.s, color.l)
    hex_str = rgb_to_hex(rgb.r, rgb.g, rgb.b)
    text, ratio = text_contrast(rgb)
    return Swatch(
        slot=slot,
        color=color,
        hex=hex_str,
        value=format_color(color, fmt),
        text_color=text,
        contrast=ratio,
        name=(namer or _default_namer).lookup(hex_str),
        locked=locked,
        key=key,
    )


def scale_swatches(color: HSL, slot: int = 0, fmt: str = DEFAULT_FORMAT, namer: Namer | None = None) -> list[Swatch]:
    """Render the 10-step tonal scale of one colour."""
    return [make_swatch(slot, step.color, fmt, namer, key=step.key) for step in generate_scale(color)]
