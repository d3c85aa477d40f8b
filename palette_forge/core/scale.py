"""Tonal scale (50-900) from one base colour.

Step 500 is the base unchanged. Lighter steps interpolate lightness toward
100, stopping short of pure white. Darker steps interpolate toward 0 and
gain 5 points of saturation so the dark end does not look washed out.
Hue is never touched.
"""

from palette_forge.core.convert import round_half_up
from palette_forge.core.types import HSL, ScaleStep

SCALE_KEYS: tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900)
BASE_KEY = 500


def _step(base: HSL, key: int) -> HSL:
    h, s, l = base.h, base.s, base.l  # noqa: E741
    if key < BASE_KEY:
        factor = (BASE_KEY - key) / 500
        new_l = l + (100 - l) * factor * 0.9
        new_s = s
    else:
        factor = (key - BASE_KEY) / 400
        new_l = l - l * factor * 0.9
        new_s = min(100, s + 5)
    return HSL(h, round_half_up(new_s), round_half_up(new_l))


def generate_scale(base: HSL) -> list[ScaleStep]:
    return [ScaleStep(key, base if key == BASE_KEY else _step(base, key)) for key in SCALE_KEYS]
