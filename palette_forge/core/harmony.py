"""Harmony rules: five related colours derived from one base colour.

Each rule is a row of four slot offsets applied to the base (slot 0 is
always the base itself, unchanged):

    monochromatic        l+30 | l-30 | s-20, l+40 (<=95) | s+20, l-30 (>=10)
    analogous            h+30 | h-30 | h+60 | h-60
    complementary        h+180 | h+180, l+20 (<=90) | h+180, l-20 (>=10) | l-30 (>=10)
    split-complementary  h+150 | h+210 | h+150, l-20 (>=10) | h+210, l-20 (>=10)
    triadic              h+120 | h+240 | h+120, l-20 (>=10) | h+240, l-20 (>=10)

Hues wrap into [0, 360). Saturation and lightness stay inside [0, 100].
An unknown rule name returns only the base colour.
"""

from collections.abc import Callable

from palette_forge.core.convert import clamp, normalize_hue
from palette_forge.core.types import HSL

MONOCHROMATIC = 'monochromatic'
ANALOGOUS = 'analogous'
COMPLEMENTARY = 'complementary'
SPLIT_COMPLEMENTARY = 'split-complementary'
TRIADIC = 'triadic'

RULES: tuple[str, ...] = (MONOCHROMATIC, ANALOGOUS, COMPLEMENTARY, SPLIT_COMPLEMENTARY, TRIADIC)

PALETTE_SIZE = 5


def _shift(base: HSL, dh: int = 0, ds: int = 0, dl: int = 0, l_min: int = 0, l_max: int = 100) -> HSL:
    return HSL(
        normalize_hue(base.h + dh),
        clamp(base.s + ds),
        clamp(base.l + dl, l_min, l_max),
    )


def _monochromatic(c: HSL) -> list[HSL]:
    return [
        _shift(c, dl=30),
        _shift(c, dl=-30),
        _shift(c, ds=-20, dl=40, l_max=95),
        _shift(c, ds=20, dl=-30, l_min=10),
    ]


def _analogous(c: HSL) -> list[HSL]:
    return [_shift(c, dh=30), _shift(c, dh=-30), _shift(c, dh=60), _shift(c, dh=-60)]


def _complementary(c: HSL) -> list[HSL]:
    return [
        _shift(c, dh=180),
        _shift(c, dh=180, dl=20, l_max=90),
        _shift(c, dh=180, dl=-20, l_min=10),
        _shift(c, dl=-30, l_min=10),
    ]


def _split_pair(first: int, second: int) -> Callable[[HSL], list[HSL]]:
    """Two hue rotations plus a darker variant of each."""

    def rule(c: HSL) -> list[HSL]:
        return [
            _shift(c, dh=first),
            _shift(c, dh=second),
            _shift(c, dh=first, dl=-20, l_min=10),
            _shift(c, dh=second, dl=-20, l_min=10),
        ]

    return rule


_GENERATORS: dict[str, Callable[[HSL], list[HSL]]] = {
    MONOCHROMATIC: _monochromatic,
    ANALOGOUS: _analogous,
    COMPLEMENTARY: _complementary,
    SPLIT_COMPLEMENTARY: _split_pair(150, 210),
    TRIADIC: _split_pair(120, 240),
}


def generate_harmony(base: HSL, rule: str) -> list[HSL]:
    """Return [base, slot1..slot4] for a known rule, or [base] for an unknown one."""
    gen = _GENERATORS.get(rule)
    if gen is None:
        return [base]
    return [base, *gen(base)]
