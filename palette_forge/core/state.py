"""Palette state: base colour, harmony mode and per-slot locks.

A PaletteState is an immutable value. Each operation takes a state and
returns the next one, so independent sessions never share anything and a
test can replay a sequence exactly.

Harmony mode is a small tagged variant. `mode` is what the user picked,
either one of the five rules or 'random'; `effective` is the concrete rule
used to generate colours. Picking 'random' samples `effective` straight
away, and `randomize()` samples it again before every new palette.

Randomness is injected. Anything with numpy's `Generator.integers(low,
high)` signature works, e.g. `numpy.random.default_rng(seed)`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Protocol

from palette_forge.core.convert import hex_to_hsl
from palette_forge.core.formats import DEFAULT_FORMAT
from palette_forge.core.harmony import PALETTE_SIZE, RULES, generate_harmony
from palette_forge.core.names import Namer
from palette_forge.core.render import make_swatch, scale_swatches
from palette_forge.core.types import HSL, Swatch

RANDOM = 'random'
MODES: tuple[str, ...] = (*RULES, RANDOM)

DEFAULT_BASE = HSL(217, 91, 60)  # #3b82f6

# New random bases stay vibrant but visible: s in [60, 100), l in [40, 80)
_SAT_RANGE = (60, 100)
_LIGHT_RANGE = (40, 80)


class RandomSource(Protocol):
    def integers(self, low: int, high: int) -> int: ...


def _pick_rule(rng: RandomSource) -> str:
    return RULES[int(rng.integers(0, len(RULES)))]


@dataclass(frozen=True)
class HarmonyMode:
    mode: str
    effective: str

    @property
    def is_random(self) -> bool:
        return self.mode == RANDOM

    @classmethod
    def select(cls, mode: str, rng: RandomSource) -> HarmonyMode:
        if mode == RANDOM:
            return cls(RANDOM, _pick_rule(rng))
        return cls(mode, mode)

    def resample(self, rng: RandomSource) -> HarmonyMode:
        """Draw a fresh effective rule in random mode. Fixed modes are returned as is."""
        if not self.is_random:
            return self
        return HarmonyMode(RANDOM, _pick_rule(rng))


@dataclass(frozen=True)
class PaletteState:
    base: HSL
    mode: HarmonyMode
    locks: Mapping[int, HSL] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # read-only copy, so a frozen state really is frozen
        object.__setattr__(self, 'locks', MappingProxyType(dict(self.locks)))

    def __hash__(self) -> int:
        return hash((self.base, self.mode, frozenset(self.locks.items())))

    def is_locked(self, slot: int) -> bool:
        return slot in self.locks


def new_state(rng: RandomSource, base: HSL = DEFAULT_BASE, mode: str = RANDOM) -> PaletteState:
    return PaletteState(base=base, mode=HarmonyMode.select(mode, rng))


def set_base_color(state: PaletteState, color: HSL) -> PaletteState:
    return replace(state, base=color)


def set_base_hex(state: PaletteState, hex_str: str) -> PaletteState | None:
    """Set the base from a hex string. None if the hex is malformed."""
    color = hex_to_hsl(hex_str)
    if color is None:
        return None
    return set_base_color(state, color)


def set_harmony_mode(state: PaletteState, mode: str, rng: RandomSource) -> PaletteState:
    return replace(state, mode=HarmonyMode.select(mode, rng))


def randomize(state: PaletteState, rng: RandomSource) -> PaletteState:
    """New effective rule (random mode only) and, unless slot 0 is locked, a new base."""
    mode = state.mode.resample(rng)
    base = state.base
    if not state.is_locked(0):
        h = int(rng.integers(0, 360))
        s = int(rng.integers(*_SAT_RANGE))
        l = int(rng.integers(*_LIGHT_RANGE))  # noqa: E741
        base = HSL(h, s, l)
    return replace(state, base=base, mode=mode)


def toggle_lock(state: PaletteState, slot: int, color: HSL) -> PaletteState:
    """Unlock a locked slot, or lock it to `color` (the colour it shows now)."""
    if not 0 <= slot < PALETTE_SIZE:
        raise ValueError(f'Slot must be in 0..{PALETTE_SIZE - 1}, got {slot}')
    locks = dict(state.locks)
    if slot in locks:
        del locks[slot]
    else:
        locks[slot] = color
    return replace(state, locks=locks)


def palette_colors(state: PaletteState) -> list[HSL]:
    """Generated colours with locked slots overlaid."""
    generated = generate_harmony(state.base, state.mode.effective)
    return [state.locks.get(i, c) for i, c in enumerate(generated)]


def render(state: PaletteState, fmt: str = DEFAULT_FORMAT, namer: Namer | None = None) -> list[Swatch]:
    return [
        make_swatch(i, c, fmt, namer, locked=state.is_locked(i)) for i, c in enumerate(palette_colors(state))
    ]


def render_scale(
    state: PaletteState, slot: int, fmt: str = DEFAULT_FORMAT, namer: Namer | None = None
) -> list[Swatch]:
    """Tonal scale of the colour currently shown in `slot`."""
    colors = palette_colors(state)
    if not 0 <= slot < len(colors):
        raise ValueError(f'Slot must be in 0..{len(colors) - 1}, got {slot}')
    return scale_swatches(colors[slot], slot, fmt, namer)
