"""Argument resolution shared by command modules."""

import sys
from typing import Any

import numpy as np

from palette_forge.core.convert import hex_to_hsl
from palette_forge.core.env import get_seed, get_setting
from palette_forge.core.formats import DEFAULT_FORMAT, FORMATS
from palette_forge.core.state import MODES, RANDOM
from palette_forge.core.types import HSL


def error(msg: str) -> int:
    print(f'Error: {msg}', file=sys.stderr)
    return 1


def add_format_argument(parser: Any) -> None:
    parser.add_argument(
        '-f',
        '--format',
        choices=FORMATS,
        default=None,
        help='Display format (default: PALETTE_FORGE_FORMAT or hex)',
    )


def resolve_format(args: Any) -> str:
    """--format, else PALETTE_FORGE_FORMAT, else hex."""
    fmt = getattr(args, 'format', None) or get_setting('FORMAT')
    if fmt not in FORMATS:
        print(f'palette-forge: unknown format {fmt!r}, using {DEFAULT_FORMAT}', file=sys.stderr)
        return DEFAULT_FORMAT
    return fmt


def resolve_mode(args: Any) -> str:
    """--harmony, else PALETTE_FORGE_HARMONY, else random."""
    mode = getattr(args, 'harmony', None) or get_setting('HARMONY')
    if mode not in MODES:
        print(f'palette-forge: unknown harmony {mode!r}, using {RANDOM}', file=sys.stderr)
        return RANDOM
    return mode


def make_rng(args: Any) -> np.random.Generator:
    """Random source seeded from --seed or PALETTE_FORGE_SEED, else from fresh entropy.

    The seed in use is always reported on stderr so any run can be replayed with --seed.
    """
    seed = getattr(args, 'seed', None)
    if seed is None:
        seed = get_seed()
        raw = get_setting('SEED').strip()
        if seed is None and raw:
            print(f'palette-forge: ignoring PALETTE_FORGE_SEED={raw!r} (not an integer)', file=sys.stderr)
    if seed is None:
        seed = int(np.random.SeedSequence().entropy % 2**32)
    print(f'palette-forge: seed {seed}', file=sys.stderr)
    return np.random.default_rng(seed)


def parse_colour(value: str) -> HSL | None:
    """Parse a hex colour argument, printing an error when it is malformed."""
    color = hex_to_hsl(value)
    if color is None:
        error(f'invalid colour: {value!r} (expected #rgb or #rrggbb)')
    return color
