"""Generate a five-colour harmony palette from a seed colour.

Slot 0 is the seed (base). Slots 1-4 come from the harmony rule:
monochromatic, analogous, complementary, split-complementary or triadic.
The default mode, random, picks one of the five rules for every new
palette.

Each swatch is printed with its value in the chosen format, a
best-effort colour name, the text colour (black or white) that reads
best on it and that contrast ratio.

--lock SLOT freezes a slot at the colour it shows before any
--randomize rounds run. Locked slots survive randomization; locking
slot 0 keeps the base.

--shades SLOT also prints the 10-step tonal scale (50-900) of one slot.

The seed in use goes to stderr as `palette-forge: seed N`; pass it back
with --seed to replay an unseeded run.

Example:
    palette-forge palette --base '#3b82f6' --harmony complementary
    palette-forge palette --seed 7 --randomize 1 --format hsl
    palette-forge palette --base '#e11d48' --lock 0 --lock 2 --randomize 3 --json
    palette-forge palette --base '#10b981' --shades 1
"""

from palette_forge.commands._common import (
    add_format_argument,
    error,
    make_rng,
    resolve_format,
    resolve_mode,
)
from palette_forge.core.convert import hsl_to_hex
from palette_forge.core.harmony import PALETTE_SIZE
from palette_forge.core.state import (
    MODES,
    new_state,
    palette_colors,
    randomize,
    render,
    render_scale,
    set_base_hex,
    toggle_lock,
)
from palette_forge.core.types import Command, Report

command = Command(
    name='palette',
    help='Five-colour harmony palette from a seed colour, with locks and randomize.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('-b', '--base', help='Seed colour as hex (default: #3b82f6)')
    parser.add_argument(
        '-H',
        '--harmony',
        choices=MODES,
        default=None,
        help='Harmony mode (default: PALETTE_FORGE_HARMONY or random)',
    )
    add_format_argument(parser)
    parser.add_argument('-s', '--seed', type=int, default=None, help='Seed for the random source')
    parser.add_argument(
        '-l',
        '--lock',
        type=int,
        action='append',
        default=[],
        metavar='SLOT',
        help=f'Lock slot 0-{PALETTE_SIZE - 1} at its current colour (repeatable)',
    )
    parser.add_argument(
        '-r', '--randomize', type=int, default=0, metavar='N', help='Randomize N times after locking'
    )
    parser.add_argument('--shades', type=int, default=None, metavar='SLOT', help='Also print the scale of SLOT')


@command.run
def run(report: Report, args) -> int:
    rng = make_rng(args)
    fmt = resolve_format(args)
    state = new_state(rng, mode=resolve_mode(args))

    if args.base:
        updated = set_base_hex(state, args.base)
        if updated is None:
            return error(f'invalid colour: {args.base!r} (expected #rgb or #rrggbb)')
        state = updated

    # dict.fromkeys keeps order and stops a repeated slot from toggling back off
    for slot in dict.fromkeys(args.lock):
        colors = palette_colors(state)
        if not 0 <= slot < len(colors):
            return error(f'cannot lock slot {slot}: palette has {len(colors)} slots')
        state = toggle_lock(state, slot, colors[slot])

    if args.shades is not None and not 0 <= args.shades < PALETTE_SIZE:
        return error(f'cannot show shades of slot {args.shades}: palette has {PALETTE_SIZE} slots')

    for _ in range(max(args.randomize, 0)):
        state = randomize(state, rng)

    report.subject = hsl_to_hex(state.base)
    report.add(
        'palette',
        {
            'mode': state.mode.mode,
            'effective': state.mode.effective,
            'format': fmt,
            'swatches': [sw.to_dict() for sw in render(state, fmt)],
        },
    )

    if args.shades is not None:
        steps = render_scale(state, args.shades, fmt)
        report.add(
            'scale',
            {
                'base': hsl_to_hex(palette_colors(state)[args.shades]),
                'steps': [sw.to_dict() for sw in steps],
            },
        )

    return 0
