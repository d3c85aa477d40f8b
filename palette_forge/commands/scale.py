"""Tonal scale (50-900) for one colour.

Step 500 is the colour itself. Steps below 500 move lightness toward
white (never all the way), steps above move it toward black and add 5
points of saturation. Hue stays fixed.

Example:
    palette-forge scale '#3b82f6'
    palette-forge scale f97316 --format hsl --json
"""

from palette_forge.commands._common import add_format_argument, parse_colour, resolve_format
from palette_forge.core.convert import hsl_to_hex
from palette_forge.core.render import scale_swatches
from palette_forge.core.types import Command, Report

command = Command(
    name='scale',
    help='Ten-step tonal scale (50-900) of one colour.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('color', help='Colour as hex')
    add_format_argument(parser)


@command.run
def run(report: Report, args) -> int:
    color = parse_colour(args.color)
    if color is None:
        return 1

    fmt = resolve_format(args)
    base_hex = hsl_to_hex(color)
    report.subject = base_hex
    report.add('scale', {'base': base_hex, 'steps': [sw.to_dict() for sw in scale_swatches(color, fmt=fmt)]})
    return 0
