"""Show one colour in every display format.

Prints hex, rgb, hsl, hsb and cmyk values, the nearest colour name and
the text colour that reads best on it.

Example:
    palette-forge convert '#3b82f6'
    palette-forge convert 0f0 --json
"""

from palette_forge.commands._common import parse_colour
from palette_forge.core.formats import FORMATS, format_color
from palette_forge.core.render import make_swatch
from palette_forge.core.types import Command, Report

command = Command(
    name='convert',
    help='Show a colour as hex, rgb, hsl, hsb and cmyk.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('color', help='Colour as hex')


@command.run
def run(report: Report, args) -> int:
    color = parse_colour(args.color)
    if color is None:
        return 1

    swatch = make_swatch(0, color)
    report.subject = swatch.hex
    data = {fmt: format_color(color, fmt) for fmt in FORMATS}
    data['name'] = swatch.name
    data['text'] = f'{swatch.text_color} ({swatch.contrast:.2f}:1)'
    report.add('convert', data)
    return 0
