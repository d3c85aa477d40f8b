"""WCAG contrast ratio between a foreground and a background colour.

Reports the ratio (1-21) and which WCAG levels it meets:

    AA         >= 4.5   normal text
    AAA        >= 7.0   normal text
    AA-large   >= 3.0   large text
    AAA-large  >= 4.5   large text

--require LEVEL exits 1 when the pair fails that level (CI gating).

Example:
    palette-forge contrast '#ffffff' '#3b82f6'
    palette-forge contrast 111827 f8f9fa --require aaa
"""

from palette_forge.commands._common import parse_colour
from palette_forge.core.contrast import contrast_ratio, meets, wcag_levels
from palette_forge.core.convert import hsl_to_hex, hsl_to_rgb
from palette_forge.core.types import Command, Report

command = Command(
    name='contrast',
    help='WCAG contrast ratio and pass/fail levels for a foreground/background pair.',
)

LEVELS = ('aa', 'aaa', 'aa-large', 'aaa-large')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('foreground', help='Text colour as hex')
    parser.add_argument('background', help='Background colour as hex')
    parser.add_argument('--require', choices=LEVELS, default=None, help='Exit 1 if this level fails')


@command.run
def run(report: Report, args) -> int:
    fg = parse_colour(args.foreground)
    bg = parse_colour(args.background)
    if fg is None or bg is None:
        return 1

    ratio = contrast_ratio(hsl_to_rgb(fg.h, fg.s, fg.l), hsl_to_rgb(bg.h, bg.s, bg.l))
    levels = wcag_levels(ratio)
    data = {
        'foreground': hsl_to_hex(fg),
        'background': hsl_to_hex(bg),
        'ratio': round(ratio, 2),
        'levels': {
            'aa': levels.aa,
            'aaa': levels.aaa,
            'aa_large': levels.aa_large,
            'aaa_large': levels.aaa_large,
        },
    }
    report.subject = f'{data["foreground"]} on {data["background"]}'

    code = 0
    if args.require:
        passed = meets(ratio, args.require)
        data['required'] = args.require
        data['pass'] = passed
        if passed:
            report.record_pass()
        else:
            report.record_fail()
            code = 1

    report.add('contrast', data)
    return code
