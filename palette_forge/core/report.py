"""Report builder — text and JSON output for palette-forge results."""

import json
from typing import Any

from palette_forge.core.types import Report


def _swatch_line(sw: dict[str, Any]) -> str:
    label = f'{sw["key"]:>3}' if 'key' in sw else f'{sw["slot"]}'
    text = 'white' if sw['text_color'] == '#ffffff' else 'black'
    line = f'  {label}  {sw["value"]:<26} {sw["name"]:<20} text={text} {sw["contrast"]:.2f}:1'
    if sw.get('locked'):
        line += '  [locked]'
    return line


def _levels_line(levels: dict[str, bool]) -> str:
    parts = [f'{name.replace("_", "-").upper()} {"✓" if ok else "✗"}' for name, ok in levels.items()]
    return '  ' + '  '.join(parts)


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    header = f'palette-forge {report.command}'
    if report.subject:
        header += f': {report.subject}'
    lines.append(header)
    lines.append('')

    for section, data in report.sections.items():
        if section == 'palette':
            mode = data.get('mode', '?')
            effective = data.get('effective', '?')
            rule = f'{mode} → {effective}' if mode != effective else mode
            lines.append(f'── harmony: {rule}  format: {data.get("format", "hex")}')
            for sw in data.get('swatches', []):
                lines.append(_swatch_line(sw))
        elif section == 'scale':
            lines.append(f'── scale of {data.get("base", "?")}')
            for sw in data.get('steps', []):
                lines.append(_swatch_line(sw))
        elif section == 'contrast':
            fg = data.get('foreground', '?')
            bg = data.get('background', '?')
            lines.append(f'── {fg} on {bg}')
            lines.append(f'  ratio: {data.get("ratio", 0):.2f}:1')
            if 'levels' in data:
                lines.append(_levels_line(data['levels']))
            if 'required' in data:
                mark = '✓' if data.get('pass') else '✗'
                lines.append(f'  required: {data["required"]}  {mark}')
        else:
            # Generic fallback
            lines.append(f'── {section}')
            for k, v in data.items():
                lines.append(f'  {k:<11} {v}')

        lines.append('')

    total = report.pass_count + report.fail_count
    if total > 0:
        lines.append(f'PASS {report.pass_count}/{total}  FAIL {report.fail_count}/{total}')
    return '\n'.join(lines).rstrip('\n')


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {'command': report.command}
    if report.subject:
        obj['subject'] = report.subject
    obj.update(report.sections)

    total = report.pass_count + report.fail_count
    if total > 0:
        obj['summary'] = {
            'total': total,
            'pass': report.pass_count,
            'fail': report.fail_count,
        }
    return json.dumps(obj, indent=2)
