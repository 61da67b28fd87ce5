"""Report builder — text and JSON output for chart-colour results."""

import json
from typing import Any

from chart_colour.core.triplet import css_rgb, css_rgba, rgb_to_hex, rgb_with_tint
from chart_colour.core.types import ColourValue, Report


def colour_data(colour: ColourValue | None) -> dict[str, Any]:
    """Serializable view of a resolved colour. None -> {'resolved': False}."""
    if colour is None:
        return {'resolved': False}
    final = rgb_with_tint(colour)
    return {
        'resolved': True,
        'base': rgb_to_hex(colour.rgb),
        'tint': colour.tint,
        'alpha': colour.alpha,
        'final': rgb_to_hex(final),
        'css': css_rgb(final),
        'css_alpha': css_rgba(colour),
    }


def _describe(data: dict[str, Any]) -> str:
    if not data.get('resolved'):
        return '(unresolved, caller default)'
    text = f'{data["final"]}  base {data["base"]}'
    if data.get('slot'):
        text += f' ({data["slot"]})'
    if data['tint']:
        text += f'  tint {data["tint"]:+g}'
    if data['alpha']:
        text += f'  alpha {data["alpha"]:g}'
    return text


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    header = 'chart-colour'
    if report.chart_path:
        header += f': {report.chart_path}'
    header += f' (theme: {report.theme_source})'
    lines.append(header)
    lines.append('')

    for element, commands in report.entries.items():
        for command_name, data in commands.items():
            if 'resolved' in data:
                mark = '✓' if data['resolved'] else '✗'
                lines.append(f'  {element:<14} {_describe(data)}  {mark}')
            else:
                # Generic fallback
                for k, v in data.items():
                    lines.append(f'  {element:<14} {command_name}.{k}: {v}')

    total = report.resolved_count + report.unresolved_count
    if total > 0:
        lines.append('')
        lines.append(f'RESOLVED {report.resolved_count}/{total}  UNRESOLVED {report.unresolved_count}/{total}')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {'theme': report.theme_source}
    if report.chart_path:
        obj['chart'] = report.chart_path

    obj['elements'] = [{'name': element, 'commands': commands} for element, commands in report.entries.items()]
    obj['summary'] = {
        'total': report.resolved_count + report.unresolved_count,
        'resolved': report.resolved_count,
        'unresolved': report.unresolved_count,
    }
    return json.dumps(obj, indent=2)
