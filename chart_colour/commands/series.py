"""Resolve the line or fill colour of every series in a chart.

Line charts use each series' line fill; other charts use the series' own
shape fill. Override with --mode line / --mode fill.

A series without a usable fill gets the automatic colour for its position:
accent1..accent6, then the same six again with tints
+0.25, +0.5, -0.25, -0.5, +0.1, +0.3, -0.1, -0.3 for later rounds.
A series the theme cannot colour at all is reported unresolved; renderers
substitute their own default.

Example:
    chart-colour series sales.json
    chart-colour series sales.json --mode fill --json
"""

from chart_colour.core.report import colour_data
from chart_colour.core.resolver import resolve_series_colour
from chart_colour.core.types import Command

command = Command(
    name='series',
    help='Resolve each series line/fill colour, falling back to automatic colours.',
)


def _is_line(chart, args) -> bool:
    mode = getattr(args, 'mode', 'auto')
    if mode == 'line':
        return True
    if mode == 'fill':
        return False
    return chart.line_chart


@command.run
def run(chart, theme, report, args) -> None:
    is_line = _is_line(chart, args)
    for index, shape_props in enumerate(chart.series):
        element = f'series {index}'
        colour = resolve_series_colour(index, shape_props, theme, is_line)
        report.add(element, 'series', colour_data(colour))
        if colour is None:
            report.record_unresolved(element)
        else:
            report.record_resolved(element)
