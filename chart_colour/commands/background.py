"""Resolve the plot-area background colour of a chart.

Uses the plot area's explicit solid fill (scheme slot or literal sRGB with
lumOff/lumMod/alpha modifiers). Plot areas have no automatic colour: with
no usable fill the background is opaque white.

Example:
    chart-colour background sales.json
    chart-colour background sales.json --theme corporate.json --json
"""

from chart_colour.core.report import colour_data
from chart_colour.core.resolver import resolve_plot_area_background
from chart_colour.core.types import Command

command = Command(
    name='background',
    help='Resolve the plot-area background colour (white if no fill).',
)


@command.run
def run(chart, theme, report, args) -> None:
    colour = resolve_plot_area_background(chart.plot_area, theme)
    report.add('plot_area', 'background', colour_data(colour))
    report.record_resolved('plot_area')
