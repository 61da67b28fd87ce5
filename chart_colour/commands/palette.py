"""Print the automatic colours for the first N series.

Shows which accent slot and tint each position receives when a series
has no fill of its own. Does not need a chart file.

Example:
    chart-colour palette --count 18
    chart-colour palette --theme corporate.json --json
"""

from chart_colour.core.report import colour_data
from chart_colour.core.resolver import automatic_slot, series_palette
from chart_colour.core.types import Command

command = Command(
    name='palette',
    help='Print the automatic series palette for a theme.',
    needs_chart=False,
)


@command.run
def run(chart, theme, report, args) -> None:
    count = getattr(args, 'count', 12)
    for index, colour in enumerate(series_palette(count, theme)):
        element = f'series {index}'
        data = colour_data(colour)
        data['slot'] = automatic_slot(index).value
        report.add(element, 'palette', data)
        if colour is None:
            report.record_unresolved(element)
        else:
            report.record_resolved(element)
