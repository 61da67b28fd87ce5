"""List the slots of the active theme.

Theme precedence: --theme, then the chart file's "theme" block, then
$CHART_COLOUR_THEME, then the built-in Office theme.

Example:
    chart-colour theme
    chart-colour theme --theme corporate.json
"""

from chart_colour.core.triplet import rgb_to_hex
from chart_colour.core.types import Command

command = Command(
    name='theme',
    help='List the colours of the active theme.',
    needs_chart=False,
)


@command.run
def run(chart, theme, report, args) -> None:
    for slot, rgb in theme.items():
        report.add(slot.value, 'theme', {'index': slot.index, 'rgb': rgb_to_hex(rgb)})
