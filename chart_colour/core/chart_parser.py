"""JSON chart description loader.

Turns a chart description into typed ShapeProperties. Example:

    {
      "name": "sales",
      "line_chart": true,
      "theme": {"accent1": "4472C4"},
      "plot_area": {"solid_fill": {"scheme": {"slot": "bg1", "lum_mod": 95000}}},
      "series": [
        {"line": {"solid_fill": {"srgb": {"rgb": "FF0000", "alpha": 50000}}}},
        null
      ]
    }

Structural problems in optional blocks (a fill that is not an object, a
modifier that is not a number) do not fail the load: the block is dropped
or passed through so resolution degrades to its fallback. Only a document
that is not valid JSON, or not an object, raises ValueError.
"""

import json
import logging

from chart_colour.core.types import (
    ChartSpec,
    LineProperties,
    LiteralColour,
    SchemeColour,
    ShapeProperties,
    SolidFill,
)

log = logging.getLogger(__name__)


def parse_chart_file(path: str) -> ChartSpec:
    """Parse a chart description from disk."""
    with open(path, encoding='utf-8') as f:
        text = f.read()
    return parse_chart_string(text, default_name=path)


def parse_chart_string(text: str, default_name: str = 'chart') -> ChartSpec:
    """Parse a chart description from a string."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f'invalid chart JSON: {e}') from e
    if not isinstance(data, dict):
        raise ValueError('chart description must be a JSON object')

    theme = data.get('theme')
    if theme is not None and not isinstance(theme, dict):
        raise ValueError('"theme" must be an object of slot -> colour')

    raw_series = data.get('series')
    if raw_series is None:
        raw_series = []
    if not isinstance(raw_series, list):
        raise ValueError('"series" must be a list')

    return ChartSpec(
        name=str(data.get('name') or default_name),
        plot_area=_shape_properties(data.get('plot_area')),
        series=[_shape_properties(s) for s in raw_series],
        line_chart=bool(data.get('line_chart', False)),
        theme=theme,
    )


def _shape_properties(block) -> ShapeProperties | None:
    if not isinstance(block, dict):
        return None
    line = None
    if isinstance(block.get('line'), dict):
        line = LineProperties(solid_fill=_solid_fill(block['line'].get('solid_fill')))
    return ShapeProperties(solid_fill=_solid_fill(block.get('solid_fill')), line=line)


def _solid_fill(block) -> SolidFill | None:
    if block is None:
        return None
    if not isinstance(block, dict):
        log.debug('No entry for solidFill: %r', block)
        return None
    return SolidFill(scheme=_scheme(block.get('scheme')), srgb=_literal(block.get('srgb')))


def _scheme(block) -> SchemeColour | None:
    # "scheme": "accent1" is shorthand for {"slot": "accent1"}
    if isinstance(block, str):
        return SchemeColour(slot=block)
    if not isinstance(block, dict):
        return None
    return SchemeColour(
        slot=_slot(block.get('slot')),
        lum_off=block.get('lum_off'),
        lum_mod=block.get('lum_mod'),
        alpha=block.get('alpha'),
    )


def _slot(value) -> str | None:
    if value is None or isinstance(value, str):
        return value
    log.debug('Dropping unreadable scheme slot: %r', value)
    return None


def _literal(block) -> LiteralColour | None:
    if isinstance(block, str):
        return LiteralColour(rgb_bytes=_rgb_bytes(block))
    if not isinstance(block, dict):
        return None
    return LiteralColour(
        rgb_bytes=_rgb_bytes(block.get('rgb')),
        lum_off=block.get('lum_off'),
        lum_mod=block.get('lum_mod'),
        alpha=block.get('alpha'),
    )


def _rgb_bytes(value):
    """'FF0000' -> b'\\xff\\x00\\x00'; lists pass through; anything else is left for the resolver to reject."""
    if isinstance(value, str):
        try:
            return bytes.fromhex(value.lstrip('#'))
        except ValueError:
            return value
    return value
