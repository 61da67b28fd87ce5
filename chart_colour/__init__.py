"""Theme-aware colour resolution for spreadsheet charts."""

from chart_colour.core.resolver import (
    assign_automatic,
    resolve_background,
    resolve_plot_area_background,
    resolve_reference,
    resolve_series_colour,
    series_palette,
)
from chart_colour.core.theme import OFFICE_THEME, ThemeTable, load_theme_file
from chart_colour.core.triplet import NO_DATA, css_rgb, css_rgba, normalize, rgb_with_tint, triplet_from_colour
from chart_colour.core.types import (
    ColourValue,
    LineProperties,
    LiteralColour,
    SchemeColour,
    ShapeProperties,
    SolidFill,
    ThemeSlot,
)

__all__ = [
    'NO_DATA',
    'OFFICE_THEME',
    'ColourValue',
    'LineProperties',
    'LiteralColour',
    'SchemeColour',
    'ShapeProperties',
    'SolidFill',
    'ThemeSlot',
    'ThemeTable',
    'assign_automatic',
    'css_rgb',
    'css_rgba',
    'load_theme_file',
    'normalize',
    'resolve_background',
    'resolve_plot_area_background',
    'resolve_reference',
    'resolve_series_colour',
    'rgb_with_tint',
    'series_palette',
    'triplet_from_colour',
]
