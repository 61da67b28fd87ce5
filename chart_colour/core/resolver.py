"""Theme-aware colour resolution for chart plot areas and series.

Resolution order for a chart series:
  1. The explicit solid fill (line fill for line charts, shape fill otherwise),
     either a theme scheme slot or a literal sRGB value, with any
     lumOff / lumMod / alpha modifiers folded into tint and alpha.
  2. The automatic colour: accent1..accent6 by series position, with later
     rounds of six distinguished by a fixed tint sequence.
  3. Nothing: the caller supplies its own final default (e.g. mid-gray).

Plot-area backgrounds stop after step 1 and fall back to opaque white.

Absence is never an error: every step returns None for "no colour here".
"""

import logging

from chart_colour.core.theme import ThemeTable
from chart_colour.core.triplet import normalize
from chart_colour.core.types import (
    SCALE,
    ColourValue,
    LiteralColour,
    SchemeColour,
    ShapeProperties,
    SolidFill,
    ThemeSlot,
)

log = logging.getLogger(__name__)

AUTOCOLOURSIZE = 6
# Tint per round of six automatic colours: round 2 is accent1..6 lightened 25%, etc.
AUTOMATIC_TINTS = (0, 0.25, 0.5, -0.25, -0.5, 0.1, 0.3, -0.1, -0.3)

WHITE = ColourValue(rgb=(255, 255, 255), tint=0.0, alpha=0.0)


def _modifier(value, name: str) -> int | float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        log.debug('Ignoring unreadable %s entry: %r', name, value)
        return None
    return value


def _compose(rgb: tuple[int, int, int], pre_tint: float, lum_off, lum_mod, alpha) -> ColourValue:
    """Fold a pre-tint or lumOff/lumMod plus alpha into a ColourValue."""
    tint = pre_tint
    if tint == 0:
        lum_off = _modifier(lum_off, 'lumOff')
        lum_mod = _modifier(lum_mod, 'lumMod')
        # lighten and darken are mutually exclusive; lumOff wins
        if lum_off is not None and lum_off > 0:
            tint = lum_off / SCALE
        elif lum_mod is not None and lum_mod > 0:
            tint = -(lum_mod / SCALE)

    alpha = _modifier(alpha, 'alpha')
    alpha_frac = alpha / SCALE if alpha is not None and alpha > 0 else 0.0
    return ColourValue(rgb=rgb, tint=float(tint), alpha=alpha_frac)


def _from_scheme(scheme: SchemeColour, theme: ThemeTable) -> ColourValue | None:
    if scheme.slot is None:
        return None
    if not isinstance(scheme.slot, (ThemeSlot, str)):
        log.debug('Ignoring unreadable schemeClr val: %r', scheme.slot)
        return None
    rgb = theme.lookup(scheme.slot)
    if rgb is None:
        log.debug('Theme slot %r not resolvable', scheme.slot)
        return None
    return _compose(rgb, 0, scheme.lum_off, scheme.lum_mod, scheme.alpha)


def _from_literal(srgb: LiteralColour) -> ColourValue | None:
    try:
        rgb = normalize(srgb.rgb_bytes)
    except (TypeError, ValueError) as e:
        log.warning('Cannot get rgb colour: %s', e)
        return None
    return _compose(rgb, 0, srgb.lum_off, srgb.lum_mod, srgb.alpha)


def resolve_reference(solid_fill: SolidFill | None, theme: ThemeTable) -> ColourValue | None:
    """Resolve an explicit solid fill. None when there is no usable reference."""
    if solid_fill is None:
        return None
    if solid_fill.scheme is not None:
        return _from_scheme(solid_fill.scheme, theme)
    if solid_fill.srgb is not None:
        return _from_literal(solid_fill.srgb)
    return None


def resolve_background(solid_fill: SolidFill | None, theme: ThemeTable) -> ColourValue:
    """Plot-area background: the explicit fill, or opaque white."""
    colour = resolve_reference(solid_fill, theme)
    if colour is not None:
        return colour
    return WHITE


def automatic_slot(series_index: int) -> ThemeSlot:
    """accent1..accent6, cycling by series position."""
    if series_index < 0:
        raise ValueError(f'series index must be >= 0, got {series_index}')
    number = (series_index + 1) % AUTOCOLOURSIZE
    if number == 0:
        number = AUTOCOLOURSIZE
    return ThemeSlot.accent(number)


def automatic_tint(series_index: int) -> float:
    """Tint for the round of six this series falls in; 0 past the end of the table."""
    if series_index < 0:
        raise ValueError(f'series index must be >= 0, got {series_index}')
    cycle = series_index // AUTOCOLOURSIZE
    if cycle >= len(AUTOMATIC_TINTS):
        return 0
    return AUTOMATIC_TINTS[cycle]


def assign_automatic(series_index: int, theme: ThemeTable) -> ColourValue | None:
    """The colour the editor gives series_index when it has no fill of its own."""
    slot = automatic_slot(series_index)
    rgb = theme.lookup(slot)
    if rgb is None:
        log.debug('Automatic colour slot %s missing from theme', slot.value)
        return None
    return _compose(rgb, automatic_tint(series_index), None, None, None)


def resolve_plot_area_background(shape_props: ShapeProperties | None, theme: ThemeTable) -> ColourValue:
    """Background colour of a chart's plot area."""
    solid_fill = shape_props.solid_fill if shape_props is not None else None
    if solid_fill is None:
        log.debug('No entry in bgcolor for solidFill')
    return resolve_background(solid_fill, theme)


def resolve_series_colour(
    series_index: int,
    shape_props: ShapeProperties | None,
    theme: ThemeTable,
    is_line_colour: bool,
) -> ColourValue | None:
    """Line or fill colour for one series.

    None means neither an explicit fill nor the automatic palette could
    produce a colour; the caller must supply the final fallback.
    """
    solid_fill = None
    if shape_props is not None:
        solid_fill = shape_props.line_fill() if is_line_colour else shape_props.solid_fill
    colour = resolve_reference(solid_fill, theme)
    if colour is not None:
        return colour
    return assign_automatic(series_index, theme)


def series_palette(count: int, theme: ThemeTable) -> list[ColourValue | None]:
    """Automatic colours for the first count series."""
    return [assign_automatic(i, theme) for i in range(count)]
