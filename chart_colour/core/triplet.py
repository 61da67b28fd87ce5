"""Byte triplet normalization, tint application and CSS formatting.

Literal colours arrive as three raw bytes. Depending on where they came
from those bytes are signed (-128..127, two's complement) or unsigned
(0..255). normalize() maps either form onto 0..255.

NO_DATA (256, 256, 256) is deliberately out of range: it marks "no colour
data available" and must never be clamped into a real colour.
"""

from chart_colour.core.types import ColourValue

RGB8BITS = 256
NO_DATA = (RGB8BITS, RGB8BITS, RGB8BITS)


def normalize(raw) -> tuple[int, int, int]:
    """Convert three signed or unsigned bytes to unsigned 0..255 ints.

    Raises ValueError if raw is not three byte-sized integers.
    """
    values = list(raw)
    if len(values) != 3:
        raise ValueError(f'expected 3 colour bytes, got {len(values)}')
    fixed = []
    for v in values:
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError(f'colour byte is not an integer: {v!r}')
        if v < -128 or v > 255:
            raise ValueError(f'colour byte out of range: {v}')
        # Bytes are signed, so values of 128+ arrive negative
        fixed.append(v + RGB8BITS if v < 0 else v)
    return (fixed[0], fixed[1], fixed[2])


def apply_tint(channel: int, tint: float) -> int:
    """Blend one 0..255 channel towards white (tint > 0) or black (tint < 0)."""
    if tint > 0:
        value = channel * (1.0 - tint) + (255 - 255 * (1.0 - tint))
    elif tint < 0:
        value = channel * (1 + tint)
    else:
        value = channel
    # Truncate, then wrap like a byte
    return int(value) & 0xFF


def rgb_with_tint(colour: ColourValue) -> tuple[int, int, int]:
    """The final displayable triplet for a resolved colour."""
    r, g, b = colour.rgb
    return (apply_tint(r, colour.tint), apply_tint(g, colour.tint), apply_tint(b, colour.tint))


def triplet_from_colour(colour: ColourValue | None) -> tuple[int, int, int]:
    """Tinted triplet for colour, or NO_DATA if there is no colour."""
    if colour is None:
        return NO_DATA
    return rgb_with_tint(colour)


def has_data(triplet: tuple[int, int, int]) -> bool:
    """False if any channel carries the no-data marker."""
    return all(c != RGB8BITS for c in triplet)


def rgb_to_hex(triplet: tuple[int, int, int]) -> str | None:
    if not has_data(triplet):
        return None
    r, g, b = triplet
    return f'#{r:02x}{g:02x}{b:02x}'


def css_rgb(triplet: tuple[int, int, int]) -> str:
    """e.g. (68, 114, 196) -> 'rgb(68,114,196)'."""
    return f'rgb({",".join(str(c) for c in triplet)})'


def css_rgba(colour: ColourValue) -> str:
    """rgba() string with tint applied. alpha 0 is unset, so it renders opaque."""
    r, g, b = rgb_with_tint(colour)
    opacity = colour.alpha if colour.alpha > 0 else 1.0
    return f'rgba({r},{g},{b},{opacity:g})'
