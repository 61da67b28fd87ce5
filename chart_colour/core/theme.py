"""Theme colour table.

A ThemeTable maps the twelve ThemeSlot roles to base RGB triplets. It is
built once per document and only ever read during resolution, so it exposes
no mutators.

Theme files are flat JSON objects of slot name -> colour string. Colour
strings are anything Pillow's ImageColor understands ('#4472c4', 'red',
'rgb(68,114,196)') plus bare 6-digit hex as stored in theme XML ('4472C4').
The DrawingML names lt1/dk1/lt2/dk2 are accepted for bg1/tx1/bg2/tx2 when
building a theme. Chart references must use the twelve slot names.
"""

import json
import re
from collections.abc import Mapping
from types import MappingProxyType

from PIL import ImageColor

from chart_colour.core.types import ThemeSlot

# clrScheme element names -> the slot names charts reference them by
ALIASES = {
    'lt1': ThemeSlot.BG1,
    'dk1': ThemeSlot.TX1,
    'lt2': ThemeSlot.BG2,
    'dk2': ThemeSlot.TX2,
}

_BARE_HEX = re.compile(r'^[0-9a-fA-F]{6}$')


def parse_colour(value) -> tuple[int, int, int]:
    """Colour string or [r, g, b] list -> (r, g, b). Raises ValueError."""
    if isinstance(value, (list, tuple)):
        if len(value) != 3 or not all(isinstance(c, int) and 0 <= c <= 255 for c in value):
            raise ValueError(f'invalid RGB triplet: {value!r}')
        return (value[0], value[1], value[2])
    if not isinstance(value, str):
        raise ValueError(f'invalid colour: {value!r}')
    text = value.strip()
    if _BARE_HEX.match(text):
        text = '#' + text
    rgb = ImageColor.getrgb(text)
    return (rgb[0], rgb[1], rgb[2])


def slot_for_name(name: str) -> ThemeSlot | None:
    alias = ALIASES.get(name.lower())
    if alias is not None:
        return alias
    return ThemeSlot.from_name(name)


class ThemeTable:
    """Read-only slot -> RGB lookup."""

    def __init__(self, colours: Mapping[ThemeSlot, tuple[int, int, int]], source: str = ''):
        self._colours = MappingProxyType(dict(colours))
        self.source = source

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, object], source: str = '') -> 'ThemeTable':
        """Build from slot name -> colour string. Raises ValueError on bad names or colours."""
        colours: dict[ThemeSlot, tuple[int, int, int]] = {}
        for name, value in mapping.items():
            slot = slot_for_name(name)
            if slot is None:
                raise ValueError(f'unknown theme slot: {name!r}')
            try:
                colours[slot] = parse_colour(value)
            except ValueError as e:
                raise ValueError(f'theme slot {name!r}: {e}') from e
        return cls(colours, source=source)

    def lookup(self, slot: ThemeSlot | str) -> tuple[int, int, int] | None:
        """Base RGB for slot, or None if the slot is unknown or missing from this theme.

        Only the twelve slot names resolve here; lt1/dk1 aliases are a theme-file
        convenience and are not valid chart references.
        """
        if isinstance(slot, str):
            slot = ThemeSlot.from_name(slot)
        if not isinstance(slot, ThemeSlot):
            return None
        return self._colours.get(slot)

    def items(self) -> list[tuple[ThemeSlot, tuple[int, int, int]]]:
        """Defined slots in theme-index order."""
        return [(s, self._colours[s]) for s in ThemeSlot if s in self._colours]

    def __len__(self) -> int:
        return len(self._colours)

    def __repr__(self) -> str:
        return f'ThemeTable({len(self)} slots, source={self.source!r})'


# Office 2013+ default theme
OFFICE_THEME = ThemeTable.from_mapping(
    {
        'bg1': 'FFFFFF',
        'tx1': '000000',
        'bg2': 'E7E6E6',
        'tx2': '44546A',
        'accent1': '4472C4',
        'accent2': 'ED7D31',
        'accent3': 'A5A5A5',
        'accent4': 'FFC000',
        'accent5': '5B9BD5',
        'accent6': '70AD47',
        'hlink': '0563C1',
        'folHlink': '954F72',
    },
    source='office',
)


def load_theme_file(path: str) -> ThemeTable:
    """Load a flat JSON theme file. Raises ValueError if it cannot be parsed."""
    with open(path, encoding='utf-8') as f:
        text = f.read()
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f'{path}: invalid JSON: {e}') from e
    if not isinstance(data, dict):
        raise ValueError(f'{path}: theme must be a JSON object')
    return ThemeTable.from_mapping(data, source=path)
