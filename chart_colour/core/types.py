"""Shared types for chart-colour: ThemeSlot, ColourValue, colour references, shape properties, Command, Report."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

# DrawingML stores percentage-like fields as parts per 100000
SCALE = 100000.0


class ThemeSlot(enum.Enum):
    """The twelve named colour roles of a document theme, in theme-index order."""

    BG1 = 'bg1'
    TX1 = 'tx1'
    BG2 = 'bg2'
    TX2 = 'tx2'
    ACCENT1 = 'accent1'
    ACCENT2 = 'accent2'
    ACCENT3 = 'accent3'
    ACCENT4 = 'accent4'
    ACCENT5 = 'accent5'
    ACCENT6 = 'accent6'
    HLINK = 'hlink'
    FOLHLINK = 'folHlink'

    @classmethod
    def from_name(cls, name: str) -> ThemeSlot | None:
        """Case-insensitive lookup, e.g. 'Accent1' -> ACCENT1. Unknown names give None."""
        wanted = name.lower()
        for slot in cls:
            if slot.value.lower() == wanted:
                return slot
        return None

    @classmethod
    def accent(cls, number: int) -> ThemeSlot:
        """accent(1) -> ACCENT1 ... accent(6) -> ACCENT6."""
        return cls(f'accent{number}')

    @property
    def index(self) -> int:
        return list(ThemeSlot).index(self)


@dataclass(frozen=True)
class ColourValue:
    """A resolved chart colour.

    rgb is the untinted base colour. tint > 0 lightens towards white,
    tint < 0 darkens towards black. alpha == 0 means no alpha modifier was
    given (fully opaque), not fully transparent.
    """

    rgb: tuple[int, int, int]
    tint: float = 0.0
    alpha: float = 0.0


@dataclass(frozen=True)
class SchemeColour:
    """<a:schemeClr>: a theme slot plus optional lumOff/lumMod/alpha (parts per 100000)."""

    slot: ThemeSlot | str | None
    lum_off: int | None = None
    lum_mod: int | None = None
    alpha: int | None = None


@dataclass(frozen=True)
class LiteralColour:
    """<a:srgbClr>: three raw bytes (signed or unsigned) plus optional modifiers."""

    rgb_bytes: Any
    lum_off: int | None = None
    lum_mod: int | None = None
    alpha: int | None = None


@dataclass(frozen=True)
class SolidFill:
    scheme: SchemeColour | None = None
    srgb: LiteralColour | None = None


@dataclass(frozen=True)
class LineProperties:
    solid_fill: SolidFill | None = None


@dataclass(frozen=True)
class ShapeProperties:
    """<c:spPr>: the shape's own solid fill and its line (stroke) properties."""

    solid_fill: SolidFill | None = None
    line: LineProperties | None = None

    def line_fill(self) -> SolidFill | None:
        return self.line.solid_fill if self.line is not None else None


@dataclass
class ChartSpec:
    """Parsed chart description file."""

    name: str
    plot_area: ShapeProperties | None = None
    series: list[ShapeProperties | None] = field(default_factory=list)
    line_chart: bool = False
    theme: dict[str, str] | None = None  # slot name -> colour string, as written


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='palette', help='Print the automatic series palette')

        @command.run
        def run(chart, theme, report, args):
            ...
    """

    def __init__(self, name: str, help: str = '', needs_chart: bool = True):
        self.name = name
        self.help = help
        self.needs_chart = needs_chart
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, chart: ChartSpec | None, theme: Any, report: Report, args: Any) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(chart, theme, report, args)


@dataclass
class Report:
    """Accumulates resolved colours for text/JSON output."""

    chart_path: str | None = None
    theme_source: str = ''
    entries: dict[str, dict[str, Any]] = field(default_factory=dict)
    resolved_count: int = 0
    unresolved_count: int = 0

    def add(self, element: str, command_name: str, data: dict[str, Any]) -> None:
        """Add command results for a chart element (plot area, series N, theme slot)."""
        if element not in self.entries:
            self.entries[element] = {}
        self.entries[element][command_name] = data

    def record_resolved(self, element: str) -> None:
        self.resolved_count += 1

    def record_unresolved(self, element: str) -> None:
        self.unresolved_count += 1
