"""Shared types for palette-forge: colour values, Swatch, Command, Report."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class HSL:
    """Canonical colour value. Hue in degrees, saturation/lightness in percent."""

    h: int
    s: int
    l: int  # noqa: E741


@dataclass(frozen=True)
class RGB:
    r: int
    g: int
    b: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class HSB:
    h: int
    s: int
    b: int


@dataclass(frozen=True)
class CMYK:
    c: int
    m: int
    y: int
    k: int


@dataclass(frozen=True)
class ScaleStep:
    """One step of a tonal scale. key is 50 (lightest) .. 900 (darkest)."""

    key: int
    color: HSL


@dataclass(frozen=True)
class WcagLevels:
    aa: bool
    aaa: bool
    aa_large: bool
    aaa_large: bool


@dataclass
class Swatch:
    """One rendered colour, ready for a display layer."""

    slot: int
    color: HSL
    hex: str
    value: str  # formatted in the requested display format
    text_color: str  # '#ffffff' or '#000000'
    contrast: float  # text colour vs background
    name: str = ''
    locked: bool = False
    key: int | None = None  # scale step key, None for palette slots

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            'slot': self.slot,
            'hsl': {'h': self.color.h, 's': self.color.s, 'l': self.color.l},
            'hex': self.hex,
            'value': self.value,
            'text_color': self.text_color,
            'contrast': round(self.contrast, 2),
            'name': self.name,
            'locked': self.locked,
        }
        if self.key is not None:
            d['key'] = self.key
        return d


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='scale', help='Tonal scale for one colour')

        @command.arguments
        def arguments(parser):
            parser.add_argument('color')

        @command.run
        def run(report, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None
        self._args_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register a function that adds argparse arguments."""
        self._args_fn = fn
        return fn

    def add_arguments(self, parser: Any) -> None:
        if self._args_fn is not None:
            self._args_fn(parser)

    def execute(self, report: Report, args: Any) -> int:
        """Execute the command's run function. Returns the process exit code."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        code = self._run_fn(report, args)
        return int(code or 0)


@dataclass
class Report:
    """Accumulates results from a command for text/JSON output."""

    command: str = ''
    subject: str = ''
    sections: dict[str, dict[str, Any]] = field(default_factory=dict)
    pass_count: int = 0
    fail_count: int = 0

    def add(self, section: str, data: dict[str, Any]) -> None:
        """Add (or merge into) a named section of the report."""
        if section not in self.sections:
            self.sections[section] = {}
        self.sections[section].update(data)

    def record_pass(self) -> None:
        self.pass_count += 1

    def record_fail(self) -> None:
        self.fail_count += 1
