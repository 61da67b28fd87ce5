"""Command lookup.

Every module under chart_colour/commands/ that defines a `command` object
of type Command becomes a CLI subcommand named by Command.name.
"""

import importlib
import pkgutil

import chart_colour.commands as commands_pkg
from chart_colour.core.types import Command

_registry: dict[str, Command] = {}


def discover() -> dict[str, Command]:
    """Import the command modules once and return name -> Command."""
    if not _registry:
        for module_info in pkgutil.iter_modules(commands_pkg.__path__):
            if module_info.name.startswith('_'):
                continue
            module = importlib.import_module(f'{commands_pkg.__name__}.{module_info.name}')
            cmd = getattr(module, 'command', None)
            if isinstance(cmd, Command):
                _registry[cmd.name] = cmd
    return _registry


def get(name: str) -> Command:
    """Get a command by name. Raises KeyError listing the known commands."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_commands() -> dict[str, Command]:
    return discover()
