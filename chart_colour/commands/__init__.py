"""CLI subcommands. Each module defines a `command` and documents it in its docstring."""
