"""
cli — command-line interface for appsui.

Entry points
────────────
  python -m appsui   (via appsui/__main__.py)
  appsui             (via pyproject.toml [project.scripts])

Subcommands: list | remove | roll | card | prospect | expense | book | favorite
"""

from appsui.cli.main import build_parser, cmd_list, cmd_remove, cmd_roll, main

__all__ = ["build_parser", "cmd_list", "cmd_remove", "cmd_roll", "main"]
