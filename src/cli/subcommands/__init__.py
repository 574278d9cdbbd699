"""
CLI subcommand handlers for showif_cli.

Each handler takes parsed ``args`` and returns a process exit code.
"""

from src.cli.subcommands.check import handle_check, run_check
from src.cli.subcommands.rules import handle_rules, run_rules

__all__ = [
    "handle_check",
    "handle_rules",
    "run_check",
    "run_rules",
]
