"""Shared helpers for CLI subcommand handlers."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from src.cli.utils import console


@dataclass
class CommandResult:
    """
    Standard return type for subcommand operations.

    Attributes:
        success: Whether the operation succeeded
        message: Human-readable success/info message
        data: Structured data payload
        error: Error message if success=False
    """
    success: bool
    message: str = ""
    data: Optional[Dict[str, Any]] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


def _json_result(result: CommandResult) -> int:
    """Print CommandResult as JSON and return exit code.

    Standard JSON envelope for --json mode:
    ``{"status": "pass"|"fail", "message": "...", "data": {...}}``
    """
    output = {
        "status": "pass" if result.success else "fail",
        "message": result.message if result.success else result.error,
        "data": result.data,
    }
    print(json.dumps(output, indent=2, default=str))
    return 0 if result.success else 1


def _print_result(result: CommandResult) -> int:
    """Print OK/FAIL status line for a CommandResult and return exit code."""
    if result.success:
        console.print(f"\n[bold green]OK {result.message}[/]")
        return 0
    else:
        console.print(f"\n[bold red]FAIL {result.error}[/]")
        return 1
