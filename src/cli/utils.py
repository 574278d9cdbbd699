"""
CLI utility functions for ShowIf.

Contains:
- Shared rich Console
- Verdict styling for tables
"""

from rich.console import Console

from ..showif.types import VerdictState


# Global Console
console = Console()


VERDICT_STYLES = {
    VerdictState.VISIBLE: "bold green",
    VerdictState.HIDDEN: "dim",
    VerdictState.ERROR: "bold yellow",
}


def format_verdict(state) -> str:
    """Rich markup for a verdict state (member or value string)."""
    state = VerdictState(state)
    style = VERDICT_STYLES.get(state, "white")
    return f"[{style}]{state.value.upper()}[/]"
