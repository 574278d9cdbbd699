"""Check subcommand handlers for ShowIf CLI."""

from __future__ import annotations

import yaml
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from src.cli.subcommands._helpers import CommandResult, _json_result, _print_result
from src.cli.utils import console, format_verdict
from src.inspector import ConditionalFieldDrawer, load_object
from src.showif.loader import RuleConfigError, load_rules
from src.utils.logger import get_logger


def run_check(rules_path: str, object_path: str) -> CommandResult:
    """
    Evaluate a rule document against an object document.

    Fails if either document cannot be loaded, or if any field's
    verdict is ERROR.
    """
    try:
        rules_by_path = load_rules(rules_path)
        obj = load_object(object_path)
    except FileNotFoundError as e:
        return CommandResult(success=False, error=f"File not found: {e.filename}")
    except (RuleConfigError, ValueError, yaml.YAMLError) as e:
        return CommandResult(success=False, error=str(e))

    logger = get_logger()
    plans = ConditionalFieldDrawer().inspect_rules(obj, rules_by_path)
    for plan in plans:
        logger.verdict(plan.field_path, plan.verdict.state.value, plan.verdict.message)

    errors = [plan for plan in plans if plan.verdict.is_error]
    data = {
        "fields": [plan.to_dict() for plan in plans],
        "error_count": len(errors),
    }
    if errors:
        return CommandResult(
            success=False,
            error=f"{len(errors)} of {len(plans)} field(s) have rule errors",
            data=data,
        )
    return CommandResult(
        success=True,
        message=f"{len(plans)} field(s) evaluated",
        data=data,
    )


def handle_check(args) -> int:
    """Handle `check` subcommand - evaluate rules against an object."""
    if not args.json_output:
        console.print(Panel(
            f"[bold cyan]SHOWIF CHECK[/]\n"
            f"Rules: {args.rules}\n"
            f"Object: {args.object_path}",
            border_style="cyan"
        ))

    result = run_check(args.rules, args.object_path)

    if args.json_output:
        return _json_result(result)

    if result.data and result.data.get("fields"):
        table = Table(title="Field Verdicts")
        table.add_column("Field", style="cyan")
        table.add_column("Verdict")
        table.add_column("Height", justify="right")
        table.add_column("Message", style="yellow")
        for plan in result.data["fields"]:
            table.add_row(
                escape(plan["field"]),
                format_verdict(plan["state"]),
                f"{plan['height']:g}",
                escape(plan["message"]),
            )
        console.print(table)

    return _print_result(result)

