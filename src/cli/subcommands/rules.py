"""Rules subcommand handlers for ShowIf CLI."""

from __future__ import annotations

import yaml
from rich.markup import escape
from rich.table import Table

from src.cli.subcommands._helpers import CommandResult, _json_result, _print_result
from src.cli.utils import console
from src.showif.loader import RuleConfigError, load_rules


def run_rules(rules_path: str) -> CommandResult:
    """Parse a rule document and report its rules."""
    try:
        rules_by_path = load_rules(rules_path)
    except FileNotFoundError as e:
        return CommandResult(success=False, error=f"File not found: {e.filename}")
    except (RuleConfigError, yaml.YAMLError) as e:
        return CommandResult(success=False, error=str(e))

    fields = {
        field_path: [rule.to_dict() for rule in rules]
        for field_path, rules in rules_by_path.items()
    }
    count = sum(len(rules) for rules in rules_by_path.values())
    return CommandResult(
        success=True,
        message=f"{count} rule(s) on {len(fields)} field(s)",
        data={"fields": fields},
    )


def handle_rules(args) -> int:
    """Handle `rules` subcommand - parse and list a rule document."""
    result = run_rules(args.rules)

    if args.json_output:
        return _json_result(result)

    if result.success:
        table = Table(title=f"Rules: {escape(args.rules)}")
        table.add_column("Field", style="cyan")
        table.add_column("Compared", style="bold")
        table.add_column("Kind")
        table.add_column("Op")
        table.add_column("Values")
        for field_path, rules in result.data["fields"].items():
            for i, rule in enumerate(rules):
                table.add_row(
                    escape(field_path),
                    escape(rule["field"]),
                    rule["kind"],
                    rule["op"] if i == 0 else f"{rule['op']} [dim](ignored)[/]",
                    escape(", ".join(str(v) for v in rule["values"])),
                )
        console.print(table)

    return _print_result(result)
