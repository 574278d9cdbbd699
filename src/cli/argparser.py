"""
Argument parser setup for ShowIf CLI.

Defines all subcommands and their arguments:
- check: Evaluate a rule document against an object document
- rules: Parse a rule document and list its rules
"""

import argparse


def setup_argparse(argv=None) -> argparse.Namespace:
    """
    Parse command-line arguments for showif_cli.

    Supports:
      check --rules R --object O    Evaluate every rule, print verdicts
      rules --rules R               List parsed rules
    """
    parser = argparse.ArgumentParser(
        description="ShowIf - Conditional field visibility checker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python showif_cli.py check --rules rules.yaml --object settings.yaml
  python showif_cli.py check --rules rules.yaml --object settings.yaml --json
  python showif_cli.py rules --rules rules.yaml
        """
    )

    # Verbosity: mutually exclusive group (-q / -v / --debug)
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-q", "--quiet",
        action="store_true",
        default=False,
        help="Quiet mode: WARNING only, minimal output"
    )
    verbosity.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="Verbose mode: INFO + one line per evaluated field"
    )
    verbosity.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Debug mode: full DEBUG + field tracing (sets SHOWIF_DEBUG=1)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    _setup_check_subcommand(subparsers)
    _setup_rules_subcommand(subparsers)

    return parser.parse_args(argv)


def _setup_check_subcommand(subparsers) -> None:
    """Set up `check` subcommand."""
    check_parser = subparsers.add_parser("check", help="Evaluate rules against an object")
    check_parser.add_argument("--rules", required=True, help="Rule document (YAML)")
    check_parser.add_argument("--object", required=True, dest="object_path", help="Object document (YAML)")
    check_parser.add_argument("--json", action="store_true", dest="json_output", help="Output results as JSON")


def _setup_rules_subcommand(subparsers) -> None:
    """Set up `rules` subcommand."""
    rules_parser = subparsers.add_parser("rules", help="Parse and list a rule document")
    rules_parser.add_argument("--rules", required=True, help="Rule document (YAML)")
    rules_parser.add_argument("--json", action="store_true", dest="json_output", help="Output results as JSON")
