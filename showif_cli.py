#!/usr/bin/env python3
"""
ShowIf - Conditional field visibility CLI

Non-interactive commands:
  python showif_cli.py check --rules rules.yaml --object settings.yaml
  python showif_cli.py check --rules rules.yaml --object settings.yaml --json
  python showif_cli.py rules --rules rules.yaml

Exit codes:
  0  every field evaluated to VISIBLE or HIDDEN
  1  a document failed to load, or a field's verdict is ERROR
"""

import os
import sys

# Add src to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from src.cli.argparser import setup_argparse
from src.cli.subcommands import handle_check, handle_rules
from src.cli.utils import console
from src.config.config import get_config
from src.utils.debug import enable_debug, enable_verbose
from src.utils.logger import setup_logger


def parse_cli_args(argv=None):
    """Parse CLI arguments."""
    return setup_argparse(argv)


def main(argv=None):
    """Main entry point."""
    # Parse CLI arguments FIRST (before any config or logging)
    args = parse_cli_args(argv)

    config = get_config()
    is_valid, messages = config.validate()
    if not is_valid:
        for msg in messages:
            console.print(f"[yellow]Config: {msg}[/]")

    log_level = config.log.level.upper()
    if not is_valid:
        log_level = "INFO"
    if args.quiet:
        log_level = "WARNING"
    elif args.verbose:
        log_level = "INFO"
    elif args.debug or config.log.debug:
        log_level = "DEBUG"

    # Setup logging
    setup_logger(
        log_dir=config.log.log_dir,
        log_level=log_level,
        file_logging=config.log.file_logging,
    )

    if args.debug or config.log.debug:
        enable_debug(True)
    if args.verbose:
        enable_verbose(True)

    if args.command == "check":
        sys.exit(handle_check(args))
    elif args.command == "rules":
        sys.exit(handle_rules(args))

    console.print("[yellow]No command given. Use --help for usage.[/]")
    sys.exit(2)


if __name__ == "__main__":
    main()
