"""
Debug utilities for ShowIf with field-path tracing.

Every debug log line is prefixed with the annotated field's path so rule
problems can be traced back to the field that carries the rule.

Usage:
    from src.utils.debug import debug_log, is_debug_enabled

    debug_log("settings.threshold", "Rule error", reason="FIELD_NOT_FOUND")
    # [DEBUG] [field:settings.threshold] Rule error: reason=FIELD_NOT_FOUND

Enable debugging:
    - Set environment variable: SHOWIF_DEBUG=1
    - Or use CLI flag: --debug
"""

from __future__ import annotations

import logging
import os
from typing import Any

# =============================================================================
# Configuration
# =============================================================================

_DEBUG_ENV = os.environ.get("SHOWIF_DEBUG", "").lower() in ("1", "true", "yes")
_debug_enabled = _DEBUG_ENV

# Verbose mode (one line per evaluated field)
_verbose_enabled = False

LOGGER_NAME = "showif"


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    return _debug_enabled


def enable_debug(enabled: bool = True) -> None:
    """Enable or disable debug mode programmatically."""
    global _debug_enabled
    _debug_enabled = enabled

    if enabled:
        logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG)


def is_verbose_enabled() -> bool:
    """Check if verbose mode is enabled (or debug, which implies verbose)."""
    return _verbose_enabled or _debug_enabled


def enable_verbose(enabled: bool = True) -> None:
    """Enable or disable verbose mode programmatically."""
    global _verbose_enabled
    _verbose_enabled = enabled


def format_field_prefix(field_path: str | None) -> str:
    """
    Format consistent field prefix for debug log lines.

    Examples:
        [field:settings.items[2].value]
        [field:--]
    """
    return f"[field:{field_path or '--'}]"


def _build_message(message: str, fields: dict[str, Any]) -> str:
    if not fields:
        return message
    field_strs = [f"{k}={_format_value(v)}" for k, v in fields.items()]
    return f"{message}: {', '.join(field_strs)}"


def _format_value(value: Any) -> str:
    """Format a value for debug output."""
    if isinstance(value, float):
        return f"{value:.6g}"
    if isinstance(value, (list, tuple)) and len(value) > 5:
        return f"[{len(value)} items]"
    return str(value)


def debug_log(field_path: str | None, message: str, **fields: Any) -> None:
    """
    Log a debug message with field prefix.

    Only logs if debug mode is enabled (SHOWIF_DEBUG=1 or --debug).

    Args:
        field_path: Path of the annotated field (or None)
        message: Log message
        **fields: Additional key=value pairs to include
    """
    if not _debug_enabled:
        return

    logger = logging.getLogger(LOGGER_NAME)
    logger.debug(f"{format_field_prefix(field_path)} {_build_message(message, fields)}")


def verbose_log(field_path: str | None, message: str, **fields: Any) -> None:
    """
    Log a verbose message with field prefix.

    Only logs if verbose or debug mode is enabled. Uses INFO level so it's
    visible with normal log handlers.
    """
    if not is_verbose_enabled():
        return

    logger = logging.getLogger(LOGGER_NAME)
    logger.info(f"{format_field_prefix(field_path)} {_build_message(message, fields)}")
