"""
Compared-field resolution.

A rule names its compared field either by absolute path or by a sibling
name relative to the annotated field:

    annotated field:  settings.items[2].value
    rule field:       enabled
    tried in order:   "enabled", then "settings.items[2].enabled"
"""

from __future__ import annotations

from typing import Optional

from ..types import ResolvedField
from .protocols import FieldResolver

PATH_SEPARATOR = "."


def sibling_path(field_path: str, compared_field_name: str) -> Optional[str]:
    """
    Replace the last segment of ``field_path`` with ``compared_field_name``.

    Returns:
        Sibling path, or None when ``field_path`` has no separator
    """
    if not field_path:
        return None
    last_sep = field_path.rfind(PATH_SEPARATOR)
    if last_sep < 0:
        return None
    return f"{field_path[:last_sep + 1]}{compared_field_name}"


def find_compared_field(
    resolve: FieldResolver,
    compared_field_name: str,
    field_path: str = "",
) -> Optional[ResolvedField]:
    """
    Resolve the compared field: literal name first, then sibling path.

    Args:
        resolve: Host field resolver
        compared_field_name: Name from the rule
        field_path: Path of the annotated field (for sibling lookup)

    Returns:
        ResolvedField, or None if neither lookup succeeds
    """
    compared = resolve(compared_field_name)
    if compared is not None:
        return compared

    sibling = sibling_path(field_path, compared_field_name)
    if sibling is None:
        return None
    return resolve(sibling)
