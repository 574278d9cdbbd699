"""
Rule file parser: YAML to Rule conversion.

YAML Schema:
```yaml
rules:
  settings.items[2].value:
    field: enabled
  advanced.threshold:
    field: mode
    kind: enum
    op: ne
    values: [Disabled]
  speed:
    - field: count
      op: ">"
      values: 5
    - field: ignored        # only the first rule of a field is evaluated
```

``kind`` is inferred from ``values`` when omitted, ``op`` defaults to
``eq`` and a missing ``values`` means the bool True.

Usage:
    rules = load_rules("rules.yaml")
    rule = parse_rule({"field": "enabled", "values": [True]})
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .registry import get_canonical_comparison, get_canonical_kind
from .rule import Rule, infer_value_kind
from .types import Comparison, ValueKind


class RuleConfigError(ValueError):
    """Raised when a rule document cannot be parsed."""


_RULE_KEYS = frozenset({"field", "kind", "op", "values"})


def parse_rule(data: Any) -> Rule:
    """
    Parse a single rule mapping.

    Args:
        data: Mapping with ``field`` and optional ``kind``/``op``/``values``

    Returns:
        Rule (semantic problems are left for evaluation to report)

    Raises:
        RuleConfigError: If the mapping is malformed
    """
    if not isinstance(data, dict):
        raise RuleConfigError(
            f"Rule must be a mapping, got {type(data).__name__}"
        )

    unknown = set(data) - _RULE_KEYS
    if unknown:
        raise RuleConfigError(
            f"Unknown rule keys: {sorted(unknown)}. "
            f"Valid keys: {sorted(_RULE_KEYS)}"
        )

    if "field" not in data:
        raise RuleConfigError("Rule is missing 'field'")
    field_name = data["field"]
    if field_name is None:
        field_name = ""
    if not isinstance(field_name, str):
        raise RuleConfigError(
            f"Rule 'field' must be a string, got {type(field_name).__name__}"
        )

    op = data.get("op", Comparison.EQUALS.value)
    comparison = get_canonical_comparison(op)
    if comparison is None:
        raise RuleConfigError(f"Unknown comparison '{op}'")

    if "values" in data:
        raw_values = data["values"]
        if raw_values is None:
            values: tuple = ()
        elif isinstance(raw_values, (list, tuple)):
            values = tuple(raw_values)
        else:
            values = (raw_values,)
    else:
        values = (True,) if "kind" not in data else ()

    if "kind" in data:
        kind = get_canonical_kind(data["kind"])
        if kind is None:
            raise RuleConfigError(f"Unknown value kind '{data['kind']}'")
    elif values:
        try:
            kind = infer_value_kind(values)
        except TypeError as e:
            raise RuleConfigError(str(e)) from e
    else:
        kind = ValueKind.INT

    try:
        return Rule.create(field_name, kind, comparison, values)
    except TypeError as e:
        raise RuleConfigError(f"Rule on '{field_name}': {e}") from e


def parse_rules(data: Any) -> dict[str, list[Rule]]:
    """
    Parse a rule document into ``{annotated field path: [rules]}``.

    Each field maps to one rule mapping or a list of them; order is kept.
    """
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuleConfigError("Rule document must be a mapping")

    section = data.get("rules", {})
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise RuleConfigError("'rules' must map field paths to rules")

    parsed: dict[str, list[Rule]] = {}
    for field_path, entries in section.items():
        if isinstance(entries, dict):
            entries = [entries]
        if not isinstance(entries, list):
            raise RuleConfigError(
                f"Rules for '{field_path}' must be a mapping or a list"
            )
        parsed[str(field_path)] = [parse_rule(entry) for entry in entries]
    return parsed


def load_rules(path: str | Path) -> dict[str, list[Rule]]:
    """
    Load a rule document from a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist
        RuleConfigError: If the document is malformed
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise RuleConfigError(f"Invalid YAML in {path}: {e}") from e
    return parse_rules(raw)
