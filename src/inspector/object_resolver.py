"""
Field resolver over plain Python object graphs.

Resolves inspector paths such as ``settings.items[2].enabled`` against
nested dicts, lists/tuples, dataclasses and attribute objects.

Enum fields:
- Python ``enum.Enum`` members resolve with their class's member names
- ``EnumValue`` records carry an explicit name table and index (used for
  objects loaded from YAML, which has no enum type)

Usage:
    resolver = ObjectFieldResolver(settings)
    verdict = evaluate(rule, resolver, field_path="items[2].value")
"""

from __future__ import annotations

import dataclasses
import re
import typing
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Sequence

import yaml

from ..showif.types import FieldKind, ResolvedField

# One path segment: a name, or a bracketed index
_TOKEN_PATTERN = re.compile(r"([^.\[\]]+)|\[(\d+)\]")

# Keys marking an enum value in YAML object documents
ENUM_NAMES_KEY = "$enum"
ENUM_VALUE_KEY = "$value"

_MISSING = object()


@dataclass(frozen=True)
class EnumValue:
    """An enum field value with its name table."""
    names: tuple[str, ...]
    index: int

    @property
    def name(self) -> Optional[str]:
        if 0 <= self.index < len(self.names):
            return self.names[self.index]
        return None

    @classmethod
    def from_name(cls, names: Sequence[str], name: str) -> "EnumValue":
        """
        Create from a current label.

        Raises:
            ValueError: If ``name`` is not in ``names``
        """
        names = tuple(names)
        if name not in names:
            raise ValueError(f"'{name}' is not one of {list(names)}")
        return cls(names=names, index=names.index(name))


def parse_path(path: str) -> Optional[list[str | int]]:
    """
    Split a field path into name and index tokens.

    Examples:
        "enabled"                 -> ["enabled"]
        "settings.items[2].value" -> ["settings", "items", 2, "value"]

    Returns:
        Token list, or None if the path is malformed
    """
    if not path or path.startswith(".") or path.endswith(".") or ".." in path:
        return None

    tokens: list[str | int] = []
    pos = 0
    for match in _TOKEN_PATTERN.finditer(path):
        gap = path[pos:match.start()]
        if gap not in ("", "."):
            return None
        name, index = match.groups()
        if name is not None:
            if gap == "" and tokens:
                # Name directly after an index, e.g. "items[0]value"
                return None
            tokens.append(name)
        else:
            if gap == ".":
                # Index after a separator, e.g. "items.[0]"
                return None
            tokens.append(int(index))
        pos = match.end()

    if pos != len(path):
        return None
    return tokens or None


def _declared_float(owner: Any, name: str) -> bool:
    """True if ``owner`` is a dataclass declaring ``name`` as float."""
    if not dataclasses.is_dataclass(owner) or isinstance(owner, type):
        return False
    for f in dataclasses.fields(owner):
        if f.name != name:
            continue
        declared = f.type
        if isinstance(declared, str):
            try:
                declared = typing.get_type_hints(type(owner)).get(name, declared)
            except (NameError, TypeError):
                return declared == "float"
        return declared is float
    return False


def _step(current: Any, token: str | int) -> Any:
    if isinstance(token, int):
        if isinstance(current, (list, tuple)) and 0 <= token < len(current):
            return current[token]
        return _MISSING

    if isinstance(current, Mapping):
        return current.get(token, _MISSING)
    if token.startswith("_") or isinstance(current, (str, bytes, int, float, list, tuple)):
        return _MISSING
    return getattr(current, token, _MISSING)


class ObjectFieldResolver:
    """
    FieldResolver over a root object.

    Callable: ``resolver(path)`` returns a ResolvedField or None.
    """

    def __init__(self, root: Any):
        self.root = root

    def resolve(self, path: str) -> Optional[ResolvedField]:
        """Resolve ``path`` from the root; None if any segment is missing."""
        tokens = parse_path(path)
        if tokens is None:
            return None

        owner: Any = None
        current = self.root
        for token in tokens:
            owner = current
            current = _step(current, token)
            if current is _MISSING:
                return None

        if isinstance(current, EnumValue):
            return ResolvedField.enum(current.index, current.names, path)

        leaf = tokens[-1]
        if (
            isinstance(leaf, str)
            and isinstance(current, int)
            and not isinstance(current, bool)
            and _declared_float(owner, leaf)
        ):
            return ResolvedField(kind=FieldKind.FLOAT, value=float(current), path=path)

        return ResolvedField.of(current, path)

    __call__ = resolve


# =============================================================================
# YAML object documents
# =============================================================================

def _convert_enums(node: Any) -> Any:
    """Replace ``{$enum: [...], $value: ...}`` mappings with EnumValue."""
    if isinstance(node, dict):
        if ENUM_NAMES_KEY in node:
            names = node[ENUM_NAMES_KEY]
            value = node.get(ENUM_VALUE_KEY, 0)
            if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
                raise ValueError(f"'{ENUM_NAMES_KEY}' must be a list of names")
            if isinstance(value, str):
                return EnumValue.from_name(names, value)
            if isinstance(value, int) and not isinstance(value, bool):
                return EnumValue(names=tuple(names), index=value)
            raise ValueError(f"'{ENUM_VALUE_KEY}' must be a name or an index, got {value!r}")
        return {key: _convert_enums(value) for key, value in node.items()}
    if isinstance(node, list):
        return [_convert_enums(item) for item in node]
    return node


def load_object(path: str | Path) -> Any:
    """
    Load an object document from YAML.

    Enum fields are written as:
        state: {$enum: [Idle, Running, Stopped], $value: Running}

    YAML has no declared field types, so a field's kind is the kind of its
    scalar: ``speed: 5`` is an int and fails a float rule with a type
    mismatch. Write float fields with a decimal point (``speed: 5.0``).

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If an enum mapping is malformed
        yaml.YAMLError: If the document is not valid YAML
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    return _convert_enums(raw if raw is not None else {})
