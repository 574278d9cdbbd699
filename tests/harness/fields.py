"""
SyntheticFields - Controlled field resolver for rule evaluation tests.

Provides a flat ``{path: value}`` view that mimics a host's field lookup
so rules can be evaluated with known inputs and known expected verdicts.

Usage:
    # Plain values (kind taken from the Python type)
    fields = SyntheticFields.with_fields({
        "enabled": True,
        "count": 10,
        "settings.items[2].enabled": False,
    })

    # Enum fields with an explicit name table
    fields = SyntheticFields.with_fields({
        "state": enum_field(1, ["Idle", "Running", "Stopped"]),
    })

    verdict = evaluate(rule, fields, field_path="settings.items[2].value")
    assert fields.lookups == ["enabled", "settings.items[2].enabled"]
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from src.showif.types import FieldKind, ResolvedField


@dataclass(frozen=True)
class _EnumSpec:
    index: int
    names: tuple


@dataclass(frozen=True)
class _RawSpec:
    kind: FieldKind
    value: Any


def enum_field(index: int, names) -> _EnumSpec:
    """Enum field with current ``index`` into ``names``."""
    return _EnumSpec(index=index, names=tuple(names))


def raw_field(kind: FieldKind, value: Any) -> _RawSpec:
    """Field reported with an explicit kind (e.g. OTHER for references)."""
    return _RawSpec(kind=kind, value=value)


@dataclass
class SyntheticFields:
    """
    Test resolver with controlled field values.

    Callable like any FieldResolver: ``fields(path)`` returns a
    ResolvedField or None. Every requested path is recorded in
    ``lookups`` in request order.
    """

    _fields: dict[str, Any] = field(default_factory=dict)
    lookups: list[str] = field(default_factory=list)

    @classmethod
    def with_fields(cls, fields: dict[str, Any]) -> "SyntheticFields":
        """
        Create a resolver over the given paths.

        Args:
            fields: ``{path: value}``; values may be plain Python values,
                ``enum_field(...)`` or ``raw_field(...)``
        """
        return cls(_fields=dict(fields))

    def __call__(self, path: str) -> Optional[ResolvedField]:
        self.lookups.append(path)
        if path not in self._fields:
            return None

        value = self._fields[path]
        if isinstance(value, _EnumSpec):
            return ResolvedField.enum(value.index, value.names, path)
        if isinstance(value, _RawSpec):
            return ResolvedField(kind=value.kind, value=value.value, path=path)
        return ResolvedField.of(value, path)
