"""
Comparison Registry - Single source of truth for kind/comparison legality.

Used by:
- Kind handlers (reject comparisons a kind does not define)
- Rule file parsing (canonical comparison names and aliases)

Adding a comparison or changing a kind's legal subset requires updating
this registry only.
"""

from dataclasses import dataclass
from typing import FrozenSet, Optional

from .types import Comparison, ValueKind


EQUALITY_COMPARISONS: FrozenSet[Comparison] = frozenset({
    Comparison.EQUALS,
    Comparison.NOT_EQUALS,
})

ORDERING_COMPARISONS: FrozenSet[Comparison] = frozenset({
    Comparison.GREATER,
    Comparison.GREATER_OR_EQUAL,
    Comparison.LESS,
    Comparison.LESS_OR_EQUAL,
})

ALL_COMPARISONS: FrozenSet[Comparison] = EQUALITY_COMPARISONS | ORDERING_COMPARISONS


@dataclass(frozen=True)
class KindSpec:
    """
    Specification for a single value kind.

    Attributes:
        kind: The value kind
        label: Name used in error messages
        comparisons: Comparisons the kind accepts
    """
    kind: ValueKind
    label: str
    comparisons: FrozenSet[Comparison]

    @property
    def supports_ordering(self) -> bool:
        return bool(self.comparisons & ORDERING_COMPARISONS)


KIND_REGISTRY = {
    ValueKind.BOOL: KindSpec(ValueKind.BOOL, "bool", EQUALITY_COMPARISONS),
    ValueKind.INT: KindSpec(ValueKind.INT, "int", ALL_COMPARISONS),
    ValueKind.FLOAT: KindSpec(ValueKind.FLOAT, "float", ALL_COMPARISONS),
    ValueKind.STRING: KindSpec(ValueKind.STRING, "string", EQUALITY_COMPARISONS),
    ValueKind.ENUM: KindSpec(ValueKind.ENUM, "enum", EQUALITY_COMPARISONS),
}


# Textual forms accepted in rule files
COMPARISON_ALIASES = {
    "eq": Comparison.EQUALS,
    "==": Comparison.EQUALS,
    "equals": Comparison.EQUALS,
    "ne": Comparison.NOT_EQUALS,
    "!=": Comparison.NOT_EQUALS,
    "neq": Comparison.NOT_EQUALS,
    "not_equals": Comparison.NOT_EQUALS,
    "gt": Comparison.GREATER,
    ">": Comparison.GREATER,
    "greater": Comparison.GREATER,
    "ge": Comparison.GREATER_OR_EQUAL,
    "gte": Comparison.GREATER_OR_EQUAL,
    ">=": Comparison.GREATER_OR_EQUAL,
    "greater_or_equal": Comparison.GREATER_OR_EQUAL,
    "lt": Comparison.LESS,
    "<": Comparison.LESS,
    "less": Comparison.LESS,
    "le": Comparison.LESS_OR_EQUAL,
    "lte": Comparison.LESS_OR_EQUAL,
    "<=": Comparison.LESS_OR_EQUAL,
    "less_or_equal": Comparison.LESS_OR_EQUAL,
}

KIND_ALIASES = {
    "bool": ValueKind.BOOL,
    "boolean": ValueKind.BOOL,
    "int": ValueKind.INT,
    "integer": ValueKind.INT,
    "float": ValueKind.FLOAT,
    "number": ValueKind.FLOAT,
    "string": ValueKind.STRING,
    "str": ValueKind.STRING,
    "enum": ValueKind.ENUM,
}


def get_kind_spec(kind) -> Optional[KindSpec]:
    """
    Get kind specification from registry.

    Returns:
        KindSpec if known, None otherwise
    """
    try:
        return KIND_REGISTRY.get(ValueKind(kind))
    except ValueError:
        return None


def is_comparison_supported(kind: ValueKind, comparison: Comparison) -> bool:
    """Check whether ``kind`` defines ``comparison``."""
    spec = get_kind_spec(kind)
    return spec is not None and comparison in spec.comparisons


def get_canonical_comparison(name) -> Optional[Comparison]:
    """
    Get canonical Comparison (resolves aliases, case-insensitive).

    Returns:
        Comparison if known, None if unknown
    """
    if isinstance(name, Comparison):
        return name
    if not isinstance(name, str):
        return None
    return COMPARISON_ALIASES.get(name.strip().lower())


def get_canonical_kind(name) -> Optional[ValueKind]:
    """Get canonical ValueKind (resolves aliases, case-insensitive)."""
    if isinstance(name, ValueKind):
        return name
    if not isinstance(name, str):
        return None
    return KIND_ALIASES.get(name.strip().lower())
