"""
ShowIf rule model.

A Rule describes one conditional-visibility test: which field to look at,
what kind of value it holds, how to compare, and against what.

All convenience constructors normalize into the canonical
``{value_kind, comparison, expected}`` shape:

    show_if("enabled")                          # bool == True
    show_if("enabled", False)                   # bool == False
    show_if("mode", 1, 2)                       # int in {1, 2}
    show_if("threshold", 0.5)                   # float ~= 0.5
    show_if("label", "a", "b")                  # string in {"a", "b"}
    show_if("state", "Running", kind=ValueKind.ENUM)   # enum by name
    show_if("state", 2, kind=ValueKind.ENUM)           # enum by index
    show_if_not("mode", 0)                      # int != 0
    show_if_greater("count", 5)                 # int > 5

Construction does not validate semantics: an empty or mismatched expected
list is carried as-is and reported when the rule is evaluated. Only values
no expected list can hold (None, dicts, mixed types) raise TypeError.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable

from .types import Comparison, ValueKind


class ExpectedKind(str, Enum):
    """Tag of the populated expected-value list."""

    BOOLS = "bools"
    INTS = "ints"
    FLOATS = "floats"
    STRINGS = "strings"
    ENUM_NAMES = "enum_names"
    ENUM_INDICES = "enum_indices"


@dataclass(frozen=True)
class ExpectedSet:
    """Kind-tagged, ordered expected values."""

    kind: ExpectedKind
    values: tuple = ()

    def __len__(self) -> int:
        return len(self.values)

    @property
    def is_empty(self) -> bool:
        return not self.values

    def of(self, kind: ExpectedKind) -> tuple:
        """Values if this set carries ``kind``, else an empty tuple."""
        return self.values if self.kind == kind else ()


# Expected-list tag used for each rule kind when none is stated
_DEFAULT_EXPECTED = {
    ValueKind.BOOL: ExpectedKind.BOOLS,
    ValueKind.INT: ExpectedKind.INTS,
    ValueKind.FLOAT: ExpectedKind.FLOATS,
    ValueKind.STRING: ExpectedKind.STRINGS,
    ValueKind.ENUM: ExpectedKind.ENUM_NAMES,
}


@dataclass(frozen=True)
class Rule:
    """
    One conditional-visibility test attached to a field.

    Attributes:
        compared_field_name: Field to inspect (absolute path or sibling name)
        value_kind: Kind the author intends to compare
        comparison: How to compare
        expected: Values to compare against
    """
    compared_field_name: str
    value_kind: ValueKind = ValueKind.BOOL
    comparison: Comparison = Comparison.EQUALS
    expected: ExpectedSet = field(
        default_factory=lambda: ExpectedSet(ExpectedKind.BOOLS, (True,))
    )

    # -------------------------------------------------------------------------
    # Typed accessors (empty when the populated list has another tag)
    # -------------------------------------------------------------------------

    @property
    def expected_bools(self) -> tuple:
        return self.expected.of(ExpectedKind.BOOLS)

    @property
    def expected_ints(self) -> tuple:
        return self.expected.of(ExpectedKind.INTS)

    @property
    def expected_floats(self) -> tuple:
        return self.expected.of(ExpectedKind.FLOATS)

    @property
    def expected_strings(self) -> tuple:
        return self.expected.of(ExpectedKind.STRINGS)

    @property
    def expected_enum_names(self) -> tuple:
        return self.expected.of(ExpectedKind.ENUM_NAMES)

    @property
    def expected_enum_indices(self) -> tuple:
        return self.expected.of(ExpectedKind.ENUM_INDICES)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def create(
        cls,
        compared_field_name: str,
        value_kind: ValueKind,
        comparison: Comparison = Comparison.EQUALS,
        values: Iterable[Any] = (),
    ) -> "Rule":
        """
        Create a rule with an explicit kind.

        Args:
            compared_field_name: Field to inspect
            value_kind: Rule kind
            comparison: Comparison to apply
            values: Expected values (normalized to the kind's list)

        Raises:
            TypeError: If no expected list can carry the values
                (None, containers, mixed types)
        """
        value_kind = ValueKind(value_kind)
        if isinstance(values, str):
            values = (values,)
        values = tuple(values or ())
        return cls(
            compared_field_name=compared_field_name if compared_field_name is not None else "",
            value_kind=value_kind,
            comparison=Comparison(comparison),
            expected=_normalize_expected(value_kind, values),
        )

    @classmethod
    def from_dict(cls, data: dict) -> "Rule":
        """Create a rule from a configuration mapping (see loader)."""
        from .loader import parse_rule

        return parse_rule(data)

    def to_dict(self) -> dict:
        """Convert to the configuration mapping accepted by ``from_dict``."""
        return {
            "field": self.compared_field_name,
            "kind": self.value_kind.value,
            "op": self.comparison.value,
            "values": list(self.expected.values),
        }

    def __repr__(self) -> str:
        values = ", ".join(repr(v) for v in self.expected.values)
        return (
            f"Rule({self.compared_field_name!r} {self.value_kind.value} "
            f"{self.comparison.value} [{values}])"
        )


# =============================================================================
# Normalization
# =============================================================================

def infer_value_kind(values: tuple) -> ValueKind:
    """
    Infer the rule kind from expected values.

    - all bool -> BOOL
    - all int -> INT
    - int/float mix with at least one float -> FLOAT
    - all str -> STRING

    Raises:
        TypeError: For empty, mixed or unsupported values
    """
    if not values:
        raise TypeError("Cannot infer a value kind without expected values")

    if all(isinstance(v, bool) for v in values):
        return ValueKind.BOOL
    if any(isinstance(v, bool) for v in values):
        raise TypeError(f"Cannot mix bool with other values: {values!r}")
    if all(isinstance(v, int) for v in values):
        return ValueKind.INT
    if all(isinstance(v, (int, float)) for v in values):
        return ValueKind.FLOAT
    if all(isinstance(v, str) for v in values):
        return ValueKind.STRING
    raise TypeError(
        f"Unsupported expected values {values!r}; "
        "use bool, int, float or str values of a single kind"
    )


# Expected-list tag for values of an inferred kind
_INFERRED_EXPECTED = {
    ValueKind.BOOL: ExpectedKind.BOOLS,
    ValueKind.INT: ExpectedKind.INTS,
    ValueKind.FLOAT: ExpectedKind.FLOATS,
    ValueKind.STRING: ExpectedKind.STRINGS,
}


def _normalize_expected(value_kind: ValueKind, values: tuple) -> ExpectedSet:
    """
    Build the ExpectedSet for ``value_kind`` from raw values.

    Values that do not fit ``value_kind`` are kept under the tag of their
    own type, e.g. ``"5"`` on an INT rule lands in STRINGS. The kind's
    accessor then comes back empty and evaluation reports
    NO_EXPECTED_VALUES.

    Raises:
        TypeError: If no expected list can carry the values
    """
    if not values:
        return ExpectedSet(_DEFAULT_EXPECTED[value_kind], ())

    if value_kind == ValueKind.ENUM:
        if all(isinstance(v, str) for v in values):
            return ExpectedSet(ExpectedKind.ENUM_NAMES, values)
        if all(_is_int(v) for v in values):
            return ExpectedSet(ExpectedKind.ENUM_INDICES, tuple(int(v) for v in values))
    elif value_kind == ValueKind.BOOL:
        if all(isinstance(v, bool) for v in values):
            return ExpectedSet(ExpectedKind.BOOLS, values)
    elif value_kind == ValueKind.INT:
        if all(_is_int(v) for v in values):
            return ExpectedSet(ExpectedKind.INTS, tuple(int(v) for v in values))
    elif value_kind == ValueKind.FLOAT:
        if all(_is_number(v) for v in values):
            return ExpectedSet(ExpectedKind.FLOATS, tuple(float(v) for v in values))
    elif all(isinstance(v, str) for v in values):
        return ExpectedSet(ExpectedKind.STRINGS, values)

    return ExpectedSet(_INFERRED_EXPECTED[infer_value_kind(values)], values)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _build(
    compared_field_name: str,
    comparison: Comparison,
    values: tuple,
    kind: ValueKind | None,
) -> Rule:
    if kind is None:
        # No values: degrade to an empty int list, reported at evaluation
        kind = infer_value_kind(values) if values else ValueKind.INT
    return Rule.create(compared_field_name, kind, comparison, values)


# =============================================================================
# Convenience constructors
# =============================================================================

def show_if(
    compared_field_name: str,
    *values: Any,
    kind: ValueKind | None = None,
) -> Rule:
    """
    Show the field if ``compared_field_name`` equals any of ``values``.

    With no values the compared field is expected to be the bool True.
    """
    if not values and kind is None:
        return Rule.create(compared_field_name, ValueKind.BOOL, Comparison.EQUALS, (True,))
    return _build(compared_field_name, Comparison.EQUALS, values, kind)


def show_if_not(
    compared_field_name: str,
    *values: Any,
    kind: ValueKind | None = None,
) -> Rule:
    """
    Show the field if ``compared_field_name`` equals none of ``values``.

    With no values the compared field is expected not to be the bool True.
    """
    if not values and kind is None:
        return Rule.create(compared_field_name, ValueKind.BOOL, Comparison.NOT_EQUALS, (True,))
    return _build(compared_field_name, Comparison.NOT_EQUALS, values, kind)


def show_if_greater(compared_field_name: str, *values: Any, kind: ValueKind | None = None) -> Rule:
    """Show the field if the compared value is > the first of ``values``."""
    return _build(compared_field_name, Comparison.GREATER, values, kind)


def show_if_greater_or_equal(compared_field_name: str, *values: Any, kind: ValueKind | None = None) -> Rule:
    """Show the field if the compared value is >= the first of ``values``."""
    return _build(compared_field_name, Comparison.GREATER_OR_EQUAL, values, kind)


def show_if_less(compared_field_name: str, *values: Any, kind: ValueKind | None = None) -> Rule:
    """Show the field if the compared value is < the first of ``values``."""
    return _build(compared_field_name, Comparison.LESS, values, kind)


def show_if_less_or_equal(compared_field_name: str, *values: Any, kind: ValueKind | None = None) -> Rule:
    """Show the field if the compared value is <= the first of ``values``."""
    return _build(compared_field_name, Comparison.LESS_OR_EQUAL, values, kind)
