"""
Rule evaluation type definitions.

Enums and dataclasses shared by rule construction, field resolution and
evaluation. Everything here is immutable so verdicts can be compared and
cached by value.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Any


class ValueKind(str, Enum):
    """
    Semantic type the rule author intends to compare.

    String-valued so rule files can name kinds directly.
    """

    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    ENUM = "enum"


class Comparison(str, Enum):
    """Supported comparisons. Kind-specific subsets live in the registry."""

    EQUALS = "eq"
    NOT_EQUALS = "ne"
    GREATER = "gt"
    GREATER_OR_EQUAL = "ge"
    LESS = "lt"
    LESS_OR_EQUAL = "le"


class FieldKind(IntEnum):
    """
    Kind of a resolved field, as reported by the host.

    Mirrors ValueKind plus OTHER for fields no rule kind can handle
    (object references, vectors, nested records).
    """

    BOOL = auto()
    INT = auto()
    FLOAT = auto()
    STRING = auto()
    ENUM = auto()
    OTHER = auto()

    @classmethod
    def from_value(cls, value: Any) -> "FieldKind":
        """
        Determine FieldKind from a Python value.

        bool is checked before int since bool subclasses int.
        """
        if isinstance(value, bool):
            return cls.BOOL
        if isinstance(value, enum.Enum):
            return cls.ENUM
        if isinstance(value, int):
            return cls.INT
        if isinstance(value, float):
            return cls.FLOAT
        if isinstance(value, str):
            return cls.STRING
        return cls.OTHER


class ReasonCode(IntEnum):
    """
    Reason codes for rule evaluation outcomes.

    Every evaluation carries a ReasonCode alongside its human-readable
    message. OK covers both "condition met" and "condition not met".
    """

    OK = 0

    # Malformed rule
    EMPTY_FIELD_NAME = auto()
    NO_EXPECTED_VALUES = auto()

    # Unresolvable reference
    FIELD_NOT_FOUND = auto()

    # Type mismatch between rule kind and resolved field
    TYPE_MISMATCH = auto()
    ENUM_HAS_NO_NAMES = auto()
    ENUM_VALUE_NOT_FOUND = auto()

    # Comparison not defined for the kind
    UNSUPPORTED_COMPARISON = auto()
    UNSUPPORTED_VALUE_TYPE = auto()


@dataclass(frozen=True)
class ResolvedField:
    """
    A field located by a resolver, with its current value.

    For ENUM fields ``value`` is the current index into ``enum_names``.
    """

    kind: FieldKind
    value: Any
    path: str
    enum_names: tuple[str, ...] = ()

    @property
    def name(self) -> str:
        """Leaf name of the field (last path segment), used in messages."""
        leaf = self.path.rsplit(".", 1)[-1]
        return leaf or self.path

    @property
    def enum_index(self) -> int:
        """Current enum index (-1 for non-enum fields)."""
        if self.kind != FieldKind.ENUM:
            return -1
        return int(self.value)

    @property
    def enum_name(self) -> str | None:
        """Current enum label, or None when the index is outside the name table."""
        index = self.enum_index
        if 0 <= index < len(self.enum_names):
            return self.enum_names[index]
        return None

    @classmethod
    def of(cls, value: Any, path: str) -> "ResolvedField":
        """
        Create a ResolvedField from a plain Python value.

        Python enum members resolve as ENUM with their class's member
        names as the name table. Values outside the member list (composite
        ``enum.Flag`` values) get index -1 and match no name.
        """
        if isinstance(value, enum.Enum):
            members = list(type(value))
            index = members.index(value) if value in members else -1
            return cls.enum(
                index,
                [member.name for member in members],
                path,
            )
        return cls(kind=FieldKind.from_value(value), value=value, path=path)

    @classmethod
    def enum(cls, index: int, names, path: str) -> "ResolvedField":
        """Create an ENUM field from its current index and name table."""
        return cls(
            kind=FieldKind.ENUM,
            value=int(index),
            path=path,
            enum_names=tuple(names or ()),
        )


class VerdictState(str, Enum):
    """The three presentation outcomes."""

    VISIBLE = "visible"
    HIDDEN = "hidden"
    ERROR = "error"


@dataclass(frozen=True)
class Verdict:
    """
    Result of evaluating one rule.

    Value-equal: evaluating the same rule against the same field state
    always yields an equal Verdict.
    """

    state: VerdictState
    message: str = ""
    reason: ReasonCode = ReasonCode.OK

    @property
    def is_visible(self) -> bool:
        return self.state == VerdictState.VISIBLE

    @property
    def is_hidden(self) -> bool:
        return self.state == VerdictState.HIDDEN

    @property
    def is_error(self) -> bool:
        return self.state == VerdictState.ERROR

    @classmethod
    def visible(cls) -> "Verdict":
        return cls(VerdictState.VISIBLE)

    @classmethod
    def hidden(cls) -> "Verdict":
        return cls(VerdictState.HIDDEN)

    @classmethod
    def error(cls, reason: ReasonCode, message: str) -> "Verdict":
        return cls(VerdictState.ERROR, message=message, reason=reason)

    def to_dict(self) -> dict:
        """Convert to dict for logging/serialization."""
        return {
            "state": self.state.value,
            "reason": self.reason.name,
            "message": self.message,
        }


@dataclass(frozen=True)
class EvalResult:
    """
    Internal outcome of a kind handler.

    Contains:
    - met: Whether the condition holds
    - reason: OK, or the failure category
    - message: Human-readable explanation for failures
    """

    met: bool
    reason: ReasonCode
    field_path: str | None = None
    comparison: Comparison | None = None
    message: str | None = None

    @property
    def is_error(self) -> bool:
        return self.reason != ReasonCode.OK

    @classmethod
    def success(
        cls,
        met: bool,
        field_path: str,
        comparison: Comparison,
    ) -> "EvalResult":
        """Create a result for a condition that evaluated cleanly."""
        return cls(
            met=met,
            reason=ReasonCode.OK,
            field_path=field_path,
            comparison=comparison,
        )

    @classmethod
    def failure(
        cls,
        reason: ReasonCode,
        message: str,
        field_path: str | None = None,
        comparison: Comparison | None = None,
    ) -> "EvalResult":
        """Create a failure result (configuration or type error)."""
        return cls(
            met=False,
            reason=reason,
            field_path=field_path,
            comparison=comparison,
            message=message,
        )

    def to_verdict(self) -> Verdict:
        """Map to the presentation verdict."""
        if self.is_error:
            return Verdict.error(self.reason, self.message or "")
        return Verdict.visible() if self.met else Verdict.hidden()
