"""
Kind handlers for rule evaluation.

Strict kind contracts:
- BOOL: bool fields only; eq/ne against the first expected bool
- INT: int fields, or enum fields compared by current index
- FLOAT: float fields; approximate equality, exact ordering
- STRING: string fields, or enum fields compared by current name
- ENUM: enum fields; expected names or expected indices

Equality is any-of (eq) / none-of (ne) over the expected list. Ordering
compares against the first expected value only.

Every handler returns an EvalResult with a ReasonCode.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

from ..registry import get_kind_spec, is_comparison_supported
from ..rule import Rule
from ..types import Comparison, EvalResult, FieldKind, ReasonCode, ResolvedField, ValueKind

# Approximate float equality: relative epsilon with a floor of eight times
# the smallest positive single-precision subnormal.
FLOAT_EPSILON = 1e-6
FLOAT_MIN_TOLERANCE = 8 * 1.401298e-45

MESSAGE_PREFIX = "ShowIf"


def approximately(a: float, b: float) -> bool:
    """True if ``a`` and ``b`` are equal within the float epsilon."""
    return abs(b - a) < max(FLOAT_EPSILON * max(abs(a), abs(b)), FLOAT_MIN_TOLERANCE)


def any_int_match(value: int, expected: Sequence[int]) -> bool:
    return any(e == value for e in expected)


def any_float_match(value: float, expected: Sequence[float]) -> bool:
    return any(approximately(e, value) for e in expected)


def any_string_match(value: str, expected: Sequence[str]) -> bool:
    """Exact, case-sensitive, ordinal match."""
    return any(e == value for e in expected)


def any_enum_name_match(
    enum_index: int,
    enum_names: Sequence[str],
    expected_names: Sequence[str],
) -> tuple[bool, bool]:
    """
    Match expected enum names against the current index.

    Returns:
        (matched, found_any): matched is True if the current index is the
        position of any expected name; found_any is False when none of the
        expected names exist in the name table.
    """
    found_any = False
    for expected in expected_names:
        expected = expected if expected is not None else ""
        for name_index, name in enumerate(enum_names):
            if name != expected:
                continue
            found_any = True
            if name_index == enum_index:
                return True, True
    return False, found_any


def _label(value: Any) -> str:
    return str(getattr(value, "value", value))


def _error(reason: ReasonCode, message: str, compared: ResolvedField | None, comparison) -> EvalResult:
    return EvalResult.failure(
        reason,
        f"{MESSAGE_PREFIX}: {message}",
        field_path=compared.path if compared is not None else None,
        comparison=comparison,
    )


def type_mismatch(kind_label: str, compared: ResolvedField, comparison) -> EvalResult:
    return _error(
        ReasonCode.TYPE_MISMATCH,
        f"Expected {kind_label} on '{compared.name}'.",
        compared,
        comparison,
    )


def no_expected_values(compared: ResolvedField, comparison, what: str = "values") -> EvalResult:
    return _error(
        ReasonCode.NO_EXPECTED_VALUES,
        f"No expected {what} provided for '{compared.name}'.",
        compared,
        comparison,
    )


def unsupported_comparison(kind: ValueKind, compared: ResolvedField, comparison) -> EvalResult:
    spec = get_kind_spec(kind)
    kind_label = spec.label if spec else _label(kind)
    return _error(
        ReasonCode.UNSUPPORTED_COMPARISON,
        f"Unsupported comparison '{_label(comparison)}' for {kind_label} on '{compared.name}'.",
        compared,
        comparison,
    )


# =============================================================================
# Value comparisons
# =============================================================================

def _compare(
    value: Any,
    comparison: Comparison,
    expected: Sequence[Any],
    any_match: Callable[[Any, Sequence[Any]], bool],
) -> bool:
    """Apply ``comparison``; caller has checked the kind supports it."""
    if comparison == Comparison.EQUALS:
        return any_match(value, expected)
    if comparison == Comparison.NOT_EQUALS:
        return not any_match(value, expected)

    threshold = expected[0]
    if comparison == Comparison.GREATER:
        return value > threshold
    if comparison == Comparison.GREATER_OR_EQUAL:
        return value >= threshold
    if comparison == Comparison.LESS:
        return value < threshold
    return value <= threshold


def eval_int_values(
    value: int,
    comparison: Comparison,
    expected: Sequence[int],
    compared: ResolvedField,
    what: str = "values",
) -> EvalResult:
    """Evaluate an integer (or enum index) against expected ints."""
    if not expected:
        return no_expected_values(compared, comparison, what)
    if not is_comparison_supported(ValueKind.INT, comparison):
        return unsupported_comparison(ValueKind.INT, compared, comparison)

    met = _compare(value, comparison, expected, any_int_match)
    return EvalResult.success(met, compared.path, comparison)


def eval_float_values(
    value: float,
    comparison: Comparison,
    expected: Sequence[float],
    compared: ResolvedField,
) -> EvalResult:
    """Evaluate a float against expected floats."""
    if not expected:
        return no_expected_values(compared, comparison)
    if not is_comparison_supported(ValueKind.FLOAT, comparison):
        return unsupported_comparison(ValueKind.FLOAT, compared, comparison)

    met = _compare(value, comparison, expected, any_float_match)
    return EvalResult.success(met, compared.path, comparison)


def eval_string_values(
    value: str,
    comparison: Comparison,
    expected: Sequence[str],
    compared: ResolvedField,
) -> EvalResult:
    """Evaluate a string against expected strings (eq/ne only)."""
    if not expected:
        return no_expected_values(compared, comparison)
    if not is_comparison_supported(ValueKind.STRING, comparison):
        return unsupported_comparison(ValueKind.STRING, compared, comparison)

    met = _compare(value, comparison, expected, any_string_match)
    return EvalResult.success(met, compared.path, comparison)


def eval_enum_names(
    comparison: Comparison,
    expected_names: Sequence[str],
    compared: ResolvedField,
    kind: ValueKind = ValueKind.ENUM,
) -> EvalResult:
    """
    Evaluate an enum field by name.

    Expected names that exist nowhere in the name table are a configuration
    mistake and yield ENUM_VALUE_NOT_FOUND rather than a false result.
    """
    if not expected_names:
        return no_expected_values(compared, comparison, "enum names")
    if not is_comparison_supported(kind, comparison):
        return unsupported_comparison(kind, compared, comparison)

    matched, found_any = any_enum_name_match(
        compared.enum_index, compared.enum_names, expected_names
    )
    if not found_any:
        joined = ", ".join(n if n is not None else "" for n in expected_names)
        return _error(
            ReasonCode.ENUM_VALUE_NOT_FOUND,
            f"Enum value(s) '{joined}' not found on '{compared.name}'.",
            compared,
            comparison,
        )

    met = matched if comparison == Comparison.EQUALS else not matched
    return EvalResult.success(met, compared.path, comparison)


def _require_enum_names(compared: ResolvedField, comparison) -> EvalResult | None:
    if not compared.enum_names:
        return _error(
            ReasonCode.ENUM_HAS_NO_NAMES,
            f"Enum on '{compared.name}' has no names.",
            compared,
            comparison,
        )
    return None


# =============================================================================
# Rule kind handlers
# =============================================================================

def eval_bool_rule(rule: Rule, compared: ResolvedField) -> EvalResult:
    """BOOL: compare against the rule's single expected bool."""
    comparison = rule.comparison
    if compared.kind != FieldKind.BOOL:
        return type_mismatch("bool", compared, comparison)

    expected = rule.expected_bools
    if not expected:
        return no_expected_values(compared, comparison)
    if not is_comparison_supported(ValueKind.BOOL, comparison):
        return unsupported_comparison(ValueKind.BOOL, compared, comparison)

    value = bool(compared.value)
    if comparison == Comparison.EQUALS:
        met = value == expected[0]
    else:
        met = value != expected[0]
    return EvalResult.success(met, compared.path, comparison)


def eval_int_rule(rule: Rule, compared: ResolvedField) -> EvalResult:
    """INT: int fields, or enum fields by current index."""
    if compared.kind == FieldKind.ENUM:
        value = compared.enum_index
    elif compared.kind == FieldKind.INT:
        value = int(compared.value)
    else:
        return type_mismatch("int", compared, rule.comparison)

    return eval_int_values(value, rule.comparison, rule.expected_ints, compared)


def eval_float_rule(rule: Rule, compared: ResolvedField) -> EvalResult:
    """FLOAT: float fields only."""
    if compared.kind != FieldKind.FLOAT:
        return type_mismatch("float", compared, rule.comparison)

    return eval_float_values(
        float(compared.value), rule.comparison, rule.expected_floats, compared
    )


def eval_string_rule(rule: Rule, compared: ResolvedField) -> EvalResult:
    """STRING: string fields, or enum fields by current name."""
    comparison = rule.comparison
    if compared.kind == FieldKind.STRING:
        value = compared.value if compared.value is not None else ""
        return eval_string_values(value, comparison, rule.expected_strings, compared)

    if compared.kind == FieldKind.ENUM:
        if not rule.expected_strings:
            return no_expected_values(compared, comparison)
        missing_names = _require_enum_names(compared, comparison)
        if missing_names is not None:
            return missing_names
        return eval_enum_names(
            comparison, rule.expected_strings, compared, kind=ValueKind.STRING
        )

    return type_mismatch("string", compared, comparison)


def eval_enum_rule(rule: Rule, compared: ResolvedField) -> EvalResult:
    """ENUM: enum fields by expected names or expected indices."""
    comparison = rule.comparison
    if compared.kind != FieldKind.ENUM:
        return type_mismatch("enum", compared, comparison)

    missing_names = _require_enum_names(compared, comparison)
    if missing_names is not None:
        return missing_names

    if rule.expected_enum_names:
        return eval_enum_names(comparison, rule.expected_enum_names, compared)

    if rule.expected_enum_indices:
        if not is_comparison_supported(ValueKind.ENUM, comparison):
            return unsupported_comparison(ValueKind.ENUM, compared, comparison)
        return eval_int_values(
            compared.enum_index, comparison, rule.expected_enum_indices, compared
        )

    return no_expected_values(compared, comparison, "enum values")


# Kind dispatch table
KIND_HANDLERS: dict[ValueKind, Callable[[Rule, ResolvedField], EvalResult]] = {
    ValueKind.BOOL: eval_bool_rule,
    ValueKind.INT: eval_int_rule,
    ValueKind.FLOAT: eval_float_rule,
    ValueKind.STRING: eval_string_rule,
    ValueKind.ENUM: eval_enum_rule,
}
