"""
ShowIf rule module for conditional field visibility.

Design principles:
- Rules are immutable values; construction never validates semantics
- Evaluation is pure and reports every failure as an ERROR verdict
- ReasonCode for every evaluation outcome
- The host's object model is reached only through a FieldResolver
"""

from .types import (
    ValueKind,
    Comparison,
    FieldKind,
    ReasonCode,
    ResolvedField,
    Verdict,
    VerdictState,
    EvalResult,
)
from .rule import (
    Rule,
    ExpectedSet,
    ExpectedKind,
    show_if,
    show_if_not,
    show_if_greater,
    show_if_greater_or_equal,
    show_if_less,
    show_if_less_or_equal,
)
from .registry import (
    KindSpec,
    KIND_REGISTRY,
    get_kind_spec,
    is_comparison_supported,
    get_canonical_comparison,
    get_canonical_kind,
)
from .loader import RuleConfigError, parse_rule, parse_rules, load_rules
from .evaluation import RuleEvaluator, evaluate, evaluate_first, FieldResolver

__all__ = [
    # Types
    "ValueKind",
    "Comparison",
    "FieldKind",
    "ReasonCode",
    "ResolvedField",
    "Verdict",
    "VerdictState",
    "EvalResult",
    # Rules
    "Rule",
    "ExpectedSet",
    "ExpectedKind",
    "show_if",
    "show_if_not",
    "show_if_greater",
    "show_if_greater_or_equal",
    "show_if_less",
    "show_if_less_or_equal",
    # Registry
    "KindSpec",
    "KIND_REGISTRY",
    "get_kind_spec",
    "is_comparison_supported",
    "get_canonical_comparison",
    "get_canonical_kind",
    # Rule files
    "RuleConfigError",
    "parse_rule",
    "parse_rules",
    "load_rules",
    # Evaluation
    "RuleEvaluator",
    "evaluate",
    "evaluate_first",
    "FieldResolver",
]
