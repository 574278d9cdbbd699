"""
ShowIf Rule Evaluation Package.

- core.py: RuleEvaluator class and evaluate() entry points
- kind_ops.py: per-kind handlers and comparison helpers
- resolve.py: literal-then-sibling compared-field lookup
- protocols.py: FieldResolver contract

Usage:
    from src.showif.evaluation import RuleEvaluator, evaluate

    verdict = evaluate(rule, resolver, field_path="settings.value")
"""

from .core import RuleEvaluator, evaluate, evaluate_first
from .kind_ops import FLOAT_EPSILON, approximately
from .protocols import FieldResolver
from .resolve import find_compared_field, sibling_path

__all__ = [
    "RuleEvaluator",
    "evaluate",
    "evaluate_first",
    "FieldResolver",
    "find_compared_field",
    "sibling_path",
    "approximately",
    "FLOAT_EPSILON",
]
