"""
ShowIf rule evaluator.

Evaluates a Rule against the host's fields and produces a Verdict:

    VISIBLE  condition met
    HIDDEN   condition not met
    ERROR    malformed rule, missing field, kind mismatch or unsupported
             comparison (reported with a message, never raised)

Key Features:
- Literal-then-sibling resolution of the compared field
- Kind dispatch through a handler table
- Pure and stateless: identical inputs give equal verdicts

Usage:
    evaluator = RuleEvaluator()
    verdict = evaluator.evaluate(rule, resolver, field_path="settings.value")
"""

from __future__ import annotations

from typing import Sequence

from ...utils.debug import debug_log
from ..rule import Rule
from ..types import EvalResult, ReasonCode, Verdict
from .kind_ops import KIND_HANDLERS, MESSAGE_PREFIX
from .protocols import FieldResolver
from .resolve import find_compared_field


class RuleEvaluator:
    """
    Evaluates ShowIf rules through an injected field resolver.

    Thread-safe and stateless - can be reused across evaluations.

    Example:
        evaluator = RuleEvaluator()

        rule = show_if("mode", "Advanced", kind=ValueKind.ENUM)
        verdict = evaluator.evaluate(rule, resolver, "settings.threshold")
        if verdict.is_error:
            ...
    """

    def evaluate(
        self,
        rule: Rule,
        resolve: FieldResolver,
        field_path: str = "",
    ) -> Verdict:
        """
        Evaluate one rule.

        Args:
            rule: The rule to evaluate.
            resolve: Resolver returning a ResolvedField or None for a path.
            field_path: Path of the annotated field, for sibling lookup.

        Returns:
            Verdict (VISIBLE, HIDDEN or ERROR).
        """
        result = self.evaluate_result(rule, resolve, field_path)
        verdict = result.to_verdict()
        if verdict.is_error:
            debug_log(
                field_path or None,
                "Rule error",
                rule=repr(rule),
                reason=verdict.reason.name,
            )
        return verdict

    def evaluate_result(
        self,
        rule: Rule,
        resolve: FieldResolver,
        field_path: str = "",
    ) -> EvalResult:
        """Evaluate one rule, returning the internal EvalResult."""
        name = rule.compared_field_name
        if not name or not name.strip():
            return EvalResult.failure(
                ReasonCode.EMPTY_FIELD_NAME,
                f"{MESSAGE_PREFIX}: Compared field name is empty.",
                comparison=rule.comparison,
            )

        compared = find_compared_field(resolve, name, field_path)
        if compared is None:
            return EvalResult.failure(
                ReasonCode.FIELD_NOT_FOUND,
                f"{MESSAGE_PREFIX}: Could not find '{name}'.",
                field_path=name,
                comparison=rule.comparison,
            )

        handler = KIND_HANDLERS.get(rule.value_kind)
        if handler is None:
            return EvalResult.failure(
                ReasonCode.UNSUPPORTED_VALUE_TYPE,
                f"{MESSAGE_PREFIX}: Unsupported value type '{rule.value_kind}' for '{compared.name}'.",
                field_path=compared.path,
                comparison=rule.comparison,
            )

        return handler(rule, compared)

    def evaluate_first(
        self,
        rules: Sequence[Rule],
        resolve: FieldResolver,
        field_path: str = "",
    ) -> Verdict:
        """
        Evaluate the first of several rules attached to one field.

        Rules are not combined; any rule after the first is ignored.
        A field without rules is always visible.
        """
        if not rules:
            return Verdict.visible()
        if len(rules) > 1:
            debug_log(
                field_path or None,
                "Ignoring extra rules",
                evaluated=repr(rules[0]),
                ignored=len(rules) - 1,
            )
        return self.evaluate(rules[0], resolve, field_path)


_default_evaluator = RuleEvaluator()


def evaluate(rule: Rule, resolve: FieldResolver, field_path: str = "") -> Verdict:
    """
    Convenience function to evaluate a rule.

    Args:
        rule: The rule to evaluate.
        resolve: Field resolver.
        field_path: Path of the annotated field.

    Returns:
        Verdict for the rule.
    """
    return _default_evaluator.evaluate(rule, resolve, field_path)


def evaluate_first(
    rules: Sequence[Rule],
    resolve: FieldResolver,
    field_path: str = "",
) -> Verdict:
    """Convenience form of RuleEvaluator.evaluate_first."""
    return _default_evaluator.evaluate_first(rules, resolve, field_path)
