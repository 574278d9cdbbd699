"""
Conditional field drawer.

Turns rule verdicts into layout plans the way an inspector host consumes
them:

    VISIBLE  draw the field at its normal height
    HIDDEN   draw nothing, contribute zero height
    ERROR    draw a warning banner with the message, then the field anyway

Rules are attached to dataclass fields through field metadata:

    @dataclass
    class Settings:
        advanced: bool = False
        threshold: float = conditional_field(show_if("advanced"), default=0.5)

Only the first rule attached to a field is evaluated.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from ..config import InspectorConfig, get_config
from ..showif.evaluation import FieldResolver, RuleEvaluator
from ..showif.rule import Rule
from ..showif.types import Verdict
from ..utils.debug import verbose_log
from .object_resolver import ObjectFieldResolver

SHOW_IF_METADATA_KEY = "show_if"


def conditional_field(*rules: Rule, **field_kwargs: Any) -> Any:
    """
    ``dataclasses.field`` carrying ShowIf rules in its metadata.

    Args:
        *rules: Rules for the field (only the first is evaluated)
        **field_kwargs: Passed through to ``dataclasses.field``
    """
    metadata = dict(field_kwargs.pop("metadata", None) or {})
    metadata[SHOW_IF_METADATA_KEY] = tuple(rules)
    return dataclasses.field(metadata=metadata, **field_kwargs)


def rules_from_metadata(f: dataclasses.Field) -> tuple[Rule, ...]:
    """Rules attached to a dataclass field (empty if none)."""
    attached = f.metadata.get(SHOW_IF_METADATA_KEY)
    if attached is None:
        return ()
    if isinstance(attached, Rule):
        return (attached,)
    return tuple(attached)


@dataclass(frozen=True)
class DrawPlan:
    """
    How one field is presented.

    Attributes:
        field_path: Annotated field path
        verdict: Evaluation verdict
        draw_field: Whether the field itself is drawn
        warning: Banner message (ERROR verdicts only)
        height: Total layout height of banner and field
    """
    field_path: str
    verdict: Verdict
    draw_field: bool
    warning: Optional[str]
    height: float

    def to_dict(self) -> dict:
        """Convert to dict for logging/serialization."""
        return {
            "field": self.field_path,
            "draw_field": self.draw_field,
            "warning": self.warning,
            "height": self.height,
            **self.verdict.to_dict(),
        }


class ConditionalFieldDrawer:
    """
    Verdict consumer computing per-field layout.

    Stateless apart from its layout settings; safe to share.
    """

    def __init__(
        self,
        config: Optional[InspectorConfig] = None,
        evaluator: Optional[RuleEvaluator] = None,
    ):
        self.config = config or get_config().inspector
        self.evaluator = evaluator or RuleEvaluator()

    def error_height(self, field_height: float) -> float:
        """Height of a warning banner followed by the field."""
        return self.config.help_box_height + self.config.vertical_spacing + field_height

    def plan_for_verdict(
        self,
        verdict: Verdict,
        field_path: str,
        field_height: Optional[float] = None,
    ) -> DrawPlan:
        """Map a verdict to its draw plan."""
        if field_height is None:
            field_height = self.config.field_height

        if verdict.is_visible:
            return DrawPlan(field_path, verdict, True, None, field_height)
        if verdict.is_hidden:
            return DrawPlan(field_path, verdict, False, None, 0.0)
        return DrawPlan(
            field_path,
            verdict,
            True,
            verdict.message,
            self.error_height(field_height),
        )

    def plan(
        self,
        rules: Sequence[Rule],
        resolve: FieldResolver,
        field_path: str,
        field_height: Optional[float] = None,
    ) -> DrawPlan:
        """Evaluate the field's rules and plan its layout."""
        verdict = self.evaluator.evaluate_first(rules, resolve, field_path)
        verbose_log(field_path, "Verdict", state=verdict.state.value, reason=verdict.reason.name)
        return self.plan_for_verdict(verdict, field_path, field_height)

    def get_height(
        self,
        rules: Sequence[Rule],
        resolve: FieldResolver,
        field_path: str,
        field_height: Optional[float] = None,
    ) -> float:
        """Layout height of the field under its rules."""
        return self.plan(rules, resolve, field_path, field_height).height

    def inspect_rules(
        self,
        obj: Any,
        rules_by_path: Mapping[str, Sequence[Rule]],
    ) -> list[DrawPlan]:
        """
        Plan every annotated field of a rule document against ``obj``.

        Args:
            obj: Root object (dict, dataclass, ...)
            rules_by_path: ``{annotated field path: [rules]}``
        """
        resolver = ObjectFieldResolver(obj)
        return [
            self.plan(rules, resolver, field_path)
            for field_path, rules in rules_by_path.items()
        ]

    def inspect_object(self, obj: Any) -> list[DrawPlan]:
        """
        Plan every field of a dataclass instance, recursing into nested
        dataclasses and lists of dataclasses.

        Fields without rules are planned as VISIBLE.
        """
        resolver = ObjectFieldResolver(obj)
        plans: list[DrawPlan] = []
        self._walk(obj, "", resolver, plans)
        return plans

    def _walk(
        self,
        obj: Any,
        prefix: str,
        resolver: ObjectFieldResolver,
        plans: list[DrawPlan],
    ) -> None:
        if not dataclasses.is_dataclass(obj) or isinstance(obj, type):
            return

        for f in dataclasses.fields(obj):
            path = f"{prefix}{f.name}"
            plans.append(self.plan(rules_from_metadata(f), resolver, path))

            value = getattr(obj, f.name)
            if dataclasses.is_dataclass(value) and not isinstance(value, type):
                self._walk(value, f"{path}.", resolver, plans)
            elif isinstance(value, (list, tuple)):
                for i, item in enumerate(value):
                    self._walk(item, f"{path}[{i}].", resolver, plans)
