"""
Conditional Field Drawer Tests.

Verdict-to-layout mapping:
- VISIBLE: field drawn at its height
- HIDDEN: nothing drawn, zero height
- ERROR: warning banner, spacing, then the field anyway
"""

import dataclasses
from dataclasses import dataclass, field

from src.config.config import InspectorConfig
from src.inspector import ObjectFieldResolver
from src.inspector.drawer import (
    SHOW_IF_METADATA_KEY,
    ConditionalFieldDrawer,
    conditional_field,
    rules_from_metadata,
)
from src.showif.rule import show_if, show_if_greater
from src.showif.types import ReasonCode, ValueKind, Verdict


@dataclass
class Item:
    enabled: bool = False
    value: float = conditional_field(show_if("enabled"), default=1.0)


@dataclass
class Panel:
    mode: int = 0
    advanced: bool = False
    threshold: float = conditional_field(show_if("advanced"), default=0.5)
    speed: int = conditional_field(show_if_greater("mode", 1), show_if("advanced"), default=3)
    broken: str = conditional_field(show_if("missing"), default="")
    items: list = field(default_factory=list)


class TestPlanForVerdict:
    """Layout per verdict state."""

    def test_visible(self, drawer):
        plan = drawer.plan_for_verdict(Verdict.visible(), "threshold")
        assert plan.draw_field is True
        assert plan.warning is None
        assert plan.height == 18.0

    def test_hidden(self, drawer):
        plan = drawer.plan_for_verdict(Verdict.hidden(), "threshold")
        assert plan.draw_field is False
        assert plan.height == 0.0

    def test_error_draws_banner_and_field(self, drawer):
        verdict = Verdict.error(ReasonCode.FIELD_NOT_FOUND, "ShowIf: Could not find 'x'.")
        plan = drawer.plan_for_verdict(verdict, "threshold")
        assert plan.draw_field is True
        assert plan.warning == "ShowIf: Could not find 'x'."
        assert plan.height == 36.0 + 2.0 + 18.0

    def test_custom_field_height(self, drawer):
        assert drawer.plan_for_verdict(Verdict.visible(), "f", field_height=40.0).height == 40.0
        assert drawer.error_height(40.0) == 78.0

    def test_custom_layout(self):
        drawer = ConditionalFieldDrawer(
            config=InspectorConfig(help_box_height=20.0, vertical_spacing=4.0, field_height=10.0)
        )
        verdict = Verdict.error(ReasonCode.TYPE_MISMATCH, "bad")
        assert drawer.plan_for_verdict(verdict, "f").height == 34.0

    def test_to_dict(self, drawer):
        plan = drawer.plan_for_verdict(Verdict.hidden(), "threshold")
        assert plan.to_dict() == {
            "field": "threshold",
            "draw_field": False,
            "warning": None,
            "height": 0.0,
            "state": "hidden",
            "reason": "OK",
            "message": "",
        }


class TestFieldMetadata:
    """Rules attached through dataclass field metadata."""

    def test_rules_from_metadata(self):
        fields = {f.name: f for f in dataclasses.fields(Panel)}
        assert rules_from_metadata(fields["threshold"]) == (show_if("advanced"),)
        assert rules_from_metadata(fields["mode"]) == ()

    def test_existing_metadata_kept(self):
        f = conditional_field(show_if("x"), default=0, metadata={"unit": "px"})
        assert f.metadata["unit"] == "px"
        assert f.metadata[SHOW_IF_METADATA_KEY] == (show_if("x"),)


class TestInspectObject:
    """Walking a dataclass instance."""

    def test_heights(self, drawer):
        plans = {p.field_path: p for p in drawer.inspect_object(Panel())}

        assert plans["mode"].height == 18.0
        assert plans["threshold"].verdict.is_hidden
        assert plans["threshold"].height == 0.0
        assert plans["broken"].verdict.reason == ReasonCode.FIELD_NOT_FOUND
        assert plans["broken"].height == 56.0

    def test_first_rule_wins(self, drawer):
        plans = {p.field_path: p for p in drawer.inspect_object(Panel(mode=2, advanced=False))}
        assert plans["speed"].verdict.is_visible

    def test_nested_items_use_sibling_paths(self, drawer):
        panel = Panel(items=[Item(enabled=False), Item(enabled=True)])
        plans = {p.field_path: p for p in drawer.inspect_object(panel)}

        assert "items[0].value" in plans
        assert plans["items[0].value"].verdict.is_hidden
        assert plans["items[1].value"].verdict.is_visible
        assert plans["items[1].enabled"].verdict.is_visible

    def test_get_height(self, drawer):
        resolver = ObjectFieldResolver(Panel(advanced=True))
        height = drawer.get_height([show_if("advanced")], resolver, "threshold")
        assert height == 18.0


class TestInspectRules:
    """Rule documents applied to plain objects."""

    def test_inspect_rules(self, drawer):
        obj = {"settings": {"enabled": True, "count": 2}}
        rules = {
            "settings.value": [show_if("enabled")],
            "settings.limit": [show_if_greater("count", 5)],
            "settings.mode": [show_if("mode", "Fast", kind=ValueKind.ENUM)],
        }
        plans = drawer.inspect_rules(obj, rules)

        assert [p.field_path for p in plans] == list(rules)
        assert [p.verdict.state.value for p in plans] == ["visible", "hidden", "error"]
        assert [p.height for p in plans] == [18.0, 0.0, 56.0]
