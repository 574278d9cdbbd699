"""
Compared-Field Resolution Tests.

- Literal name is tried first, then the sibling path of the annotated field
- Empty names and unresolvable fields are errors
- Evaluation is idempotent and single-rule-wins
"""

import logging

import pytest

from src.showif.evaluation import RuleEvaluator, evaluate, evaluate_first
from src.showif.evaluation.resolve import find_compared_field, sibling_path
from src.showif.rule import Rule, show_if, show_if_greater
from src.showif.types import EvalResult, ReasonCode, ResolvedField, Verdict
from tests.harness.fields import SyntheticFields


class TestSiblingPath:
    """Sibling path derivation."""

    @pytest.mark.parametrize("field_path, name, expected", [
        ("settings.items[2].value", "enabled", "settings.items[2].enabled"),
        ("settings.value", "mode", "settings.mode"),
        ("a.b.c", "x.y", "a.b.x.y"),
    ])
    def test_replaces_last_segment(self, field_path, name, expected):
        assert sibling_path(field_path, name) == expected

    @pytest.mark.parametrize("field_path", ["", "value"])
    def test_no_separator_has_no_sibling(self, field_path):
        assert sibling_path(field_path, "enabled") is None


class TestFindComparedField:
    """Literal-then-sibling lookup order."""

    def test_literal_name_wins(self):
        fields = SyntheticFields.with_fields({
            "enabled": True,
            "settings.items[2].enabled": False,
        })
        found = find_compared_field(fields, "enabled", "settings.items[2].value")
        assert found.path == "enabled"
        assert found.value is True
        assert fields.lookups == ["enabled"]

    def test_sibling_used_when_literal_missing(self):
        fields = SyntheticFields.with_fields({"settings.items[2].enabled": False})
        found = find_compared_field(fields, "enabled", "settings.items[2].value")
        assert found.path == "settings.items[2].enabled"
        assert fields.lookups == ["enabled", "settings.items[2].enabled"]

    def test_root_field_only_tries_literal(self):
        fields = SyntheticFields()
        assert find_compared_field(fields, "enabled", "value") is None
        assert fields.lookups == ["enabled"]


class TestEvaluatorResolution:
    """Resolution failures surface as ERROR verdicts."""

    def test_sibling_rule_is_evaluated(self):
        fields = SyntheticFields.with_fields({"settings.items[2].enabled": True})
        verdict = evaluate(show_if("enabled"), fields, "settings.items[2].value")
        assert verdict == Verdict.visible()

    def test_sibling_rule_hidden(self):
        fields = SyntheticFields.with_fields({"settings.items[2].enabled": False})
        verdict = evaluate(show_if("enabled"), fields, "settings.items[2].value")
        assert verdict.is_hidden

    def test_sibling_messages_use_leaf_name(self):
        fields = SyntheticFields.with_fields({"settings.items[2].enabled": 3})
        verdict = evaluate(show_if("enabled"), fields, "settings.items[2].value")
        assert verdict.message == "ShowIf: Expected bool on 'enabled'."

    def test_missing_field_is_error(self, empty_fields):
        verdict = evaluate(show_if("enabled"), empty_fields, "settings.items[2].value")
        assert verdict.is_error
        assert verdict.reason == ReasonCode.FIELD_NOT_FOUND
        assert verdict.message == "ShowIf: Could not find 'enabled'."
        assert empty_fields.lookups == ["enabled", "settings.items[2].enabled"]

    @pytest.mark.parametrize("name", ["", "   ", "\t"])
    def test_empty_name_is_error(self, name, settings_fields):
        verdict = evaluate(Rule(name), settings_fields)
        assert verdict.reason == ReasonCode.EMPTY_FIELD_NAME
        assert verdict.message == "ShowIf: Compared field name is empty."
        assert settings_fields.lookups == []

    def test_none_name_is_empty(self, settings_fields):
        rule = Rule.create(None, "bool", "eq", [True])
        assert evaluate(rule, settings_fields).reason == ReasonCode.EMPTY_FIELD_NAME

    def test_resolver_closure(self):
        values = {"count": 12}

        def resolve(path):
            if path in values:
                return ResolvedField.of(values[path], path)
            return None

        assert evaluate(show_if_greater("count", 10), resolve).is_visible


class TestEvaluatorProperties:
    """Purity, idempotence and result mapping."""

    def test_idempotent(self, settings_fields):
        rule = show_if("count", 5, 10, 15)
        first = evaluate(rule, settings_fields)
        second = evaluate(rule, settings_fields)
        assert first == second
        assert first == Verdict.visible()

    def test_errors_are_value_equal(self, empty_fields):
        assert evaluate(show_if("x"), empty_fields) == evaluate(show_if("x"), empty_fields)

    def test_evaluate_result_carries_field_path(self, settings_fields):
        result = RuleEvaluator().evaluate_result(show_if("count", 10), settings_fields)
        assert isinstance(result, EvalResult)
        assert result.met is True
        assert result.reason == ReasonCode.OK
        assert result.field_path == "count"

    def test_rule_not_mutated(self, settings_fields):
        rule = show_if("count", 5)
        before = rule.to_dict()
        evaluate(rule, settings_fields)
        assert rule.to_dict() == before


class TestEvaluateFirst:
    """Only the first rule attached to a field is evaluated."""

    def test_no_rules_is_visible(self, empty_fields):
        assert evaluate_first([], empty_fields) == Verdict.visible()
        assert empty_fields.lookups == []

    def test_first_rule_wins(self, settings_fields):
        rules = [show_if("enabled", False), show_if("enabled", True)]
        assert evaluate_first(rules, settings_fields).is_hidden

    def test_later_rules_not_resolved(self, settings_fields):
        rules = [show_if("enabled"), show_if("missing")]
        assert evaluate_first(rules, settings_fields).is_visible
        assert "missing" not in settings_fields.lookups

    def test_ignored_rules_are_traced(self, settings_fields, debug_enabled, caplog, monkeypatch):
        monkeypatch.setattr(logging.getLogger("showif"), "propagate", True)
        caplog.set_level(logging.DEBUG, logger="showif")
        rules = [show_if("enabled"), show_if("count", 1)]
        evaluate_first(rules, settings_fields, "settings.value")
        assert "[field:settings.value] Ignoring extra rules" in caplog.text
        assert "ignored=1" in caplog.text


class TestErrorTracing:
    """ERROR verdicts are traced when debug is on."""

    def test_error_logged_with_field_prefix(self, empty_fields, debug_enabled, caplog, monkeypatch):
        monkeypatch.setattr(logging.getLogger("showif"), "propagate", True)
        caplog.set_level(logging.DEBUG, logger="showif")
        evaluate(show_if("enabled"), empty_fields, "settings.value")
        assert "[field:settings.value] Rule error" in caplog.text
        assert "reason=FIELD_NOT_FOUND" in caplog.text

    def test_nothing_logged_when_debug_off(self, empty_fields, caplog, monkeypatch):
        from src.utils import debug
        monkeypatch.setattr(debug, "_debug_enabled", False)
        monkeypatch.setattr(logging.getLogger("showif"), "propagate", True)
        caplog.set_level(logging.DEBUG, logger="showif")
        evaluate(show_if("enabled"), empty_fields, "settings.value")
        assert "Rule error" not in caplog.text
