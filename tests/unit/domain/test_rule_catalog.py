"""Tests for RuleCatalog built from the packaged registry."""

import pytest

from check_typo.domain.constants import ALL_RULES, LINE_RULES, UNUSED_PROP
from check_typo.domain.errors import RegistryError, UnknownRuleError
from check_typo.domain.rules import Rule, RuleCatalog


class TestRuleCatalog:
    def test_every_rule_is_known(self, catalog: RuleCatalog) -> None:
        assert tuple(rule.name for rule in catalog) == ALL_RULES
        assert "tab" in catalog
        assert "tabs" not in catalog

    def test_descriptions_come_from_the_registry(self, catalog: RuleCatalog) -> None:
        assert catalog.get("tab").description == "Line contains a TAB character."
        assert all(rule.description for rule in catalog)

    def test_line_rules_keep_their_order(self, catalog: RuleCatalog) -> None:
        assert tuple(r.name for r in catalog.line_rules) == LINE_RULES

    def test_file_rules_have_no_detector(self, catalog: RuleCatalog) -> None:
        assert not catalog.get("missing-lf").is_line_rule
        assert catalog.get("tab").is_line_rule

    def test_unused_prop_message_names_the_rule(self, catalog: RuleCatalog) -> None:
        assert catalog.get(UNUSED_PROP).message("tab") == "unused [tab] property"

    def test_validate_accepts_known_names(self, catalog: RuleCatalog) -> None:
        assert catalog.validate(["tab", "long-line", "tab"]) == frozenset({"tab", "long-line"})

    def test_validate_rejects_unknown_names(self, catalog: RuleCatalog) -> None:
        with pytest.raises(UnknownRuleError, match="unknown rule.*tabs") as excinfo:
            catalog.validate(["tab", "tabs"])
        assert excinfo.value.names == ["tabs"]

    def test_incomplete_registry(self, registry: dict) -> None:
        partial = {k: v for k, v in registry.items() if k != "typo.long-line"}
        with pytest.raises(RegistryError, match="long-line"):
            RuleCatalog.from_registry(partial)


class TestRule:
    def test_message_without_args_is_verbatim(self) -> None:
        """A template without args is not %-formatted, so a literal % survives."""
        rule = Rule(name="x", message_template="100% wrong")
        assert rule.message() == "100% wrong"
