"""RuleCatalogのユニットテスト。"""

from pathlib import Path

import pytest

from migralint.models.diagnostic import Diagnostic
from migralint.models.errors import RuleConfigError, UnknownRuleError
from migralint.reporting.catalog import RuleCatalog


def _write_rules(config_dir: Path, body: str) -> None:
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / "diagnostic-rules.yaml").write_text(body, encoding="utf-8")


class TestRuleCatalog:
    def test_descriptors_cover_all_rules(self, catalog: RuleCatalog) -> None:
        rules = {d.rule for d in catalog.descriptors()}
        assert rules == {"missing_annotation", "missing_field", "invalid_field", "duplicate_version"}

    def test_default_descriptor_values(self, catalog: RuleCatalog) -> None:
        descriptor = catalog.describe("duplicate_version")
        assert descriptor.diagnostic_id == "MigratableAnalyzer"
        assert descriptor.severity == "error"
        assert descriptor.category == "Naming"
        assert descriptor.enabled_by_default is True

    def test_format_missing_annotation(self, catalog: RuleCatalog) -> None:
        reported = catalog.format(Diagnostic(rule="missing_annotation", class_name="Player"))
        assert reported is not None
        assert reported.message == "Class 'Player' needs to have the serialized-id annotation."
        assert reported.field_name is None

    def test_format_missing_field(self, catalog: RuleCatalog) -> None:
        reported = catalog.format(
            Diagnostic(rule="missing_field", class_name="Player", field_name="version"),
            location="Player.cs:12",
        )
        assert reported is not None
        assert reported.message == "Class 'Player' has missing annotation parameter version."
        assert reported.location == "Player.cs:12"

    def test_format_invalid_field(self, catalog: RuleCatalog) -> None:
        reported = catalog.format(Diagnostic(rule="invalid_field", class_name="Player", field_name="id"))
        assert reported is not None
        assert reported.message == "Class 'Player' has incorrect annotation parameter id."

    def test_format_duplicate_version(self, catalog: RuleCatalog) -> None:
        reported = catalog.format(Diagnostic(rule="duplicate_version", class_name="PlayerV2"))
        assert reported is not None
        assert reported.message == "Class 'PlayerV2' has duplicate version for the serialized-id annotation."

    def test_missing_rules_file(self, tmp_path: Path) -> None:
        catalog = RuleCatalog(config_dir=tmp_path)
        with pytest.raises(RuleConfigError):
            catalog.descriptors()

    def test_incomplete_rules_file(self, tmp_path: Path) -> None:
        _write_rules(
            tmp_path,
            """
rules:
  - rule: missing_annotation
    diagnostic_id: X
    title: t
    message_format: "m"
    category: Naming
""",
        )
        with pytest.raises(RuleConfigError, match="duplicate_version"):
            RuleCatalog(config_dir=tmp_path).descriptors()

    def test_invalid_rule_definition(self, tmp_path: Path) -> None:
        _write_rules(tmp_path, "rules:\n  - rule: unknown_rule\n")
        with pytest.raises(RuleConfigError):
            RuleCatalog(config_dir=tmp_path).descriptors()

    def test_disabled_rule_is_not_reported(self, tmp_path: Path, config_dir: Path) -> None:
        body = (config_dir / "diagnostic-rules.yaml").read_text(encoding="utf-8")
        _write_rules(tmp_path, body.replace("enabled_by_default: true", "enabled_by_default: false"))
        catalog = RuleCatalog(config_dir=tmp_path)
        assert catalog.format(Diagnostic(rule="missing_annotation", class_name="Player")) is None

    def test_describe_unknown_rule(self, catalog: RuleCatalog) -> None:
        with pytest.raises(UnknownRuleError) as exc_info:
            catalog.describe("nonexistent")
        assert exc_info.value.rule == "nonexistent"
