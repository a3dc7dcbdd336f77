"""診断ルール定義の読み込みとメッセージ整形。"""

from pathlib import Path
from typing import get_args

import yaml
from pydantic import ValidationError

from migralint.models.diagnostic import Diagnostic, DiagnosticRule, ReportedDiagnostic, RuleDescriptor
from migralint.models.errors import RuleConfigError, UnknownRuleError

RULES_FILE = "diagnostic-rules.yaml"


class RuleCatalog:
    """診断ルールの定義を保持し、診断を報告用に整形する。"""

    def __init__(self, config_dir: Path) -> None:
        self._config_dir = config_dir
        self._descriptors: dict[str, RuleDescriptor] | None = None

    def _load_descriptors(self) -> dict[str, RuleDescriptor]:
        """診断ルール定義をYAMLファイルから読み込む。

        Raises:
            RuleConfigError: ファイルが存在しない、または定義が不正・不足している場合。
        """
        if self._descriptors is not None:
            return self._descriptors

        rules_file = self._config_dir / RULES_FILE
        try:
            with open(rules_file, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise RuleConfigError(f"診断ルール定義ファイルが見つかりません: {rules_file}") from None

        if not data or "rules" not in data:
            raise RuleConfigError(f"rulesが定義されていません: {rules_file}")

        descriptors: dict[str, RuleDescriptor] = {}
        for rule_data in data["rules"]:
            try:
                descriptor = RuleDescriptor.model_validate(rule_data)
            except ValidationError as e:
                raise RuleConfigError(f"不正な診断ルール定義です: {e}") from e
            descriptors[descriptor.rule] = descriptor

        missing = [rule for rule in get_args(DiagnosticRule) if rule not in descriptors]
        if missing:
            raise RuleConfigError(f"診断ルールの定義が不足しています: {', '.join(missing)}")

        self._descriptors = descriptors
        return descriptors

    def descriptors(self) -> list[RuleDescriptor]:
        """全診断ルールの定義を返す。"""
        return list(self._load_descriptors().values())

    def describe(self, rule: str) -> RuleDescriptor:
        """指定ルールの定義を返す。

        Raises:
            UnknownRuleError: ルールが定義されていない場合。
        """
        descriptor = self._load_descriptors().get(rule)
        if descriptor is None:
            raise UnknownRuleError(rule)
        return descriptor

    def format(self, diagnostic: Diagnostic, location: str | None = None) -> ReportedDiagnostic | None:
        """診断にメッセージ・重要度・カテゴリを付与する。

        Returns:
            報告用の診断。ルールが無効化されている場合はNone。
        """
        descriptor = self.describe(diagnostic.rule)
        if not descriptor.enabled_by_default:
            return None

        message = descriptor.message_format.format(
            class_name=diagnostic.class_name,
            field_name=diagnostic.field_name or "",
        )
        return ReportedDiagnostic(
            diagnostic_id=descriptor.diagnostic_id,
            rule=diagnostic.rule,
            severity=descriptor.severity,
            category=descriptor.category,
            message=message,
            class_name=diagnostic.class_name,
            field_name=diagnostic.field_name,
            location=location,
        )
