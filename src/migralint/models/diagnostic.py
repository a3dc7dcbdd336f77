"""診断結果関連のデータモデル。"""

from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DiagnosticRule = Literal["missing_annotation", "missing_field", "invalid_field", "duplicate_version"]

Severity = Literal["error", "warning", "info"]


class Diagnostic(BaseModel):
    """ルール評価で検出された個別の違反。"""

    model_config = ConfigDict(frozen=True)

    rule: DiagnosticRule
    class_name: str
    field_name: str | None = None


class RuleDescriptor(BaseModel):
    """診断ルールの定義（YAMLから読み込み）。"""

    rule: DiagnosticRule
    diagnostic_id: str
    title: str
    message_format: str
    severity: Severity = "error"
    category: str
    enabled_by_default: bool = True


class ReportedDiagnostic(BaseModel):
    """メッセージ・重要度を付与した報告用の診断。"""

    diagnostic_id: str
    rule: DiagnosticRule
    severity: Severity
    category: str
    message: str
    class_name: str
    field_name: str | None = None
    location: str | None = None


class AnalysisReport(BaseModel):
    """1回の解析実行の結果。"""

    run_id: str
    checked_count: int
    diagnostics: list[ReportedDiagnostic] = Field(default_factory=list)
    registered: dict[str, list[int]] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @property
    def passed(self) -> bool:
        return not self.diagnostics
