"""解析系のMCPツール定義。"""

import asyncio
from typing import Any

from fastmcp import FastMCP
from pydantic import ValidationError

from migralint.models.candidate import CandidateClass
from migralint.models.errors import InvalidCandidateError, MigralintError
from migralint.reporting.catalog import RuleCatalog
from migralint.services.analysis import AnalysisService


def _parse_candidates(candidates: list[dict[str, Any]]) -> list[CandidateClass]:
    parsed: list[CandidateClass] = []
    for index, data in enumerate(candidates):
        try:
            parsed.append(CandidateClass.model_validate(data))
        except ValidationError as e:
            raise InvalidCandidateError(f"Invalid candidate at index {index}: {e}", index=index) from e
    return parsed


def register_analysis_tools(mcp: FastMCP, analysis_service: AnalysisService, catalog: RuleCatalog) -> None:
    """解析関連のMCPツールを登録する。"""

    @mcp.tool()
    async def analyze_classes(candidates: list[dict[str, Any]]) -> dict[str, Any]:
        """候補クラス群をまとめて検証する。

        1回の呼び出しが1回の解析実行となり、バージョン重複は呼び出し内でのみ検出されます。

        Args:
            candidates: 候補クラスのリスト。各要素は
                {"name": str, "implemented_capabilities": list[str],
                 "annotations": [{"type_name": str, "named_arguments": dict}]}。
        """
        try:
            parsed = _parse_candidates(candidates)
            report = await asyncio.to_thread(analysis_service.analyze, parsed)
            return report.model_dump(mode="json")
        except MigralintError as e:
            return {"error": type(e).__name__, "message": str(e)}

    @mcp.tool()
    async def check_class(candidate: dict[str, Any]) -> dict[str, Any]:
        """候補クラスを1件だけ検証する。

        Args:
            candidate: 候補クラス。形式はanalyze_classesの各要素と同じ。
        """
        try:
            parsed = _parse_candidates([candidate])
            report = await asyncio.to_thread(analysis_service.analyze, parsed)
            return {
                "passed": report.passed,
                "diagnostics": [d.model_dump(mode="json") for d in report.diagnostics],
            }
        except MigralintError as e:
            return {"error": type(e).__name__, "message": str(e)}

    @mcp.tool()
    async def get_rules() -> dict[str, Any]:
        """診断ルールの定義一覧を取得する。"""
        try:
            return {"rules": [d.model_dump(mode="json") for d in catalog.descriptors()]}
        except MigralintError as e:
            return {"error": type(e).__name__, "message": str(e)}
