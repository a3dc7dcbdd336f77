"""診断ルール関連のMCPリソース定義。"""

import yaml
from fastmcp import FastMCP

from migralint.reporting.catalog import RuleCatalog


def register_rule_resources(mcp: FastMCP, catalog: RuleCatalog) -> None:
    """診断ルール関連のMCPリソースを登録する。"""

    @mcp.resource("migralint://rules")
    async def diagnostic_rules() -> str:
        """診断ルールの定義を取得する。

        ルール種別、診断ID、メッセージ書式、重要度、カテゴリを返します。
        """
        data = {"rules": [d.model_dump(mode="json") for d in catalog.descriptors()]}
        return yaml.dump(data, allow_unicode=True, default_flow_style=False, sort_keys=False)
