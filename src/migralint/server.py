"""FastMCPベースのMCPサーバーエントリポイント。"""

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from migralint.config import ServerConfig
from migralint.reporting.catalog import RuleCatalog
from migralint.resources.rules import register_rule_resources
from migralint.services.analysis import AnalysisService
from migralint.tools.analysis import register_analysis_tools


def create_server(config: ServerConfig | None = None) -> FastMCP:
    """migralint MCPサーバーを作成し、ツール・リソースを登録する。

    Args:
        config: サーバー設定。Noneの場合はデフォルト設定を使用。

    Returns:
        設定済みのFastMCPインスタンス。
    """
    if config is None:
        config = ServerConfig()

    mcp = FastMCP("migralint")

    catalog = RuleCatalog(config_dir=config.config_dir)
    analysis_service = AnalysisService(catalog=catalog, max_workers=config.max_workers)

    register_analysis_tools(mcp, analysis_service, catalog)
    register_rule_resources(mcp, catalog)

    # ヘルスチェックエンドポイント
    @mcp.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> JSONResponse:
        return JSONResponse({"status": "ok"})

    return mcp
