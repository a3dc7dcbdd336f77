"""migralintサーバーの設定管理。"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

_PACKAGE_ROOT = Path(__file__).parent
_REPO_ROOT = _PACKAGE_ROOT.parent.parent


class ServerConfig(BaseSettings):
    """サーバー設定。環境変数から読み込み可能。"""

    model_config = {"env_prefix": "MIGRALINT_"}

    config_dir: Path = _REPO_ROOT / "config"
    host: str = "0.0.0.0"
    port: int = 8000
    url_token: str = ""

    # 解析設定
    max_workers: int = Field(default=4, ge=1)
    log_level: str = "INFO"
