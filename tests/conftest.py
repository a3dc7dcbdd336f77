"""テスト共通フィクスチャ。"""

from pathlib import Path

import pytest

from migralint.config import ServerConfig
from migralint.models.candidate import Annotation, CandidateClass
from migralint.registry.versions import VersionRegistry
from migralint.reporting.catalog import RuleCatalog
from migralint.services.analysis import AnalysisService


def make_candidate(
    name: str,
    serialized_id: object = "player",
    version: object = 0,
    *,
    capabilities: tuple[str, ...] = ("IMigratable",),
    **extra: object,
) -> CandidateClass:
    """SerializedIdAttribute(id=..., version=...)付きの候補クラスを生成する。"""
    return CandidateClass(
        name=name,
        implemented_capabilities=frozenset(capabilities),
        annotations=(
            Annotation(
                type_name="SerializedIdAttribute",
                named_arguments={"id": serialized_id, "version": version},
            ),
        ),
        **extra,
    )


@pytest.fixture
def config_dir() -> Path:
    """設定ファイルディレクトリ。"""
    return Path(__file__).parent.parent / "config"


@pytest.fixture
def registry() -> VersionRegistry:
    """テスト用VersionRegistry。"""
    return VersionRegistry()


@pytest.fixture
def catalog(config_dir: Path) -> RuleCatalog:
    """テスト用RuleCatalog。"""
    return RuleCatalog(config_dir=config_dir)


@pytest.fixture
def analysis_service(catalog: RuleCatalog) -> AnalysisService:
    """テスト用AnalysisService。"""
    return AnalysisService(catalog=catalog, max_workers=8)


@pytest.fixture
def server_config(config_dir: Path) -> ServerConfig:
    """テスト用ServerConfig。"""
    return ServerConfig(config_dir=config_dir)
