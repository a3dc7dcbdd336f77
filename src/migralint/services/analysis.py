"""解析実行の管理と候補クラスの並行評価を行うサービス。"""

import logging
import uuid
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from migralint.models.candidate import CandidateClass
from migralint.models.diagnostic import AnalysisReport, Diagnostic, ReportedDiagnostic
from migralint.registry.versions import VersionRegistry
from migralint.reporting.catalog import RuleCatalog
from migralint.validators.migratable import check_candidate

logger = logging.getLogger(__name__)


class AnalysisRun:
    """1回の解析実行。実行専用の登録簿を保持する。

    checkは複数スレッドから同時に呼び出してよい。
    """

    def __init__(self, run_id: str | None = None) -> None:
        self.run_id = run_id or str(uuid.uuid4())
        self.registry = VersionRegistry()

    def check(self, candidate: CandidateClass) -> list[Diagnostic]:
        """候補クラスを1件評価する。"""
        diagnostics = check_candidate(candidate, self.registry)
        if diagnostics:
            logger.debug("Run %s: %s -> %s", self.run_id, candidate.name, diagnostics[0].rule)
        else:
            logger.debug("Run %s: %s passed", self.run_id, candidate.name)
        return diagnostics


class AnalysisService:
    """候補クラス群の解析を行う。"""

    def __init__(self, catalog: RuleCatalog, max_workers: int = 4) -> None:
        self._catalog = catalog
        self._max_workers = max_workers

    def start_run(self) -> AnalysisRun:
        """新しい登録簿を持つ解析実行を開始する。"""
        run = AnalysisRun()
        logger.info("Started analysis run %s", run.run_id)
        return run

    def analyze(
        self,
        candidates: Iterable[CandidateClass],
        *,
        run: AnalysisRun | None = None,
    ) -> AnalysisReport:
        """候補クラス群を並行評価し、報告用の診断をまとめる。

        Args:
            candidates: 評価対象の候補クラス。
            run: 既存の解析実行。Noneの場合は新しい実行を開始する。

        Returns:
            入力順に並んだ診断を含む解析結果。

        Raises:
            RuleConfigError: 診断ルール定義が読み込めない場合。
        """
        if run is None:
            run = self.start_run()

        candidate_list = list(candidates)
        # ルール定義の不備はスレッドを起動する前に検出する
        self._catalog.descriptors()

        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            results = list(executor.map(run.check, candidate_list))

        reported: list[ReportedDiagnostic] = []
        for candidate, diagnostics in zip(candidate_list, results, strict=True):
            for diagnostic in diagnostics:
                formatted = self._catalog.format(diagnostic, location=candidate.location)
                if formatted is not None:
                    reported.append(formatted)

        logger.info(
            "Analysis run %s checked %d classes, %d diagnostics",
            run.run_id,
            len(candidate_list),
            len(reported),
        )
        return AnalysisReport(
            run_id=run.run_id,
            checked_count=len(candidate_list),
            diagnostics=reported,
            registered=run.registry.snapshot(),
        )
