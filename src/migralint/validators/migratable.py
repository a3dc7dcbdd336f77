"""シリアライズIDアノテーションのルール評価ロジック。"""

import logging

from migralint.models.candidate import Annotation, AnnotationValue, CandidateClass
from migralint.models.diagnostic import Diagnostic
from migralint.registry.versions import VersionRegistry
from migralint.validators.classifier import classify

logger = logging.getLogger(__name__)

ID_FIELD = "id"
VERSION_FIELD = "version"


def _stringify(value: AnnotationValue) -> str:
    # 欠落値は空文字列として扱う
    return "" if value is None else str(value)


def _as_version(value: AnnotationValue) -> int | None:
    # boolはintのサブクラスのため明示的に除外する
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def evaluate(
    candidate: CandidateClass,
    annotation: Annotation,
    registry: VersionRegistry,
) -> list[Diagnostic]:
    """アノテーションの必須パラメータと重複バージョンを検証する。

    最初に検出した違反で評価を打ち切るため、返却される診断は高々1件。
    登録簿を参照・更新するのは最後の重複チェックのみ。

    Args:
        candidate: 検証対象のクラス。
        annotation: クラスに付与されたシリアライズIDアノテーション。
        registry: 解析実行で共有される登録簿。

    Returns:
        検出された診断のリスト。問題がない場合は空リスト。
    """
    arguments = annotation.named_arguments

    if ID_FIELD not in arguments:
        return [Diagnostic(rule="missing_field", class_name=candidate.name, field_name=ID_FIELD)]

    serialized_id = _stringify(arguments[ID_FIELD])
    if serialized_id == "":
        return [Diagnostic(rule="invalid_field", class_name=candidate.name, field_name=ID_FIELD)]

    if VERSION_FIELD not in arguments:
        return [Diagnostic(rule="missing_field", class_name=candidate.name, field_name=VERSION_FIELD)]

    version = _as_version(arguments[VERSION_FIELD])
    if version is None or version < 0:
        return [Diagnostic(rule="invalid_field", class_name=candidate.name, field_name=VERSION_FIELD)]

    if not registry.register(serialized_id, version):
        logger.debug("Duplicate version %s for id %r in class %s", version, serialized_id, candidate.name)
        return [Diagnostic(rule="duplicate_version", class_name=candidate.name)]

    return []


def check_candidate(candidate: CandidateClass, registry: VersionRegistry) -> list[Diagnostic]:
    """候補クラスを分類し、検証対象であればルール評価を行う。"""
    classification = classify(candidate)
    if classification.status == "out_of_scope":
        return []
    if classification.status == "missing_annotation" or classification.annotation is None:
        return [Diagnostic(rule="missing_annotation", class_name=candidate.name)]
    return evaluate(candidate, classification.annotation, registry)
