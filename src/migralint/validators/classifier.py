"""候補クラスの分類ロジック。"""

from migralint.models.candidate import CandidateClass, Classification

MIGRATABLE_CAPABILITY = "IMigratable"
SERIALIZED_ID_ANNOTATION = "SerializedIdAttribute"


def classify(candidate: CandidateClass) -> Classification:
    """候補クラスが検証対象か、シリアライズIDアノテーションを持つかを判定する。

    クラス以外の型宣言と自動生成コードは対象外とする。
    アノテーションが複数ある場合は宣言順で最初のもののみを返す。
    """
    if candidate.kind != "class" or candidate.is_generated:
        return Classification(status="out_of_scope")

    if MIGRATABLE_CAPABILITY not in candidate.implemented_capabilities:
        return Classification(status="out_of_scope")

    annotation = next(
        (a for a in candidate.annotations if a.type_name == SERIALIZED_ID_ANNOTATION),
        None,
    )
    if annotation is None:
        return Classification(status="missing_annotation")

    return Classification(status="has_annotation", annotation=annotation)
