"""解析対象クラスの入力データモデル。"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr

# Noneは引数値の欠落(Missing)を表す。値は型変換せずそのまま保持する
AnnotationValue = StrictStr | StrictInt | StrictBool | None

TypeKind = Literal["class", "interface", "struct", "enum", "delegate"]

ClassificationStatus = Literal["out_of_scope", "missing_annotation", "has_annotation"]


class Annotation(BaseModel):
    """クラスに付与されたメタデータアノテーション。"""

    model_config = ConfigDict(frozen=True)

    type_name: str
    named_arguments: dict[str, AnnotationValue] = Field(default_factory=dict)


class CandidateClass(BaseModel):
    """ホストから渡される解決済みのクラス宣言。

    implemented_capabilitiesは継承経由のインターフェースも含めて解決済みであること。
    annotationsはクラスに直接付与されたもののみを宣言順に保持する。
    """

    model_config = ConfigDict(frozen=True)

    name: str
    implemented_capabilities: frozenset[str] = frozenset()
    annotations: tuple[Annotation, ...] = ()
    kind: TypeKind = "class"
    is_generated: bool = False
    location: str | None = None


class Classification(BaseModel):
    """候補クラスの分類結果。"""

    model_config = ConfigDict(frozen=True)

    status: ClassificationStatus
    annotation: Annotation | None = None
