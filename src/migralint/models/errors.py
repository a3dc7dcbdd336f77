"""migralintのカスタム例外クラス。"""


class MigralintError(Exception):
    """migralintの基底例外クラス。"""


class RuleConfigError(MigralintError):
    """診断ルール定義ファイルの読み込み・検証エラー。"""


class UnknownRuleError(MigralintError):
    """定義されていない診断ルールが参照された場合の例外。"""

    def __init__(self, rule: str) -> None:
        super().__init__(f"Unknown diagnostic rule: {rule}")
        self.rule = rule


class InvalidCandidateError(MigralintError):
    """候補クラスの入力がデータモデルに適合しない場合の例外。"""

    def __init__(self, message: str, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index
