"""解析実行単位の(id, version)登録簿。"""

import threading


class VersionRegistry:
    """シリアライズID毎に登録済みバージョンを保持する。

    解析実行ごとに新しく生成し、実行中の全候補クラスで共有する。
    複数スレッドからの登録に対して、(id, version)の組は最初の1件のみが登録される。
    """

    def __init__(self) -> None:
        self._versions: dict[str, set[int]] = {}
        self._lock = threading.Lock()

    def register(self, serialized_id: str, version: int) -> bool:
        """(id, version)を未登録の場合のみ登録する。

        Returns:
            True: 新規に登録された。
            False: 既に登録済み（登録簿は変更されない）。
        """
        with self._lock:
            versions = self._versions.setdefault(serialized_id, set())
            if version in versions:
                return False
            versions.add(version)
            return True

    def contains(self, serialized_id: str, version: int) -> bool:
        with self._lock:
            return version in self._versions.get(serialized_id, ())

    def snapshot(self) -> dict[str, list[int]]:
        """登録内容のコピーをID毎のソート済みリストで返す。"""
        with self._lock:
            return {key: sorted(values) for key, values in self._versions.items()}

    def __len__(self) -> int:
        with self._lock:
            return sum(len(values) for values in self._versions.values())
