import threading
from collections.abc import Iterator
from contextlib import contextmanager


class OperationGate:
    """キー単位の排他ゲート

    同じキー（フライトID）に対する予約・状態遷移の処理を、プロセス内で
    同時に 1 つだけ実行させる。キーごとのロックは初回取得時に生成し、
    以後破棄しない（キーの数はフライト数で上限が決まる）。

    - ロックは再入不可。保持中に同じキーで acquire してはならない
    - 待機順序（FIFO）は保証しない
    - 空白のみのキーは何もしない
    """

    def __init__(self) -> None:
        self._locks: dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    @contextmanager
    def acquire(self, key: str) -> Iterator[None]:
        """キーに対するリースを取得し、ブロックを抜けるときに解放する"""
        if not key or not key.strip():
            yield
            return

        lock = self._lock_for(key)
        with lock:
            yield

    def _lock_for(self, key: str) -> threading.Lock:
        with self._registry_lock:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._locks[key] = lock
            return lock
