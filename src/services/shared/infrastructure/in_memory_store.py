import copy
import itertools
import threading
from collections.abc import Callable
from typing import Generic, TypeVar

from services.shared.domain import AggregateRoot, Entity

T = TypeVar("T", bound=Entity)


class InMemoryStore(Generic[T]):
    """インメモリの集約ストア

    - 採番: プレフィックス + 4 桁ゼロ埋めの連番（例: f0001）。再利用しない
    - 保存時・読み出し時ともにディープコピーを扱い、呼び出し側と状態を共有しない
    - 辞書へのアクセスは内部ロックで保護する（呼び出しをまたいだ原子性はない）
    """

    def __init__(self, id_prefix: str) -> None:
        self._id_prefix = id_prefix
        self._items: dict[str, T] = {}
        self._sequence = itertools.count(1)
        self._lock = threading.Lock()

    def add(self, item: T) -> T:
        """採番して保存し、保存済みのコピーを返す"""
        persisted = self._clone(item)
        with self._lock:
            persisted.assign_id(f"{self._id_prefix}{next(self._sequence):04d}")
            self._items[persisted.id] = persisted
        return self._clone(persisted)

    def get(self, id: str | None) -> T | None:
        if not id or not id.strip():
            return None
        with self._lock:
            item = self._items.get(id)
        return self._clone(item) if item is not None else None

    def replace(self, item: T) -> T | None:
        """既存の項目を置き換える。存在しない場合は None"""
        if not item.id:
            return None
        persisted = self._clone(item)
        with self._lock:
            if item.id not in self._items:
                return None
            self._items[item.id] = persisted
        return self._clone(persisted)

    def values(self, predicate: Callable[[T], bool] | None = None) -> list[T]:
        """条件に一致する項目のコピーを ID 順で返す"""
        with self._lock:
            items = list(self._items.values())
        return [
            self._clone(item)
            for item in sorted(items, key=lambda i: i.id)
            if predicate is None or predicate(item)
        ]

    def count(self, predicate: Callable[[T], bool]) -> int:
        with self._lock:
            return sum(1 for item in self._items.values() if predicate(item))

    @staticmethod
    def _clone(item: T) -> T:
        clone = copy.deepcopy(item)
        if isinstance(clone, AggregateRoot):
            # 未発行のドメインイベントは保存・返却しない
            clone.flush_domain_events()
        return clone
