from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Repository 基底クラス

    - 集約の永続化を抽象化する
    - 採番はリポジトリの責務
    - 読み出した集約は保存済みの状態と共有されない（コピーを返す）
    """

    @abstractmethod
    def add(self, aggregate: T) -> T:
        """集約を永続化し、ID 採番済みのコピーを返す"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """IDで集約を検索する"""
        raise NotImplementedError
