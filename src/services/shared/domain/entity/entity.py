from abc import ABC
from typing import Generic, TypeVar

ID = TypeVar("ID")


class Entity(ABC, Generic[ID]):
    """Entity 基底クラス

    - ID はリポジトリへの登録時に一度だけ採番される
    """

    def __init__(self, id: ID | None = None) -> None:
        self._id = id

    @property
    def id(self) -> ID | None:
        return self._id

    def assign_id(self, id: ID) -> None:
        """ID を割り当てる（割り当て済みの場合は変更不可）"""
        if self._id is not None:
            raise ValueError(f"Identifier already assigned: {self._id}")
        self._id = id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return False
        if self._id is None or other._id is None:
            return self is other
        return type(self) is type(other) and self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id) if self._id is not None else id(self)
