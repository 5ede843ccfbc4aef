from abc import abstractmethod

from services.rocket.domain.entity import Rocket
from services.shared.domain import Repository


class RocketRepository(Repository[Rocket, str]):
    """ロケットレポジトリ"""

    @abstractmethod
    def add(self, rocket: Rocket) -> Rocket:
        """採番して永続化する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, rocket_id: str) -> Rocket | None:
        """ロケットIDで検索"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Rocket]:
        """全件を ID 順で取得"""
        raise NotImplementedError
