from abc import abstractmethod

from services.flight.domain.entity import Flight
from services.shared.domain import Repository


class FlightRepository(Repository[Flight, str]):
    """フライトレポジトリ"""

    @abstractmethod
    def add(self, flight: Flight) -> Flight:
        """採番して永続化する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, flight_id: str) -> Flight | None:
        """フライトIDで検索"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Flight]:
        """全件を打ち上げ日時・ID 順で取得"""
        raise NotImplementedError

    @abstractmethod
    def update(self, flight: Flight) -> Flight | None:
        """既存のフライトを更新する。存在しない場合は None"""
        raise NotImplementedError
