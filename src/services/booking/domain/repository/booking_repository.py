from abc import abstractmethod

from services.booking.domain.entity import Booking
from services.shared.domain import Repository


class BookingRepository(Repository[Booking, str]):
    """予約レポジトリ"""

    @abstractmethod
    def add(self, booking: Booking) -> Booking:
        """採番して永続化する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: str) -> Booking | None:
        """予約IDで検索"""
        raise NotImplementedError

    @abstractmethod
    def count_by_flight_id(self, flight_id: str) -> int:
        """フライトごとの予約数"""
        raise NotImplementedError

    @abstractmethod
    def list_by_flight_id(self, flight_id: str) -> list[Booking]:
        """フライトごとの予約一覧（ID 順）"""
        raise NotImplementedError
