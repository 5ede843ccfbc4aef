from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.shared.infrastructure.in_memory_store import InMemoryStore
from services.shared.utils.validators import is_blank


class InMemoryBookingRepository(BookingRepository):
    """インメモリの BookingRepository 実装（ID: b0001, b0002, ...）"""

    def __init__(self) -> None:
        self._store: InMemoryStore[Booking] = InMemoryStore(id_prefix="b")

    def add(self, booking: Booking) -> Booking:
        return self._store.add(booking)

    def find_by_id(self, booking_id: str) -> Booking | None:
        return self._store.get(booking_id)

    def count_by_flight_id(self, flight_id: str) -> int:
        if is_blank(flight_id):
            return 0
        return self._store.count(lambda b: b.flight_id == flight_id)

    def list_by_flight_id(self, flight_id: str) -> list[Booking]:
        if is_blank(flight_id):
            return []
        return self._store.values(lambda b: b.flight_id == flight_id)
