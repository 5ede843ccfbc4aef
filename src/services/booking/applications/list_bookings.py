from services.booking.domain import Booking
from services.booking.domain.repository import BookingRepository
from services.flight.domain.repository import FlightRepository
from services.shared.applications import NotFound, Result, Success
from services.shared.utils.logger import get_logger
from services.shared.utils.validators import is_blank

logger = get_logger()


class ListBookingsService:
    """フライトごとの予約一覧取得サービス"""

    def __init__(
        self,
        booking_repository: BookingRepository,
        flight_repository: FlightRepository,
    ) -> None:
        self._booking_repository = booking_repository
        self._flight_repository = flight_repository

    def list(self, flight_id: str) -> Result[list[Booking]]:
        """予約を ID 順で返す。フライトが存在しない場合は NotFound"""
        if is_blank(flight_id):
            logger.warning("Rejected list bookings request because flight_id is empty")
            return NotFound("flight not found")

        if self._flight_repository.find_by_id(flight_id) is None:
            logger.warning(
                "Flight not found while listing bookings",
                extra={"flight_id": flight_id},
            )
            return NotFound("flight not found")

        bookings = self._booking_repository.list_by_flight_id(flight_id)
        logger.info(
            "Listed bookings",
            extra={"flight_id": flight_id, "booking_count": len(bookings)},
        )
        return Success(bookings)
