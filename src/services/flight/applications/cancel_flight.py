from services.booking.domain.repository import BookingRepository
from services.flight.domain import Flight
from services.flight.domain.event import FlightEventPublisher
from services.flight.domain.repository import FlightRepository
from services.shared.applications import (
    Conflict,
    NotFound,
    Result,
    Success,
    UnexpectedFailure,
)
from services.shared.domain.exception import BusinessRuleViolationException
from services.shared.utils.logger import get_logger
from services.shared.utils.operation_gate import OperationGate
from services.shared.utils.validators import is_blank

logger = get_logger()


class CancelFlightService:
    """フライト欠航サービス

    すでに CANCELLED の場合は何もせず成功を返す（冪等）。
    遷移に成功した場合のみ、払い戻し・通知のイベントを発行する。
    """

    def __init__(
        self,
        flight_repository: FlightRepository,
        booking_repository: BookingRepository,
        gate: OperationGate,
        publisher: FlightEventPublisher,
    ) -> None:
        self._flight_repository = flight_repository
        self._booking_repository = booking_repository
        self._gate = gate
        self._publisher = publisher

    def cancel(self, flight_id: str) -> Result[Flight]:
        """フライトを欠航にする"""
        if is_blank(flight_id):
            return NotFound("flight not found")

        with self._gate.acquire(flight_id):
            flight = self._flight_repository.find_by_id(flight_id)
            if flight is None:
                return NotFound("flight not found")

            from_state = flight.state
            booking_count = self._booking_repository.count_by_flight_id(flight_id)
            try:
                changed = flight.cancel(booking_count)
            except BusinessRuleViolationException as e:
                logger.warning(
                    "Rejected cancel transition",
                    extra={
                        "flight_id": flight_id,
                        "state": from_state.value,
                        "reason": "cannot cancel a performed flight",
                    },
                )
                return Conflict(str(e))

            if not changed:
                logger.info(
                    "Cancel requested but flight is already CANCELLED",
                    extra={"flight_id": flight_id},
                )
                return Success(flight)

            events = flight.flush_domain_events()
            updated = self._flight_repository.update(flight)
            if updated is None:
                logger.error("Failed to cancel flight", extra={"flight_id": flight_id})
                return UnexpectedFailure("failed to cancel flight")

            logger.info(
                "Flight transitioned",
                extra={
                    "flight_id": flight_id,
                    "from_state": from_state.value,
                    "to_state": updated.state.value,
                    "booking_count": booking_count,
                    "minimum_passengers": updated.minimum_passengers,
                },
            )
            self._publisher.publish(events)
            return Success(updated)
