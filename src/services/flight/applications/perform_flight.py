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


class PerformFlightService:
    """フライト運航済みサービス（すでに DONE の場合は冪等に成功）"""

    def __init__(
        self,
        flight_repository: FlightRepository,
        gate: OperationGate,
        publisher: FlightEventPublisher,
    ) -> None:
        self._flight_repository = flight_repository
        self._gate = gate
        self._publisher = publisher

    def perform(self, flight_id: str) -> Result[Flight]:
        """フライトを運航済みにする"""
        if is_blank(flight_id):
            return NotFound("flight not found")

        with self._gate.acquire(flight_id):
            flight = self._flight_repository.find_by_id(flight_id)
            if flight is None:
                return NotFound("flight not found")

            from_state = flight.state
            try:
                changed = flight.perform()
            except BusinessRuleViolationException as e:
                logger.warning(
                    "Rejected perform transition",
                    extra={
                        "flight_id": flight_id,
                        "state": from_state.value,
                        "reason": "cannot perform a cancelled flight",
                    },
                )
                return Conflict(str(e))

            if not changed:
                logger.info(
                    "Perform requested but flight is already DONE",
                    extra={"flight_id": flight_id},
                )
                return Success(flight)

            events = flight.flush_domain_events()
            updated = self._flight_repository.update(flight)
            if updated is None:
                logger.error(
                    "Failed to mark flight as DONE", extra={"flight_id": flight_id}
                )
                return UnexpectedFailure("failed to mark flight as DONE")

            logger.info(
                "Flight transitioned",
                extra={
                    "flight_id": flight_id,
                    "from_state": from_state.value,
                    "to_state": updated.state.value,
                },
            )
            self._publisher.publish(events)
            return Success(updated)
