from services.flight.domain import Flight, FlightState
from services.flight.domain.repository import FlightRepository
from services.shared.applications import Result, Success, ValidationFailed
from services.shared.domain import IsoDateTime
from services.shared.utils.clock import Clock
from services.shared.utils.logger import get_logger

logger = get_logger()


class ListFutureFlightsService:
    """未来のフライト一覧取得サービス（参照のみのためゲート不要）"""

    def __init__(self, flight_repository: FlightRepository, clock: Clock) -> None:
        self._flight_repository = flight_repository
        self._clock = clock

    def list(self, state: str | None = None) -> Result[list[Flight]]:
        """打ち上げ日時が現在より後のフライトを、打ち上げ日時・ID 順で返す

        Args:
            state: 状態での絞り込み（大文字・小文字は区別しない）。None の場合は全状態
        """
        state_filter: FlightState | None = None
        if state is not None:
            if not state.strip():
                logger.warning("Invalid flight state filter", extra={"state": state})
                return ValidationFailed("state must be a valid flight state")
            try:
                state_filter = FlightState.parse(state)
            except ValueError:
                logger.warning(
                    "Invalid flight state filter", extra={"state": state.strip()}
                )
                return ValidationFailed(
                    f"state must be one of: {', '.join(FlightState.names())}"
                )

        now = IsoDateTime(self._clock.now())
        flights = sorted(
            (
                flight
                for flight in self._flight_repository.find_all()
                if flight.launches_after(now)
                and (state_filter is None or flight.state == state_filter)
            ),
            key=lambda f: (f.launch_date.value, f.id),
        )

        logger.info(
            "Listed future flights",
            extra={
                "count": len(flights),
                "state_filter": state_filter.value if state_filter else None,
            },
        )
        return Success(flights)
