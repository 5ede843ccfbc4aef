from datetime import datetime
from decimal import Decimal

from services.flight.domain import Flight, FlightFactory
from services.flight.domain.factory import DEFAULT_MINIMUM_PASSENGERS
from services.flight.domain.repository import FlightRepository
from services.rocket.domain.repository import RocketRepository
from services.shared.applications import NotFound, Result, Success, ValidationFailed
from services.shared.domain import IsoDateTime
from services.shared.utils.clock import Clock
from services.shared.utils.logger import get_logger
from services.shared.utils.validators import is_blank

logger = get_logger()


class CreateFlightService:
    """フライト登録サービス

    入力値を検証し、参照先のロケットが存在する場合のみ SCHEDULED 状態で登録する。
    """

    def __init__(
        self,
        flight_repository: FlightRepository,
        rocket_repository: RocketRepository,
        factory: FlightFactory,
        clock: Clock,
    ) -> None:
        self._flight_repository = flight_repository
        self._rocket_repository = rocket_repository
        self._factory = factory
        self._clock = clock

    def create(
        self,
        rocket_id: str | None,
        launch_date: datetime,
        base_price: Decimal,
        minimum_passengers: int | None = None,
    ) -> Result[Flight]:
        """フライトを登録する"""
        failure = self._validate(rocket_id, launch_date, base_price, minimum_passengers)
        if failure is not None:
            logger.warning("Flight validation failed", extra={"error": failure.error})
            return failure

        rocket_id = rocket_id.strip()
        rocket = self._rocket_repository.find_by_id(rocket_id)
        if rocket is None:
            logger.warning(
                "Rocket not found when creating flight", extra={"rocket_id": rocket_id}
            )
            return NotFound("rocket not found")

        flight = self._factory.create(
            {
                "rocket_id": rocket_id,
                "launch_date": launch_date,
                "base_price": base_price,
                "minimum_passengers": minimum_passengers,
            }
        )
        created = self._flight_repository.add(flight)
        logger.info(
            "Created flight",
            extra={"flight_id": created.id, "rocket_id": created.rocket_id},
        )
        return Success(created)

    def _validate(
        self,
        rocket_id: str | None,
        launch_date: datetime,
        base_price: Decimal,
        minimum_passengers: int | None,
    ) -> ValidationFailed | None:
        if is_blank(rocket_id):
            return ValidationFailed("rocket_id is required")

        now = IsoDateTime(self._clock.now())
        if not IsoDateTime(launch_date).is_after(now):
            return ValidationFailed("launch_date must be in the future")

        if base_price <= 0:
            return ValidationFailed("base_price must be > 0")

        if minimum_passengers is None:
            minimum_passengers = DEFAULT_MINIMUM_PASSENGERS
        if minimum_passengers <= 0:
            return ValidationFailed("minimum_passengers must be > 0")

        return None
