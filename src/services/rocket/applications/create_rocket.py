from services.rocket.domain import MAX_CAPACITY, MIN_CAPACITY, Rocket, RocketRange
from services.rocket.domain.repository import RocketRepository
from services.shared.applications import Result, Success, ValidationFailed
from services.shared.utils.logger import get_logger
from services.shared.utils.validators import is_blank

logger = get_logger()


class CreateRocketService:
    """ロケット登録サービス"""

    def __init__(self, repository: RocketRepository) -> None:
        self._repository = repository

    def create(
        self,
        name: str | None,
        capacity: int,
        speed: int | None = None,
        range: str | None = None,
    ) -> Result[Rocket]:
        """入力値を検証してロケットを登録する"""
        failure = self._validate(name, capacity, speed)
        if failure is not None:
            logger.warning("Rocket validation failed", extra={"error": failure.error})
            return failure

        try:
            rocket_range = RocketRange.LEO if is_blank(range) else RocketRange.parse(range)
        except ValueError:
            failure = ValidationFailed(
                f"range must be one of: {', '.join(RocketRange.names())}"
            )
            logger.warning("Rocket validation failed", extra={"error": failure.error})
            return failure

        rocket = Rocket(
            name=name.strip(),
            capacity=capacity,
            range=rocket_range,
            speed=speed,
        )
        created = self._repository.add(rocket)
        logger.info("Created rocket", extra={"rocket_id": created.id})
        return Success(created)

    @staticmethod
    def _validate(
        name: str | None, capacity: int, speed: int | None
    ) -> ValidationFailed | None:
        if is_blank(name):
            return ValidationFailed("name is required")
        if not MIN_CAPACITY <= capacity <= MAX_CAPACITY:
            return ValidationFailed(
                f"capacity must be > 0 and <= {MAX_CAPACITY}"
            )
        if speed is not None and speed <= 0:
            return ValidationFailed("speed must be > 0")
        return None
