from services.rocket.domain.enum import RocketRange
from services.shared.domain import AggregateRoot
from services.shared.domain.exception import BusinessRuleViolationException

MIN_CAPACITY = 1
MAX_CAPACITY = 10


class Rocket(AggregateRoot[str]):
    """ロケット

    生成後は変更されない（フライト・予約側からは参照のみ）。
    """

    def __init__(
        self,
        name: str,
        capacity: int,
        range: RocketRange = RocketRange.LEO,
        speed: int | None = None,
        id: str | None = None,
    ) -> None:
        super().__init__(id)

        self._name = name
        self._capacity = capacity
        self._range = range
        self._speed = speed

        self._validate()

    def _validate(self) -> None:
        if not self._name.strip():
            raise BusinessRuleViolationException("Rocket name must not be blank")
        if not MIN_CAPACITY <= self._capacity <= MAX_CAPACITY:
            raise BusinessRuleViolationException(
                f"Rocket capacity must be between {MIN_CAPACITY} and {MAX_CAPACITY}"
            )
        if self._speed is not None and self._speed <= 0:
            raise BusinessRuleViolationException("Rocket speed must be positive")

    @property
    def name(self) -> str:
        return self._name

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def range(self) -> RocketRange:
        return self._range

    @property
    def speed(self) -> int | None:
        return self._speed
