from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from services.booking.infrastructure.in_memory_booking_repository import (
    InMemoryBookingRepository,
)
from services.flight.domain import Flight, FlightState
from services.flight.domain.event import FlightEventPublisher
from services.flight.infrastructure.in_memory_flight_repository import (
    InMemoryFlightRepository,
)
from services.rocket.domain import Rocket, RocketRange
from services.rocket.infrastructure.in_memory_rocket_repository import (
    InMemoryRocketRepository,
)
from services.shared.domain import IsoDateTime, Money
from services.shared.utils.clock import Clock
from services.shared.utils.operation_gate import OperationGate

FIXED_NOW = datetime(2025, 12, 17, 12, 0, 0, tzinfo=timezone.utc)


class FixedClock(Clock):
    """固定時刻を返すテスト用の Clock"""

    def __init__(self, now: datetime) -> None:
        self._now = now

    def now(self) -> datetime:
        return self._now


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def clock():
    """全テスト共通の固定時刻 Clock フィクスチャ"""
    return FixedClock(FIXED_NOW)


@pytest.fixture
def publisher():
    """FlightEventPublisher のモックフィクスチャ"""
    return MagicMock(spec=FlightEventPublisher)


@pytest.fixture
def gate():
    return OperationGate()


@pytest.fixture
def rocket_repository():
    return InMemoryRocketRepository()


@pytest.fixture
def flight_repository():
    return InMemoryFlightRepository()


@pytest.fixture
def booking_repository():
    return InMemoryBookingRepository()


@pytest.fixture
def add_rocket(rocket_repository):
    """Rocket を登録する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        capacity: int = 3,
        name: str = "Falcon",
        range: RocketRange = RocketRange.LEO,
    ) -> Rocket:
        return rocket_repository.add(Rocket(name=name, capacity=capacity, range=range))

    return _factory


@pytest.fixture
def add_flight(flight_repository):
    """Flight を登録する Factory fixture"""

    def _factory(
        rocket_id: str = "r0001",
        launch_date: datetime = FIXED_NOW + timedelta(days=30),
        base_price: Decimal = Decimal("100"),
        minimum_passengers: int = 5,
        state: FlightState = FlightState.SCHEDULED,
    ) -> Flight:
        return flight_repository.add(
            Flight(
                rocket_id=rocket_id,
                launch_date=IsoDateTime(launch_date),
                base_price=Money(amount=base_price),
                minimum_passengers=minimum_passengers,
                state=state,
            )
        )

    return _factory


@pytest.fixture
def create_flight():
    """Flight を生成する Factory fixture（未永続化, ID 付き）"""

    def _factory(
        state: FlightState = FlightState.SCHEDULED,
        flight_id: str = "f0001",
        rocket_id: str = "r0001",
        launch_date: datetime = FIXED_NOW + timedelta(days=1),
        base_price: Decimal = Decimal("100"),
        minimum_passengers: int = 5,
    ) -> Flight:
        return Flight(
            id=flight_id,
            rocket_id=rocket_id,
            launch_date=IsoDateTime(launch_date),
            base_price=Money(amount=base_price),
            minimum_passengers=minimum_passengers,
            state=state,
        )

    return _factory
