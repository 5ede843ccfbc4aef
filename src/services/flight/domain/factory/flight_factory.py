from datetime import datetime
from decimal import Decimal
from typing import TypedDict

from services.flight.domain.entity import Flight
from services.flight.domain.enum import FlightState
from services.shared.domain import IsoDateTime, Money

DEFAULT_MINIMUM_PASSENGERS = 5


class FlightDetails(TypedDict):
    """フライトの入力データ構造（検証済み）"""

    rocket_id: str
    launch_date: datetime
    base_price: Decimal
    minimum_passengers: int | None


class FlightFactory:
    """フライトエンティティのファクトリ

    - プリミティブ型から Value Object への変換
    - 最少催行人数の既定値の補完
    - 初期状態の設定
    """

    def create(self, details: FlightDetails) -> Flight:
        """新規フライトを生成する（SCHEDULED 状態、ID 未採番）"""
        minimum_passengers = details["minimum_passengers"]
        if minimum_passengers is None:
            minimum_passengers = DEFAULT_MINIMUM_PASSENGERS

        return Flight(
            rocket_id=details["rocket_id"],
            launch_date=IsoDateTime(details["launch_date"]),
            base_price=Money(amount=details["base_price"]),
            minimum_passengers=minimum_passengers,
            state=FlightState.SCHEDULED,
        )
