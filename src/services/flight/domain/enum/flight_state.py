from __future__ import annotations

from enum import Enum


class FlightState(str, Enum):
    """フライトのライフサイクル状態

    SCHEDULED -> CONFIRMED -> SOLD_OUT の順に進み、SCHEDULED には戻らない。
    CANCELLED と DONE は終端状態。
    """

    SCHEDULED = "SCHEDULED"
    CONFIRMED = "CONFIRMED"
    SOLD_OUT = "SOLD_OUT"
    CANCELLED = "CANCELLED"
    DONE = "DONE"

    @property
    def is_bookable(self) -> bool:
        """新規予約を受け付ける状態かどうか"""
        return self in (FlightState.SCHEDULED, FlightState.CONFIRMED)

    @classmethod
    def parse(cls, value: str) -> FlightState:
        """大文字・小文字を区別せずに変換する"""
        try:
            return cls(value.strip().upper())
        except ValueError as e:
            raise ValueError(f"Unknown flight state: {value}") from e

    @classmethod
    def names(cls) -> list[str]:
        return [member.value for member in cls]
