from dataclasses import dataclass

from services.flight.domain.enum import FlightState


@dataclass(frozen=True)
class FlightConfirmed:
    """最少催行人数に達した（確定通知のトリガー）"""

    flight_id: str
    booking_count: int
    minimum_passengers: int
    capacity: int


@dataclass(frozen=True)
class FlightSoldOut:
    """満席になった"""

    flight_id: str
    previous_state: FlightState
    booking_count: int
    capacity: int


@dataclass(frozen=True)
class FlightCancelled:
    """欠航になった（払い戻し・通知のトリガー）"""

    flight_id: str
    previous_state: FlightState
    booking_count: int


@dataclass(frozen=True)
class FlightPerformed:
    """運航済みになった"""

    flight_id: str
    previous_state: FlightState


FlightEvent = FlightConfirmed | FlightSoldOut | FlightCancelled | FlightPerformed
