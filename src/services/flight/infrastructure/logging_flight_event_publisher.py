from collections.abc import Iterable

from services.flight.domain.event import (
    FlightCancelled,
    FlightConfirmed,
    FlightEvent,
    FlightEventPublisher,
    FlightPerformed,
    FlightSoldOut,
)
from services.shared.utils.logger import get_logger

logger = get_logger()


class LoggingFlightEventPublisher(FlightEventPublisher):
    """ドメインイベントを構造化ログとして出力する Publisher

    通知・払い戻しのワークフロー本体は外部に委ね、ここではトリガーを記録する。
    """

    def publish(self, events: Iterable[FlightEvent]) -> None:
        for event in events:
            match event:
                case FlightConfirmed():
                    logger.info(
                        "Triggering confirmation notification workflow",
                        extra={
                            "flight_id": event.flight_id,
                            "booking_count": event.booking_count,
                            "minimum_passengers": event.minimum_passengers,
                            "capacity": event.capacity,
                        },
                    )
                case FlightCancelled():
                    logger.info(
                        "Triggering cancellation notification/refund workflow",
                        extra={
                            "flight_id": event.flight_id,
                            "previous_state": event.previous_state.value,
                            "booking_count": event.booking_count,
                        },
                    )
                case FlightSoldOut():
                    logger.info(
                        "Flight sold out",
                        extra={
                            "flight_id": event.flight_id,
                            "booking_count": event.booking_count,
                            "capacity": event.capacity,
                        },
                    )
                case FlightPerformed():
                    logger.info(
                        "Flight performed",
                        extra={"flight_id": event.flight_id},
                    )
