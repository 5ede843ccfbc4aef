from services.booking.domain import Booking, compute_final_price, determine_discount
from services.booking.domain.repository import BookingRepository
from services.flight.domain import Flight
from services.flight.domain.event import FlightEventPublisher
from services.flight.domain.repository import FlightRepository
from services.rocket.domain.repository import RocketRepository
from services.shared.applications import (
    Conflict,
    NotFound,
    Result,
    Success,
    UnexpectedFailure,
    ValidationFailed,
)
from services.shared.domain import Money
from services.shared.utils.logger import get_logger
from services.shared.utils.operation_gate import OperationGate
from services.shared.utils.validators import is_blank

logger = get_logger()


class CreateBookingService:
    """予約受付サービス

    フライト単位のゲートを取得した状態で、以下を 1 つの処理単位として実行する。

    1. フライト・ロケットの最新状態を読み直す
    2. 予約可能な状態か、定員に空きがあるかを確認する
    3. 割引ルールに従って最終価格を計算し、予約を保存する
    4. 予約数に応じてフライトの状態を遷移させる

    予約の保存後に状態の更新に失敗した場合、予約は保存されたまま
    UnexpectedFailure を返す（補償処理は行わない）。
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        flight_repository: FlightRepository,
        rocket_repository: RocketRepository,
        gate: OperationGate,
        publisher: FlightEventPublisher,
    ) -> None:
        self._booking_repository = booking_repository
        self._flight_repository = flight_repository
        self._rocket_repository = rocket_repository
        self._gate = gate
        self._publisher = publisher

    def create(
        self,
        flight_id: str,
        passenger_name: str | None,
        passenger_email: str | None,
    ) -> Result[Booking]:
        """フライトに予約を追加する"""
        failure = self._validate(flight_id, passenger_name, passenger_email)
        if failure is not None:
            logger.warning("Booking validation failed", extra={"error": failure.error})
            return failure

        with self._gate.acquire(flight_id):
            flight = self._flight_repository.find_by_id(flight_id)
            if flight is None:
                return NotFound("flight not found")

            if not flight.is_bookable():
                logger.warning(
                    "Rejected booking",
                    extra={
                        "flight_id": flight_id,
                        "state": flight.state.value,
                        "reason": "flight is not bookable",
                    },
                )
                return Conflict("flight is not bookable")

            rocket = self._rocket_repository.find_by_id(flight.rocket_id)
            if rocket is None:
                logger.error(
                    "Rocket not found for flight",
                    extra={"flight_id": flight_id, "rocket_id": flight.rocket_id},
                )
                return UnexpectedFailure("rocket not found for flight")

            capacity = rocket.capacity
            current_count = self._booking_repository.count_by_flight_id(flight_id)
            if current_count >= capacity:
                logger.warning(
                    "Rejected booking",
                    extra={
                        "flight_id": flight_id,
                        "current": current_count,
                        "capacity": capacity,
                        "reason": "flight capacity exceeded",
                    },
                )
                return Conflict("flight capacity exceeded")

            new_count = current_count + 1
            rule = determine_discount(new_count, capacity, flight.minimum_passengers)
            final_price = compute_final_price(flight.base_price, rule)

            created = self._add_booking(
                flight_id, passenger_name.strip(), passenger_email.strip(), final_price
            )
            logger.info(
                "Computed final price",
                extra={
                    "flight_id": flight_id,
                    "discount_rule": rule.value,
                    "final_price": str(final_price),
                },
            )

            transition_failure = self._transition_flight_state(
                flight, new_count, capacity
            )
            if transition_failure is not None:
                return transition_failure

            logger.info(
                "Created booking",
                extra={"booking_id": created.id, "flight_id": flight_id},
            )
            return Success(created)

    @staticmethod
    def _validate(
        flight_id: str, passenger_name: str | None, passenger_email: str | None
    ) -> ValidationFailed | None:
        if is_blank(flight_id):
            return ValidationFailed("flight_id is required")
        if is_blank(passenger_name):
            return ValidationFailed("passenger_name is required")
        if is_blank(passenger_email):
            return ValidationFailed("passenger_email is required")
        return None

    def _add_booking(
        self,
        flight_id: str,
        passenger_name: str,
        passenger_email: str,
        final_price: Money,
    ) -> Booking:
        booking = Booking(
            flight_id=flight_id,
            passenger_name=passenger_name,
            passenger_email=passenger_email,
            final_price=final_price,
        )
        return self._booking_repository.add(booking)

    def _transition_flight_state(
        self, flight: Flight, new_count: int, capacity: int
    ) -> UnexpectedFailure | None:
        """予約数に応じてフライトの状態を遷移させる（変化がなければ何もしない）"""
        from_state = flight.state
        if not flight.record_booking(new_count, capacity):
            return None

        events = flight.flush_domain_events()
        updated = self._flight_repository.update(flight)
        if updated is None:
            logger.error(
                "Failed to update flight state",
                extra={
                    "flight_id": flight.id,
                    "from_state": from_state.value,
                    "to_state": flight.state.value,
                },
            )
            return UnexpectedFailure("failed to transition flight state")

        logger.info(
            "Flight transitioned",
            extra={
                "flight_id": flight.id,
                "from_state": from_state.value,
                "to_state": updated.state.value,
                "booking_count": new_count,
                "minimum_passengers": updated.minimum_passengers,
                "capacity": capacity,
            },
        )
        self._publisher.publish(events)
        return None
