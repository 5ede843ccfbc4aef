from services.flight.domain.enum import FlightState
from services.flight.domain.event import (
    FlightCancelled,
    FlightConfirmed,
    FlightPerformed,
    FlightSoldOut,
)
from services.shared.domain import AggregateRoot, IsoDateTime, Money
from services.shared.domain.exception import BusinessRuleViolationException


class Flight(AggregateRoot[str]):
    """フライト

    生成後に変更されるのは状態（state）のみで、状態遷移は以下のメソッドを経由する。

    - record_booking: 予約数に応じた自動遷移（CONFIRMED / SOLD_OUT）
    - cancel: 欠航（冪等）
    - perform: 運航済み（冪等）
    """

    def __init__(
        self,
        rocket_id: str,
        launch_date: IsoDateTime,
        base_price: Money,
        minimum_passengers: int,
        state: FlightState = FlightState.SCHEDULED,
        id: str | None = None,
    ) -> None:
        super().__init__(id)

        self._rocket_id = rocket_id
        self._launch_date = launch_date
        self._base_price = base_price
        self._minimum_passengers = minimum_passengers
        self._state = state

        self._validate()

    def _validate(self) -> None:
        if not self._base_price.is_positive():
            raise BusinessRuleViolationException("Base price must be positive")
        if self._minimum_passengers <= 0:
            raise BusinessRuleViolationException(
                "Minimum passengers must be positive"
            )

    @property
    def rocket_id(self) -> str:
        return self._rocket_id

    @property
    def launch_date(self) -> IsoDateTime:
        return self._launch_date

    @property
    def base_price(self) -> Money:
        return self._base_price

    @property
    def minimum_passengers(self) -> int:
        return self._minimum_passengers

    @property
    def state(self) -> FlightState:
        return self._state

    def is_bookable(self) -> bool:
        return self._state.is_bookable

    def launches_after(self, moment: IsoDateTime) -> bool:
        """指定日時より後に打ち上げるかどうか"""
        return self._launch_date.is_after(moment)

    def next_state_after_booking(self, booking_count: int, capacity: int) -> FlightState:
        """予約数から次の状態を導出する（満席判定を優先）"""
        if booking_count >= capacity and self._state != FlightState.SOLD_OUT:
            return FlightState.SOLD_OUT
        if (
            booking_count >= self._minimum_passengers
            and self._state == FlightState.SCHEDULED
        ):
            return FlightState.CONFIRMED
        return self._state

    def record_booking(self, booking_count: int, capacity: int) -> bool:
        """予約追加後の状態遷移を適用する

        Returns:
            bool: 状態が変わった場合 True
        """
        if not self.is_bookable():
            raise BusinessRuleViolationException(
                f"Cannot record a booking on a {self._state.value} flight"
            )

        from_state = self._state
        to_state = self.next_state_after_booking(booking_count, capacity)
        if to_state == from_state:
            return False

        self._state = to_state
        if to_state == FlightState.CONFIRMED:
            self.add_domain_event(
                FlightConfirmed(
                    flight_id=self.id,
                    booking_count=booking_count,
                    minimum_passengers=self._minimum_passengers,
                    capacity=capacity,
                )
            )
        else:
            self.add_domain_event(
                FlightSoldOut(
                    flight_id=self.id,
                    previous_state=from_state,
                    booking_count=booking_count,
                    capacity=capacity,
                )
            )
        return True

    def cancel(self, booking_count: int = 0) -> bool:
        """欠航にする

        Returns:
            bool: 状態が変わった場合 True（すでに CANCELLED の場合は False）
        """
        if self._state == FlightState.CANCELLED:
            return False
        if self._state == FlightState.DONE:
            raise BusinessRuleViolationException(
                "flight cannot be cancelled because it is already DONE"
            )

        from_state = self._state
        self._state = FlightState.CANCELLED
        self.add_domain_event(
            FlightCancelled(
                flight_id=self.id,
                previous_state=from_state,
                booking_count=booking_count,
            )
        )
        return True

    def perform(self) -> bool:
        """運航済みにする

        Returns:
            bool: 状態が変わった場合 True（すでに DONE の場合は False）
        """
        if self._state == FlightState.DONE:
            return False
        if self._state == FlightState.CANCELLED:
            raise BusinessRuleViolationException(
                "flight cannot be performed because it is CANCELLED"
            )

        from_state = self._state
        self._state = FlightState.DONE
        self.add_domain_event(
            FlightPerformed(flight_id=self.id, previous_state=from_state)
        )
        return True
