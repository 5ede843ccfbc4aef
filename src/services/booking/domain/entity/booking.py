from services.shared.domain import AggregateRoot, Money
from services.shared.domain.exception import BusinessRuleViolationException


class Booking(AggregateRoot[str]):
    """予約

    最終価格は作成時に一度だけ計算され、以後変更されない。
    """

    def __init__(
        self,
        flight_id: str,
        passenger_name: str,
        passenger_email: str,
        final_price: Money,
        id: str | None = None,
    ) -> None:
        super().__init__(id)

        self._flight_id = flight_id
        self._passenger_name = passenger_name
        self._passenger_email = passenger_email
        self._final_price = final_price

        self._validate_passenger()

    def _validate_passenger(self) -> None:
        if not self._passenger_name.strip():
            raise BusinessRuleViolationException("Passenger name must not be blank")
        if not self._passenger_email.strip():
            raise BusinessRuleViolationException("Passenger email must not be blank")

    @property
    def flight_id(self) -> str:
        return self._flight_id

    @property
    def passenger_name(self) -> str:
        return self._passenger_name

    @property
    def passenger_email(self) -> str:
        return self._passenger_email

    @property
    def final_price(self) -> Money:
        return self._final_price
