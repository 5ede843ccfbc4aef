from decimal import Decimal
from enum import Enum


class DiscountRule(str, Enum):
    """割引ルール"""

    LAST_SEAT = "LAST_SEAT"
    ONE_AWAY_FROM_MINIMUM_PASSENGERS = "ONE_AWAY_FROM_MINIMUM_PASSENGERS"
    STANDARD = "STANDARD"

    @property
    def rate(self) -> Decimal:
        """割引率"""
        return _RATES[self]


_RATES = {
    DiscountRule.LAST_SEAT: Decimal("0.0"),
    DiscountRule.ONE_AWAY_FROM_MINIMUM_PASSENGERS: Decimal("0.3"),
    DiscountRule.STANDARD: Decimal("0.1"),
}
