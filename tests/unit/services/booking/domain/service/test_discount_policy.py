from decimal import Decimal

import pytest

from services.booking.domain import DiscountRule, compute_final_price, determine_discount
from services.shared.domain import Money


class TestDetermineDiscount:
    """割引ルール決定のテスト"""

    def test_last_seat_has_no_discount(self):
        assert determine_discount(3, capacity=3, minimum_passengers=5) == (
            DiscountRule.LAST_SEAT
        )

    def test_one_away_from_minimum_passengers(self):
        assert determine_discount(4, capacity=10, minimum_passengers=5) == (
            DiscountRule.ONE_AWAY_FROM_MINIMUM_PASSENGERS
        )

    @pytest.mark.parametrize("booking_count", [1, 2, 3, 5, 6, 9])
    def test_standard_discount(self, booking_count):
        assert determine_discount(booking_count, capacity=10, minimum_passengers=5) == (
            DiscountRule.STANDARD
        )

    def test_capacity_rule_wins_when_both_apply(self):
        """定員 == 最少催行人数 - 1 の場合は満席ルールが優先される"""
        assert determine_discount(4, capacity=4, minimum_passengers=5) == (
            DiscountRule.LAST_SEAT
        )


class TestComputeFinalPrice:
    @pytest.mark.parametrize(
        "rule, expected",
        [
            (DiscountRule.LAST_SEAT, Decimal("100")),
            (DiscountRule.ONE_AWAY_FROM_MINIMUM_PASSENGERS, Decimal("70")),
            (DiscountRule.STANDARD, Decimal("90")),
        ],
    )
    def test_final_price(self, rule, expected):
        base_price = Money(amount=Decimal("100"))
        assert compute_final_price(base_price, rule).amount == expected
