from decimal import Decimal

import pytest

from services.shared.domain import Money


class TestMoney:
    """Money のテスト"""

    def test_converts_numbers_to_decimal(self):
        assert Money(amount=100).amount == Decimal("100")
        assert Money(amount=0.1).amount == Decimal("0.1")

    def test_negative_amount_is_rejected(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            Money(amount=Decimal("-1"))

    def test_is_positive(self):
        assert Money(amount=Decimal("0.01")).is_positive()
        assert not Money(amount=Decimal("0")).is_positive()

    @pytest.mark.parametrize(
        "rate, expected",
        [
            (Decimal("0"), Decimal("100")),
            (Decimal("0.1"), Decimal("90")),
            (Decimal("0.3"), Decimal("70")),
            (Decimal("1"), Decimal("0")),
        ],
    )
    def test_discounted(self, rate, expected):
        assert Money(amount=Decimal("100")).discounted(rate).amount == expected

    @pytest.mark.parametrize("rate", [Decimal("-0.1"), Decimal("1.5")])
    def test_discount_rate_out_of_range(self, rate):
        with pytest.raises(ValueError):
            Money(amount=Decimal("100")).discounted(rate)
