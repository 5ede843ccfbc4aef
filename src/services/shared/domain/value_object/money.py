from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Money:
    """金額"""

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return str(self.amount)

    def is_positive(self) -> bool:
        """0 より大きいかどうか"""
        return self.amount > 0

    def discounted(self, rate: Decimal) -> Money:
        """割引率を適用した金額を返す

        例: rate=Decimal("0.3") の場合、元の金額の 70%
        """
        if rate < 0 or rate > 1:
            raise ValueError(f"Discount rate must be between 0 and 1: {rate}")
        return Money(amount=self.amount * (Decimal("1") - rate))
