from __future__ import annotations

from enum import Enum


class RocketRange(str, Enum):
    """ロケットの航続範囲"""

    LEO = "LEO"
    MOON = "MOON"
    MARS = "MARS"

    @classmethod
    def parse(cls, value: str) -> RocketRange:
        """大文字・小文字を区別せずに変換する"""
        try:
            return cls(value.strip().upper())
        except ValueError as e:
            raise ValueError(f"Unknown rocket range: {value}") from e

    @classmethod
    def names(cls) -> list[str]:
        return [member.value for member in cls]
