from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class IsoDateTime:
    """日時(ISO 8601形式)

    タイムゾーン情報を持たない日時は UTC として扱う。
    """

    value: datetime

    def __post_init__(self) -> None:
        if self.value.tzinfo is None:
            object.__setattr__(self, "value", self.value.replace(tzinfo=timezone.utc))

    @classmethod
    def from_string(cls, s: str) -> IsoDateTime:
        """ISO 8601 形式の文字列から生成"""
        try:
            dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
        except ValueError as e:
            raise ValueError(f"Invalid ISO 8601 datetime: {s}") from e
        return cls(value=dt)

    def __str__(self) -> str:
        return self.value.isoformat()

    def __lt__(self, other: IsoDateTime) -> bool:
        return self.value < other.value

    def is_before(self, other: IsoDateTime) -> bool:
        """他の日時より前かどうか"""
        return self.value < other.value

    def is_after(self, other: IsoDateTime) -> bool:
        """他の日時より後かどうか"""
        return self.value > other.value
