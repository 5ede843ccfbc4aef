from abc import ABC, abstractmethod
from datetime import datetime, timezone


class Clock(ABC):
    """現在時刻の取得を抽象化する"""

    @abstractmethod
    def now(self) -> datetime:
        """現在時刻（UTC, タイムゾーン付き）"""
        raise NotImplementedError


class SystemClock(Clock):
    """システム時計"""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
