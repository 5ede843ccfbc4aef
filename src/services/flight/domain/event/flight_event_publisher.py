from abc import ABC, abstractmethod
from collections.abc import Iterable

from .flight_events import FlightEvent


class FlightEventPublisher(ABC):
    """フライトのドメインイベントを後続処理（通知・払い戻し）へ渡す"""

    @abstractmethod
    def publish(self, events: Iterable[FlightEvent]) -> None:
        raise NotImplementedError
