from services.flight.domain.entity import Flight
from services.flight.domain.repository import FlightRepository
from services.shared.infrastructure.in_memory_store import InMemoryStore


class InMemoryFlightRepository(FlightRepository):
    """インメモリの FlightRepository 実装（ID: f0001, f0002, ...）"""

    def __init__(self) -> None:
        self._store: InMemoryStore[Flight] = InMemoryStore(id_prefix="f")

    def add(self, flight: Flight) -> Flight:
        return self._store.add(flight)

    def find_by_id(self, flight_id: str) -> Flight | None:
        return self._store.get(flight_id)

    def find_all(self) -> list[Flight]:
        flights = self._store.values()
        return sorted(flights, key=lambda f: (f.launch_date.value, f.id))

    def update(self, flight: Flight) -> Flight | None:
        return self._store.replace(flight)
