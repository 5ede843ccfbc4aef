from services.rocket.domain.entity import Rocket
from services.rocket.domain.repository import RocketRepository
from services.shared.infrastructure.in_memory_store import InMemoryStore


class InMemoryRocketRepository(RocketRepository):
    """インメモリの RocketRepository 実装（ID: r0001, r0002, ...）"""

    def __init__(self) -> None:
        self._store: InMemoryStore[Rocket] = InMemoryStore(id_prefix="r")

    def add(self, rocket: Rocket) -> Rocket:
        return self._store.add(rocket)

    def find_by_id(self, rocket_id: str) -> Rocket | None:
        return self._store.get(rocket_id)

    def find_all(self) -> list[Rocket]:
        return self._store.values()
