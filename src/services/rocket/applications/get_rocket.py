from services.rocket.domain import Rocket
from services.rocket.domain.repository import RocketRepository
from services.shared.applications import NotFound, Result, Success


class GetRocketService:
    """ロケット参照サービス"""

    def __init__(self, repository: RocketRepository) -> None:
        self._repository = repository

    def get(self, rocket_id: str) -> Result[Rocket]:
        """ロケットIDで取得する"""
        rocket = self._repository.find_by_id(rocket_id)
        if rocket is None:
            return NotFound("rocket not found")
        return Success(rocket)

    def list(self) -> Result[list[Rocket]]:
        """全ロケットを ID 順で取得する"""
        return Success(self._repository.find_all())
