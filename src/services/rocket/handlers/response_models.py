from __future__ import annotations

from pydantic import BaseModel

from services.rocket.domain.entity import Rocket


class RocketData(BaseModel):
    """ロケットデータのレスポンスモデル"""

    rocket_id: str
    name: str
    capacity: int
    speed: int | None
    range: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: RocketData


class ListResponse(BaseModel):
    """一覧レスポンスモデル"""

    status: str = "success"
    data: list[RocketData]


def to_data(rocket: Rocket) -> RocketData:
    return RocketData(
        rocket_id=str(rocket.id),
        name=rocket.name,
        capacity=rocket.capacity,
        speed=rocket.speed,
        range=rocket.range.value,
    )


def to_response(rocket: Rocket) -> dict:
    """Rocket エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(data=to_data(rocket)).model_dump()


def to_list_response(rockets: list[Rocket]) -> dict:
    return ListResponse(data=[to_data(r) for r in rockets]).model_dump()
