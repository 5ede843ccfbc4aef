from __future__ import annotations

from pydantic import BaseModel

from services.flight.domain.entity import Flight


class FlightData(BaseModel):
    """フライトデータのレスポンスモデル"""

    flight_id: str
    rocket_id: str
    launch_date: str
    base_price: str
    minimum_passengers: int
    state: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: FlightData


class ListResponse(BaseModel):
    """一覧レスポンスモデル"""

    status: str = "success"
    data: list[FlightData]


def to_data(flight: Flight) -> FlightData:
    return FlightData(
        flight_id=str(flight.id),
        rocket_id=flight.rocket_id,
        launch_date=str(flight.launch_date),
        base_price=str(flight.base_price.amount),
        minimum_passengers=flight.minimum_passengers,
        state=flight.state.value,
    )


def to_response(flight: Flight) -> dict:
    """Flight エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(data=to_data(flight)).model_dump()


def to_list_response(flights: list[Flight]) -> dict:
    return ListResponse(data=[to_data(f) for f in flights]).model_dump()
