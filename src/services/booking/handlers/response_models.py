from __future__ import annotations

from pydantic import BaseModel

from services.booking.domain.entity import Booking


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    booking_id: str
    flight_id: str
    passenger_name: str
    passenger_email: str
    final_price: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: BookingData


class ListResponse(BaseModel):
    """一覧レスポンスモデル"""

    status: str = "success"
    data: list[BookingData]


def to_data(booking: Booking) -> BookingData:
    return BookingData(
        booking_id=str(booking.id),
        flight_id=booking.flight_id,
        passenger_name=booking.passenger_name,
        passenger_email=booking.passenger_email,
        final_price=str(booking.final_price.amount),
    )


def to_response(booking: Booking) -> dict:
    """Booking エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(data=to_data(booking)).model_dump()


def to_list_response(bookings: list[Booking]) -> dict:
    return ListResponse(data=[to_data(b) for b in bookings]).model_dump()
