from datetime import datetime
from decimal import Decimal, InvalidOperation

from pydantic import BaseModel, Field, field_validator

from services.shared.utils.validators import to_decimal


class CreateFlightRequest(BaseModel):
    """フライト登録リクエストスキーマ

    業務ルール（未来日時・正の料金など）はアプリケーションサービスで検証する。
    """

    rocket_id: str = Field(default="", description="ロケットID", examples=["r0001"])

    launch_date: datetime = Field(
        ...,
        description="打ち上げ日時（ISO 8601形式, タイムゾーンなしは UTC）",
        examples=["2030-01-01T10:00:00Z"],
    )

    base_price: Decimal = Field(..., description="基本料金", examples=[100000])

    minimum_passengers: int | None = Field(
        default=None,
        description="最少催行人数（省略時 5）",
        examples=[5],
    )

    @field_validator("base_price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        """Decimalに変換する（変換できない値は ValidationError として扱う）"""
        try:
            return to_decimal(v)
        except InvalidOperation as e:
            raise ValueError(f"base_price must be a number: {v!r}") from e
