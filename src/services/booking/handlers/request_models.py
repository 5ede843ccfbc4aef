from pydantic import BaseModel, Field


class CreateBookingRequest(BaseModel):
    """予約リクエストスキーマ（空白のみの値はアプリケーションサービスで検証する）"""

    passenger_name: str = Field(
        default="", description="搭乗者名", examples=["Ada Lovelace"]
    )
    passenger_email: str = Field(
        default="", description="搭乗者メールアドレス", examples=["ada@example.com"]
    )
