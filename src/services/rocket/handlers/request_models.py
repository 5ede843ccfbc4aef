from pydantic import BaseModel, Field


class CreateRocketRequest(BaseModel):
    """ロケット登録リクエストスキーマ

    値の範囲（定員 1〜10 など）はアプリケーションサービスで検証する。
    """

    name: str = Field(default="", description="ロケット名", examples=["Falcon"])
    capacity: int = Field(..., description="定員（1〜10）", examples=[6])
    speed: int | None = Field(default=None, description="速度", examples=[27000])
    range: str | None = Field(
        default=None,
        description="航続範囲（LEO / MOON / MARS, 省略時 LEO）",
        examples=["MOON"],
    )
