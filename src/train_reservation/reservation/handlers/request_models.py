from pydantic import BaseModel, Field


class TrainSelectionRequest(BaseModel):
    """列車選択の入力スキーマ"""

    train_number: int = Field(..., description="列車番号", examples=[101])


class BookTicketRequest(BaseModel):
    """チケット予約リクエストスキーマ"""

    train_number: int = Field(..., description="列車番号", examples=[101])

    passenger_name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="乗客名",
        examples=["Alice"],
    )

    seat_number: int = Field(..., description="座席番号", examples=[5])

    model_config = {
        "str_strip_whitespace": True,
        "json_schema_extra": {
            "examples": [
                {"train_number": 101, "passenger_name": "Alice", "seat_number": 5}
            ]
        },
    }


class TicketIdRequest(BaseModel):
    """チケットID指定のリクエストスキーマ（キャンセル・照会）"""

    ticket_id: int = Field(..., description="チケットID", examples=[1001])
