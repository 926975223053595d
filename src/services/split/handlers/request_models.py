from pydantic import BaseModel, Field, field_validator

from services.split.applications.edit_split import EditAction, EditOperation
from services.split.domain.factory import SplitDetails
from services.split.domain.value_object import parse_price


class PersonRequest(BaseModel):
    """参加者のリクエストモデル"""

    id: str = Field(..., min_length=1, max_length=64)
    name: str = Field(default="", max_length=100, description="表示名（空欄可）")
    nights: list[bool] = Field(
        default_factory=list,
        description="泊ごとの宿泊有無",
    )


class SplitStateRequest(BaseModel):
    """割り勘状態のリクエストモデル"""

    total_price: float = Field(
        default=0.0,
        description="合計料金（数値として解釈できない値は 0）",
    )
    check_in_date: str = Field(
        default="",
        description="チェックイン日（YYYY-MM-DD形式）",
        examples=["2024-01-15"],
    )
    check_out_date: str = Field(
        default="",
        description="チェックアウト日（YYYY-MM-DD形式）",
        examples=["2024-01-18"],
    )
    people: list[PersonRequest] = Field(default_factory=list, max_length=100)

    @field_validator("total_price", mode="before")
    @classmethod
    def convert_price_to_float(cls, v: object) -> float:
        return parse_price(v)

    def to_details(self) -> SplitDetails:
        return {
            "total_price": self.total_price,
            "check_in_date": self.check_in_date,
            "check_out_date": self.check_out_date,
            "people": [
                {"id": p.id, "name": p.name, "nights": p.nights} for p in self.people
            ],
        }


class EditOperationRequest(BaseModel):
    """編集操作のリクエストモデル"""

    action: EditAction
    person_id: str | None = Field(default=None, min_length=1)
    name: str = Field(default="", max_length=100)
    night_index: int = Field(default=0, ge=0)
    check_in_date: str = ""
    check_out_date: str = ""
    total_price: float = 0.0

    @field_validator("total_price", mode="before")
    @classmethod
    def convert_price_to_float(cls, v: object) -> float:
        return parse_price(v)

    def to_operation(self) -> EditOperation:
        return EditOperation(**self.model_dump())


class EditSplitRequest(BaseModel):
    """割り勘編集リクエストモデル"""

    state: SplitStateRequest = Field(default_factory=SplitStateRequest)
    operation: EditOperationRequest


class RestoreSplitRequest(BaseModel):
    """共有リンクからの復元リクエストモデル"""

    token: str = Field(default="", description="URLフラグメント（先頭の # は省略可）")
