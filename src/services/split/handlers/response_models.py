from __future__ import annotations

from pydantic import BaseModel

from services.split.applications.calculate_split import SplitCalculation
from services.split.domain.entity import BillSplit


class PersonData(BaseModel):
    """参加者データのレスポンスモデル"""

    id: str
    name: str
    nights: list[bool]


class SplitStateData(BaseModel):
    """割り勘状態のレスポンスモデル"""

    total_price: float
    check_in_date: str
    check_out_date: str
    people: list[PersonData]


class PersonCostData(BaseModel):
    """参加者ごとの負担額のレスポンスモデル"""

    person_id: str
    per_night: list[float]
    total: float


class CalculationData(BaseModel):
    """計算結果のレスポンスモデル"""

    nights: int
    night_dates: list[str]
    price_per_night: float
    costs: list[PersonCostData]


class SplitData(BaseModel):
    state: SplitStateData
    calculation: CalculationData
    summary: str | None
    share_token: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: SplitData


def to_response(
    split: BillSplit,
    calculation: SplitCalculation,
    summary: str | None,
    share_token: str,
) -> dict:
    """割り勘集約と計算結果をレスポンス辞書に変換する"""
    return SuccessResponse(
        data=SplitData(
            state=SplitStateData(
                total_price=split.total_price,
                check_in_date=split.stay_period.check_in,
                check_out_date=split.stay_period.check_out,
                people=[
                    PersonData(id=str(p.id), name=p.name, nights=list(p.nights))
                    for p in split.people
                ],
            ),
            calculation=CalculationData(
                nights=calculation.nights,
                night_dates=calculation.night_dates,
                price_per_night=calculation.price_per_night,
                costs=[
                    PersonCostData(
                        person_id=cost.person_id,
                        per_night=list(cost.per_night),
                        total=cost.total,
                    )
                    for cost in calculation.costs
                ],
            ),
            summary=summary,
            share_token=share_token,
        )
    ).model_dump()
