from dataclasses import dataclass

from services.split.domain.entity import BillSplit
from services.split.domain.service.cost_calculator import PersonCost


@dataclass(frozen=True)
class SplitCalculation:
    """割り勘の計算結果"""

    nights: int
    night_dates: list[str]
    price_per_night: float
    costs: list[PersonCost]

    def total_for(self, person_id: str) -> float:
        """参加者の合計負担額（計算結果がなければ 0）"""
        for cost in self.costs:
            if cost.person_id == person_id:
                return cost.total
        return 0.0


class CalculateSplitService:
    """割り勘計算のユースケース"""

    def calculate(self, split: BillSplit) -> SplitCalculation:
        """現在の状態から負担額を計算する"""
        return SplitCalculation(
            nights=split.nights(),
            night_dates=split.night_dates(),
            price_per_night=split.price_per_night(),
            costs=split.costs(),
        )
