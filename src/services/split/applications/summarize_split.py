from datetime import date

from services.split.applications.calculate_split import (
    CalculateSplitService,
    SplitCalculation,
)
from services.split.domain.entity import BillSplit


_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_night_date(night_date: str) -> str:
    """泊の日付を表示用に整形する（例: Mon, Jan 15）

    ロケールに依存しないよう英語の略称を固定で使う。
    """
    d = date.fromisoformat(night_date)
    return f"{_WEEKDAYS[d.weekday()]}, {_MONTHS[d.month - 1]} {d.day}"


class SummarizeSplitService:
    """コピー用のサマリーテキストを生成するユースケース"""

    def __init__(self, calculator: CalculateSplitService | None = None) -> None:
        self._calculator = calculator or CalculateSplitService()

    def summarize(
        self,
        split: BillSplit,
        currency_symbol: str = "$",
        calculation: SplitCalculation | None = None,
    ) -> str | None:
        """合計・参加者ごとの合計・泊ごとの内訳をテキストにする

        参加者がいない、または計算結果がない場合は None を返す。
        """
        calculation = calculation or self._calculator.calculate(split)
        if not split.people or not calculation.costs:
            return None

        def money(amount: float) -> str:
            return f"{currency_symbol}{amount:.2f}"

        lines = [
            f"Total: {money(split.total_price)} "
            f"({calculation.nights} nights @ {money(calculation.price_per_night)}/night)",
            f"{split.stay_period.check_in} to {split.stay_period.check_out}",
            "",
        ]

        # 計算結果は参加者一覧と同じ順序
        for person, cost in zip(split.people, calculation.costs):
            if cost.total == 0:
                continue

            lines.append(f"{person.name or 'Unnamed'}: {money(cost.total)}")
            for i, night_date in enumerate(calculation.night_dates):
                if person.attends(i) and cost.per_night[i] > 0:
                    lines.append(
                        f"- {format_night_date(night_date)}: {money(cost.per_night[i])}"
                    )
            lines.append("")

        return "\n".join(lines)
