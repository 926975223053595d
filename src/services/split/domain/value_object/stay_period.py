from __future__ import annotations

from dataclasses import dataclass

from services.split.domain.service.cost_calculator import (
    calculate_nights,
    get_night_dates,
)


@dataclass(frozen=True)
class StayPeriod:
    """滞在期間(チェックイン日 + チェックアウト日)

    入力途中の値も保持するため、不正な日付でも例外にせず 0 泊として扱う。
    """

    check_in: str = ""
    check_out: str = ""

    def nights(self) -> int:
        """宿泊数を計算する"""
        return calculate_nights(self.check_in, self.check_out)

    def night_dates(self) -> list[str]:
        """各泊の日付を返す"""
        return get_night_dates(self.check_in, self.nights())

    def is_empty(self) -> bool:
        return self.nights() == 0

    @classmethod
    def empty(cls) -> StayPeriod:
        return cls(check_in="", check_out="")
