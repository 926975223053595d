"""宿泊費の按分計算

すべて副作用のない純粋関数。どんな入力に対しても例外を送出しない。
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Protocol

ONE_DAY = timedelta(days=1)
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


class Attendee(Protocol):
    """按分計算に必要な参加者のインターフェース"""

    @property
    def id(self) -> object: ...

    def attends(self, night_index: int) -> bool: ...


@dataclass(frozen=True)
class PersonCost:
    """参加者ごとの負担額（計算結果、保存しない）"""

    person_id: str
    per_night: tuple[float, ...]
    total: float


def parse_date(value: object) -> date | None:
    """YYYY-MM-DD 形式の文字列を日付に変換する（失敗時は None）"""
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def calculate_nights(check_in: str | None, check_out: str | None) -> int:
    """チェックイン日からチェックアウト日までの宿泊数を計算する"""
    check_in_date = parse_date(check_in)
    check_out_date = parse_date(check_out)
    if check_in_date is None or check_out_date is None:
        return 0
    if check_out_date <= check_in_date:
        return 0
    return (check_out_date - check_in_date) // ONE_DAY


def get_night_dates(check_in: str | None, nights: int) -> list[str]:
    """各泊の日付（YYYY-MM-DD）を返す"""
    check_in_date = parse_date(check_in)
    if check_in_date is None or nights <= 0:
        return []
    return [(check_in_date + i * ONE_DAY).isoformat() for i in range(nights)]


def count_attendees(people: Sequence[Attendee], nights: int) -> list[int]:
    """泊ごとの宿泊人数を返す"""
    return [sum(1 for p in people if p.attends(i)) for i in range(nights)]


def calculate_costs(
    people: Sequence[Attendee], total_price: float, nights: int
) -> list[PersonCost]:
    """参加者ごとの負担額を計算する

    1泊あたりの料金を、その泊に宿泊した人数で均等に割る。
    丸めは行わない（表示側の責務）。
    """
    if nights <= 0 or total_price == 0 or not people:
        return []

    price_per_night = total_price / nights
    attendees = count_attendees(people, nights)

    costs: list[PersonCost] = []
    for person in people:
        per_night: list[float] = []
        for i in range(nights):
            if person.attends(i) and attendees[i] > 0:
                per_night.append(price_per_night / attendees[i])
            else:
                per_night.append(0.0)
        costs.append(
            PersonCost(
                person_id=str(person.id),
                per_night=tuple(per_night),
                total=sum(per_night),
            )
        )

    return costs
