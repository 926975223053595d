from typing import TypedDict

from services.split.domain.entity.bill_split import BillSplit
from services.split.domain.entity.person import Person
from services.split.domain.value_object import PersonId, StayPeriod, parse_price


class PersonDetails(TypedDict):
    """参加者の入力データ"""

    id: str
    name: str
    nights: list[bool]


class SplitDetails(TypedDict):
    """割り勘状態の入力データ"""

    total_price: str | float
    check_in_date: str
    check_out_date: str
    people: list[PersonDetails]


class BillSplitFactory:
    """割り勘集約を生成するFactory"""

    def create(self, split_details: SplitDetails) -> BillSplit:
        """プリミティブな状態から割り勘集約を復元する

        宿泊フラグは滞在期間から求めた宿泊数に揃えられる。
        """
        stay_period = StayPeriod(
            check_in=split_details["check_in_date"],
            check_out=split_details["check_out_date"],
        )
        people = [
            Person(
                id=PersonId(value=person["id"]),
                name=person["name"],
                nights=person["nights"],
            )
            for person in split_details["people"]
        ]

        return BillSplit(
            total_price=parse_price(split_details["total_price"]),
            stay_period=stay_period,
            people=people,
        )

    def create_empty(self) -> BillSplit:
        """空の割り勘集約を生成する"""
        return BillSplit()

    def to_details(self, split: BillSplit) -> SplitDetails:
        """割り勘集約をプリミティブな状態に変換する"""
        return {
            "total_price": split.total_price,
            "check_in_date": split.stay_period.check_in,
            "check_out_date": split.stay_period.check_out,
            "people": [
                {
                    "id": str(person.id),
                    "name": person.name,
                    "nights": list(person.nights),
                }
                for person in split.people
            ],
        }
