import pytest

from services.split.domain.entity.bill_split import BillSplit
from services.split.domain.entity.person import Person
from services.split.domain.value_object.person_id import PersonId
from services.split.domain.value_object.stay_period import StayPeriod


@pytest.fixture
def create_person():
    """Person を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        person_id: str = "1",
        name: str = "Alice",
        nights: list[bool] | None = None,
    ) -> Person:
        return Person(id=PersonId(value=person_id), name=name, nights=nights)

    return _factory


@pytest.fixture
def create_split(create_person):
    """BillSplit を生成する Factory fixture

    people は (名前, 宿泊フラグ) のリスト。ID は "1" からの連番。
    """

    def _factory(
        total_price: float = 300.0,
        check_in: str = "2024-01-15",
        check_out: str = "2024-01-18",
        people: list[tuple[str, list[bool]]] | None = None,
    ) -> BillSplit:
        return BillSplit(
            total_price=total_price,
            stay_period=StayPeriod(check_in=check_in, check_out=check_out),
            people=[
                create_person(person_id=str(i), name=name, nights=nights)
                for i, (name, nights) in enumerate(people or [], start=1)
            ],
        )

    return _factory
