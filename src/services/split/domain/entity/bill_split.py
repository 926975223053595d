from services.shared.domain import AggregateRoot
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)
from services.split.domain.entity.person import Person
from services.split.domain.service.cost_calculator import PersonCost, calculate_costs
from services.split.domain.value_object import PersonId, StayPeriod

SPLIT_ID = "bill-split"


class BillSplit(AggregateRoot[str]):
    """宿泊費の割り勘（集約ルート）

    料金・滞在期間・参加者一覧を保持する。負担額は保持せず毎回計算する。
    """

    def __init__(
        self,
        total_price: float = 0.0,
        stay_period: StayPeriod | None = None,
        people: list[Person] | None = None,
    ) -> None:
        super().__init__(SPLIT_ID)
        self._total_price = total_price
        self._stay_period = stay_period or StayPeriod.empty()
        self._people: list[Person] = list(people or [])
        self._ensure_unique_ids()
        self._resize_people()

    @property
    def total_price(self) -> float:
        return self._total_price

    @property
    def stay_period(self) -> StayPeriod:
        return self._stay_period

    @property
    def people(self) -> tuple[Person, ...]:
        return tuple(self._people)

    def nights(self) -> int:
        return self._stay_period.nights()

    def night_dates(self) -> list[str]:
        return self._stay_period.night_dates()

    def price_per_night(self) -> float:
        """1泊あたりの料金（宿泊数 0 の場合は 0）"""
        nights = self.nights()
        if nights == 0:
            return 0.0
        return self._total_price / nights

    def costs(self) -> list[PersonCost]:
        """参加者ごとの負担額を計算する"""
        return calculate_costs(self._people, self._total_price, self.nights())

    def find_person(self, person_id: PersonId) -> Person:
        for person in self._people:
            if person.id == person_id:
                return person
        raise ResourceNotFoundException("Person", person_id)

    def add_person(self, name: str = "", person_id: PersonId | None = None) -> Person:
        """参加者を追加する（全泊未宿泊で作成）"""
        person_id = person_id or PersonId.generate()
        if any(p.id == person_id for p in self._people):
            raise BusinessRuleViolationException(
                f"Person already exists: {person_id}"
            )
        person = Person(id=person_id, name=name, nights=[False] * self.nights())
        self._people.append(person)
        return person

    def remove_person(self, person_id: PersonId) -> None:
        """参加者を削除する"""
        person = self.find_person(person_id)
        self._people.remove(person)

    def rename_person(self, person_id: PersonId, name: str) -> None:
        self.find_person(person_id).rename(name)

    def toggle_night(self, person_id: PersonId, night_index: int) -> None:
        """参加者の指定泊の宿泊有無を反転する"""
        person = self.find_person(person_id)
        nights = self.nights()
        if not 0 <= night_index < nights:
            raise BusinessRuleViolationException(
                f"Night index {night_index} is out of range (nights: {nights})"
            )
        person.toggle_night(night_index)

    def change_stay_period(self, stay_period: StayPeriod) -> None:
        """滞在期間を変更し、全参加者の宿泊フラグを新しい宿泊数に合わせる"""
        self._stay_period = stay_period
        self._resize_people()

    def change_total_price(self, total_price: float) -> None:
        self._total_price = total_price

    def _ensure_unique_ids(self) -> None:
        seen: set[PersonId] = set()
        for person in self._people:
            if person.id in seen:
                raise BusinessRuleViolationException(
                    f"Person already exists: {person.id}"
                )
            seen.add(person.id)

    def _resize_people(self) -> None:
        nights = self.nights()
        for person in self._people:
            person.resize(nights)
