from dataclasses import dataclass
from typing import Callable, Literal

from services.split.domain.entity import BillSplit
from services.split.domain.value_object import PersonId, StayPeriod

EditAction = Literal[
    "add_person",
    "remove_person",
    "rename_person",
    "toggle_night",
    "change_stay_period",
    "change_total_price",
]


@dataclass(frozen=True)
class EditOperation:
    """割り勘状態への編集操作"""

    action: EditAction
    person_id: str | None = None
    name: str = ""
    night_index: int = 0
    check_in_date: str = ""
    check_out_date: str = ""
    total_price: float = 0.0

    def require_person_id(self) -> PersonId:
        if not self.person_id:
            raise ValueError(f"person_id is required for {self.action}")
        return PersonId(value=self.person_id)


def _add_person(split: BillSplit, op: EditOperation) -> None:
    person_id = PersonId(value=op.person_id) if op.person_id else None
    split.add_person(name=op.name, person_id=person_id)


def _remove_person(split: BillSplit, op: EditOperation) -> None:
    split.remove_person(op.require_person_id())


def _rename_person(split: BillSplit, op: EditOperation) -> None:
    split.rename_person(op.require_person_id(), op.name)


def _toggle_night(split: BillSplit, op: EditOperation) -> None:
    split.toggle_night(op.require_person_id(), op.night_index)


def _change_stay_period(split: BillSplit, op: EditOperation) -> None:
    split.change_stay_period(
        StayPeriod(check_in=op.check_in_date, check_out=op.check_out_date)
    )


def _change_total_price(split: BillSplit, op: EditOperation) -> None:
    split.change_total_price(op.total_price)


_EDIT_HANDLERS: dict[str, Callable[[BillSplit, EditOperation], None]] = {
    "add_person": _add_person,
    "remove_person": _remove_person,
    "rename_person": _rename_person,
    "toggle_night": _toggle_night,
    "change_stay_period": _change_stay_period,
    "change_total_price": _change_total_price,
}


class EditSplitService:
    """参加者・宿泊日・料金を編集するユースケース"""

    def apply(self, split: BillSplit, operation: EditOperation) -> BillSplit:
        """編集操作を1件適用する"""
        handler = _EDIT_HANDLERS.get(operation.action)
        if handler is None:
            raise ValueError(f"Unknown edit action: {operation.action}")
        handler(split, operation)
        return split
