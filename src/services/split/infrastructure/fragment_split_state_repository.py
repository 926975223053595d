from urllib.parse import quote, unquote

from pydantic import BaseModel, ConfigDict, Field, field_validator

from services.shared.domain import BusinessRuleViolationException
from services.shared.utils import get_logger
from services.split.domain.entity import BillSplit
from services.split.domain.factory import BillSplitFactory
from services.split.domain.repository import SplitStateRepository

logger = get_logger()

# encodeURIComponent が変換しない記号
_FRAGMENT_SAFE = "!~*'()"


class FragmentPerson(BaseModel):
    """URLフラグメント内の参加者"""

    id: str = Field(..., min_length=1)
    name: str = ""
    nights: list[bool] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def convert_id_to_str(cls, v: object) -> object:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("name", mode="before")
    @classmethod
    def convert_null_name(cls, v: object) -> object:
        return "" if v is None else v


class FragmentState(BaseModel):
    """URLフラグメントに埋め込む割り勘状態"""

    model_config = ConfigDict(populate_by_name=True)

    total_price: str = Field(default="", alias="totalPrice")
    check_in_date: str = Field(default="", alias="checkInDate")
    check_out_date: str = Field(default="", alias="checkOutDate")
    people: list[FragmentPerson] = Field(default_factory=list)

    @field_validator("total_price", mode="before")
    @classmethod
    def convert_price_to_str(cls, v: object) -> object:
        if v is None:
            return ""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("check_in_date", "check_out_date", mode="before")
    @classmethod
    def convert_null_date(cls, v: object) -> object:
        return "" if v is None else v

    @field_validator("people", mode="before")
    @classmethod
    def convert_null_people(cls, v: object) -> object:
        return [] if v is None else v


def format_price(price: float) -> str:
    """料金を入力欄と同じ文字列表現にする（0 は空欄）"""
    if price == 0:
        return ""
    if price.is_integer():
        return str(int(price))
    return repr(price)


class FragmentSplitStateRepository(SplitStateRepository):
    """URLフラグメントを使用した SplitStateRepository の具象実装

    状態を JSON にして encodeURIComponent 相当でエンコードする。
    共有リンク・ブックマークからそのまま復元できる。
    """

    def __init__(self, factory: BillSplitFactory | None = None) -> None:
        self._factory = factory or BillSplitFactory()

    def save(self, split: BillSplit) -> str:
        """状態をURLフラグメントにエンコードする"""
        state = FragmentState(
            total_price=format_price(split.total_price),
            check_in_date=split.stay_period.check_in,
            check_out_date=split.stay_period.check_out,
            people=[
                FragmentPerson(id=str(p.id), name=p.name, nights=list(p.nights))
                for p in split.people
            ],
        )
        payload = state.model_dump_json(by_alias=True)
        return quote(payload, safe=_FRAGMENT_SAFE)

    def find(self, token: str) -> BillSplit:
        """URLフラグメントから状態を復元する

        空・不正なフラグメントは空の状態として扱う。
        """
        fragment = (token or "").removeprefix("#")
        if not fragment:
            return self._factory.create_empty()

        try:
            state = FragmentState.model_validate_json(unquote(fragment))
        except ValueError:
            logger.warning(
                "Failed to parse split state, falling back to empty state",
                extra={"fragment_length": len(fragment)},
            )
            return self._factory.create_empty()

        try:
            return self._factory.create(
                {
                    "total_price": state.total_price,
                    "check_in_date": state.check_in_date,
                    "check_out_date": state.check_out_date,
                    "people": [
                        {"id": p.id, "name": p.name, "nights": p.nights}
                        for p in state.people
                    ],
                }
            )
        except BusinessRuleViolationException:
            logger.warning(
                "Shared split state has duplicate people, falling back to empty state"
            )
            return self._factory.create_empty()
