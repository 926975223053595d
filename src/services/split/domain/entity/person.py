from services.shared.domain import Entity
from services.split.domain.value_object import PersonId


class Person(Entity[PersonId]):
    """参加者エンティティ"""

    def __init__(
        self,
        id: PersonId,
        name: str = "",
        nights: list[bool] | None = None,
    ) -> None:
        super().__init__(id)
        self._name = name
        self._nights = [bool(n) for n in nights] if nights else []

    @property
    def name(self) -> str:
        return self._name

    @property
    def nights(self) -> tuple[bool, ...]:
        return tuple(self._nights)

    def attends(self, night_index: int) -> bool:
        """指定した泊に宿泊したかどうか"""
        if 0 <= night_index < len(self._nights):
            return self._nights[night_index]
        return False

    def rename(self, name: str) -> None:
        """表示名を変更する（空文字も可）"""
        self._name = name

    def toggle_night(self, night_index: int) -> None:
        """指定した泊の宿泊有無を反転する"""
        self._nights[night_index] = not self._nights[night_index]

    def resize(self, nights: int) -> None:
        """宿泊数の変更に合わせて宿泊フラグを切り詰め・拡張する

        既存のフラグは位置を保ったまま残し、追加分は未宿泊とする。
        """
        nights = max(0, nights)
        kept = self._nights[:nights]
        self._nights = kept + [False] * (nights - len(kept))
