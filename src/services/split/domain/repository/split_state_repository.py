from abc import abstractmethod

from services.shared.domain import Repository
from services.split.domain.entity.bill_split import BillSplit


class SplitStateRepository(Repository[BillSplit, str]):
    """割り勘状態レポジトリのインターフェース

    保存先はキー（共有トークン）そのもの。復元は失敗しない。
    """

    @abstractmethod
    def save(self, split: BillSplit) -> str:
        """状態を共有トークンに変換する"""
        raise NotImplementedError

    @abstractmethod
    def find(self, token: str) -> BillSplit:
        """共有トークンから状態を復元する（不正な場合は空の状態）"""
        raise NotImplementedError
