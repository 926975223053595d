from services.split.domain.entity import BillSplit
from services.split.domain.repository import SplitStateRepository


class ShareSplitService:
    """割り勘状態の共有・復元のユースケース"""

    def __init__(self, repository: SplitStateRepository) -> None:
        self._repository = repository

    def share(self, split: BillSplit) -> str:
        """共有用トークンを発行する"""
        return self._repository.save(split)

    def restore(self, token: str) -> BillSplit:
        """共有用トークンから状態を復元する"""
        return self._repository.find(token)
