from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 配下のエンティティ（参加者など）の変更は必ず集約ルートを経由
    - 保存・復元の単位 = 集約
    """
