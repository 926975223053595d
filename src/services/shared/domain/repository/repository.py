from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
KEY = TypeVar("KEY")


class Repository(ABC, Generic[T, KEY]):
    """Repository 基底クラス

    - 集約の保存・復元を抽象化する
    - save は復元に使うキーを返す
    """

    @abstractmethod
    def save(self, aggregate: T) -> KEY:
        """集約を保存し、復元用のキーを返す"""
        raise NotImplementedError

    @abstractmethod
    def find(self, key: KEY) -> T:
        """キーから集約を復元する"""
        raise NotImplementedError
