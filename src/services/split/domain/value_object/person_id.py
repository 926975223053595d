from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class PersonId:
    """参加者ID"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("PersonId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> PersonId:
        """新しい参加者IDを採番する"""
        return cls(value=uuid.uuid4().hex)
