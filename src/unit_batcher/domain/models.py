# src/unit_batcher/domain/models.py
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Hashable

class Unit(ABC):
    """Element to batch together; uniquely represented by its id."""
    @abstractmethod
    def id(self) -> Hashable: ...

@dataclass(frozen=True)
class KeyedUnit(Unit):
    key: Hashable
    payload: Any = None   # never inspected by policies

    def id(self) -> Hashable:
        return self.key

class BatchStatus(Enum):
    KEEP_BATCHING = "keep_batching"
    RELEASE_BATCH = "release_batch"

    @classmethod
    def from_bool(cls, release: bool) -> "BatchStatus":
        return cls.RELEASE_BATCH if release else cls.KEEP_BATCHING
