# src/unit_batcher/ports/accumulator.py
from abc import ABC, abstractmethod
from typing import List, Tuple
from ..domain.models import Unit

class Accumulator(ABC):
    """Ordered storage of the units pending release (no deduplication)."""
    @abstractmethod
    def append(self, unit: Unit) -> None: ...
    @abstractmethod
    def drain(self) -> List[Unit]: ...
    @abstractmethod
    def pending(self) -> Tuple[Unit, ...]: ...

    def __len__(self) -> int:
        return len(self.pending())
