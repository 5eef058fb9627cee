# src/unit_batcher/ports/batcher.py
from abc import ABC, abstractmethod
from typing import List, Optional
from ..domain.models import Unit

class Batcher(ABC):
    """
    A batch grows one unit at a time through `insert`, which returns the batch once it is ready.
    `force_release` hands back whatever is pending (e.g. after a caller-side timeout)
    and consumes the batcher.
    """
    @abstractmethod
    def insert(self, unit: Unit) -> Optional[List[Unit]]: ...
    @abstractmethod
    def force_release(self) -> List[Unit]: ...
