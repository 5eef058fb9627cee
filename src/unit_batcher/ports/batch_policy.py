# src/unit_batcher/ports/batch_policy.py
from abc import ABC, abstractmethod
from typing import Sequence
from ..domain.models import BatchStatus, Unit

class BatchPolicy(ABC):
    """
    Decides, after every insertion, whether the pending units form a complete batch.
    Implementations must be pure: no mutation of `pending`, no failure mode.
    """
    @abstractmethod
    def evaluate(self, pending: Sequence[Unit]) -> BatchStatus: ...
