from dataclasses import dataclass
from typing import Sequence
from ...domain.models import BatchStatus, Unit
from ...ports.batch_policy import BatchPolicy

@dataclass(frozen=True)
class SizePolicy(BatchPolicy):
    """Releases once the batch holds at least `max_size` units. max_size=0 releases on every insertion."""
    max_size: int

    def evaluate(self, pending: Sequence[Unit]) -> BatchStatus:
        return BatchStatus.from_bool(len(pending) >= self.max_size)
