from typing import Callable, Sequence
from ...domain.models import BatchStatus, Unit
from ...ports.batch_policy import BatchPolicy

class PredicatePolicy(BatchPolicy):
    """
    Adapts a plain function `pending -> bool` (True = release) to the policy port,
    for one-off rules that don't deserve their own class.
    """
    def __init__(self, predicate: Callable[[Sequence[Unit]], bool]):
        self._predicate = predicate

    def evaluate(self, pending: Sequence[Unit]) -> BatchStatus:
        return BatchStatus.from_bool(bool(self._predicate(pending)))
