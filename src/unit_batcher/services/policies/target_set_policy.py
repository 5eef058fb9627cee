from dataclasses import dataclass
from typing import AbstractSet, FrozenSet, Hashable, Sequence
from ...domain.models import BatchStatus, Unit
from ...ports.batch_policy import BatchPolicy

@dataclass(frozen=True, init=False)
class TargetSetPolicy(BatchPolicy):
    """
    Releases when the distinct ids of the pending units are exactly `targets`.
    Repeated ids do not block release; an id outside `targets` blocks it for the rest of the batch.
    """
    targets: FrozenSet[Hashable]

    def __init__(self, targets: AbstractSet[Hashable]):
        object.__setattr__(self, "targets", frozenset(targets))

    def evaluate(self, pending: Sequence[Unit]) -> BatchStatus:
        seen = {u.id() for u in pending}
        return BatchStatus.from_bool(seen == self.targets)
