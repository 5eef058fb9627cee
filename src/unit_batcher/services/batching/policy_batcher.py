# src/unit_batcher/services/batching/policy_batcher.py
import logging
from typing import List, Optional
from ...domain.models import BatchStatus, Unit
from ...errors import BatcherConsumedError
from ...ports.accumulator import Accumulator
from ...ports.batch_policy import BatchPolicy
from ...ports.batcher import Batcher
from ...adapters.accumulators.list_accumulator import ListAccumulator

class PolicyBatcher(Batcher):
    """
    Batcher driven by a BatchPolicy evaluated after every insertion.

    Open until force_release(); after a policy-triggered release it keeps going with an
    empty batch. Once force-released, every further call raises BatcherConsumedError.
    """
    def __init__(self, policy: BatchPolicy, accumulator: Optional[Accumulator] = None):
        self._policy: Optional[BatchPolicy] = policy
        self._backend: Optional[Accumulator] = accumulator if accumulator is not None else ListAccumulator()

    @property
    def consumed(self) -> bool:
        return self._backend is None

    def _open_backend(self) -> Accumulator:
        if self._backend is None:
            raise BatcherConsumedError("batcher was force-released and cannot be reused")
        return self._backend

    def insert(self, unit: Unit) -> Optional[List[Unit]]:
        backend = self._open_backend()
        backend.append(unit)
        if self._policy.evaluate(backend.pending()) is BatchStatus.KEEP_BATCHING:
            return None
        batch = backend.drain()
        logging.debug("batch released size=%d", len(batch))
        return batch

    def force_release(self) -> List[Unit]:
        backend = self._open_backend()
        batch = backend.drain()
        self._backend = None
        self._policy = None
        logging.debug("batch force-released size=%d", len(batch))
        return batch

    def __len__(self) -> int:
        return len(self._open_backend())
