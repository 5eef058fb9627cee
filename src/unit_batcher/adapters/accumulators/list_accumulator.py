# src/unit_batcher/adapters/accumulators/list_accumulator.py
from typing import List, Tuple
from ...ports.accumulator import Accumulator
from ...domain.models import Unit

class ListAccumulator(Accumulator):
    def __init__(self):
        self._pending: List[Unit] = []

    def append(self, unit: Unit) -> None:
        self._pending.append(unit)

    def drain(self) -> List[Unit]:
        out, self._pending = self._pending, []
        return out

    def pending(self) -> Tuple[Unit, ...]:
        return tuple(self._pending)

    def __len__(self) -> int:
        return len(self._pending)
