# cachesim/policies/fifo.py
from .base import MISS, NO_EVICTION, BasePolicy, GetResult, PutResult


class FIFO(BasePolicy):
    """
    First-In-First-Out cache. Arrival order is the insertion order of
    ``store`` itself; hits and value updates never touch it.
    """
    name = "FIFO"

    def get(self, key: str) -> GetResult:
        if key in self.store:
            return GetResult(True, self.store[key])
        return MISS

    def put(self, key: str, value: str) -> PutResult:
        if key in self.store:
            self.store[key] = value     # dict update keeps position
            return NO_EVICTION

        evicted = None
        if len(self.store) >= self.capacity:
            evicted = next(iter(self.store))    # oldest arrival
            del self.store[evicted]
        self.store[key] = value
        return PutResult(evicted)
