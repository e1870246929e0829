# cachesim/policies/lru.py
from collections import OrderedDict

from .base import MISS, NO_EVICTION, BasePolicy, GetResult, PutResult


class LRU(BasePolicy):
    """
    Classic Least-Recently-Used cache, capacity counted in entries.
    ``recency`` is ordered LRU -> MRU, so the victim is always its first key.
    """
    name = "LRU"

    def __init__(self, capacity: int):
        super().__init__(capacity)
        self.recency = OrderedDict()    # key -> None

    # ----------------------------------------------------------
    def get(self, key: str) -> GetResult:
        if key not in self.store:
            return MISS
        # move to MRU position
        self.recency.move_to_end(key)
        return GetResult(True, self.store[key])

    def put(self, key: str, value: str) -> PutResult:
        if key in self.store:
            self.store[key] = value
            self.recency.move_to_end(key)
            return NO_EVICTION

        evicted = None
        if len(self.store) >= self.capacity:
            evicted, _ = self.recency.popitem(last=False)   # LRU item
            del self.store[evicted]
        self.store[key] = value
        self.recency[key] = None
        return PutResult(evicted)

    def order(self):
        """Keys most-recent first."""
        return list(reversed(self.recency))
