# cachesim/policies/base.py
from typing import List, NamedTuple, Optional

from ..model import CacheEntry


class GetResult(NamedTuple):
    hit: bool
    value: Optional[str] = None


class PutResult(NamedTuple):
    evicted: Optional[str] = None


MISS = GetResult(False)
NO_EVICTION = PutResult()


class BasePolicy:
    """
    Common contract of every eviction policy.
    ``store`` keeps live entries in insertion order; snapshot() reads it.
    """
    name = "BASE"

    def __init__(self, capacity: int):
        if not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f"capacity must be a positive integer, got {capacity!r}")
        self.capacity = capacity
        self.store = {}                 # key -> value

    def get(self, key: str) -> GetResult: ...

    def put(self, key: str, value: str) -> PutResult: ...

    def snapshot(self) -> List[CacheEntry]:
        return [CacheEntry(k, v) for k, v in self.store.items()]

    def meta(self) -> dict:
        return {}

    def __len__(self):
        return len(self.store)

    def __contains__(self, key):
        return key in self.store
