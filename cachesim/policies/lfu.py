# cachesim/policies/lfu.py
from collections import OrderedDict, defaultdict

from .base import MISS, NO_EVICTION, BasePolicy, GetResult, PutResult


class LFU(BasePolicy):
    """
    Least-Frequently-Used cache.
    Keys are grouped in per-frequency buckets; each bucket is an ordered set
    so the oldest member of the lowest bucket is the victim (tie-break by
    insertion into that bucket).
    Only get() bumps a frequency, put() on a live key just rewrites the value.
    """
    name = "LFU"

    def __init__(self, capacity: int):
        super().__init__(capacity)
        self.freq     = {}                           # key -> hit count
        self.buckets  = defaultdict(OrderedDict)     # freq -> {key: None}
        self.min_freq = 0

    # ----------------------------------------------------------
    def _bump(self, key):
        f = self.freq[key]
        bucket = self.buckets[f]
        del bucket[key]
        if not bucket:
            del self.buckets[f]
            if self.min_freq == f:
                self.min_freq = f + 1
        self.freq[key] = f + 1
        self.buckets[f + 1][key] = None              # tail of new bucket

    def get(self, key: str) -> GetResult:
        if key not in self.store:                    # ------------- MISS
            return MISS
        self._bump(key)                              # ------------- HIT
        return GetResult(True, self.store[key])

    def put(self, key: str, value: str) -> PutResult:
        if key in self.store:
            self.store[key] = value
            return NO_EVICTION

        evicted = None
        if len(self.store) >= self.capacity:
            bucket = self.buckets[self.min_freq]
            evicted, _ = bucket.popitem(last=False)  # oldest in lowest bucket
            if not bucket:
                del self.buckets[self.min_freq]
            del self.store[evicted]
            del self.freq[evicted]

        self.store[key] = value
        self.freq[key]  = 1
        self.buckets[1][key] = None
        self.min_freq = 1
        return PutResult(evicted)

    def meta(self) -> dict:
        return {"freq": dict(self.freq)}
