# cachesim/model.py
import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple, Optional, Tuple

GET = "GET"
PUT = "PUT"


class Operation(NamedTuple):
    type: str           # GET | PUT
    key: str
    value: str = ""     # empty for GET


class CacheEntry(NamedTuple):
    key: str
    value: str

    def to_dict(self) -> dict:
        return {"key": self.key, "value": self.value}


@dataclass(frozen=True)
class Step:
    """
    One replayed operation, captured after the policy applied it.
    """
    index: int
    op_type: str
    key: str
    value: str
    hit: bool
    evicted: Optional[str]
    cache_snapshot: Tuple[CacheEntry, ...]
    meta: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def record(cls, index, op: Operation, hit, evicted, snapshot, meta):
        # meta holds live lists from the policy, so freeze a private copy
        return cls(index, op.type, op.key, op.value, hit, evicted,
                   tuple(snapshot), copy.deepcopy(meta))

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "op": self.op_type,
            "key": self.key,
            "value": self.value,
            "hit": self.hit,
            "evicted": self.evicted,
            "cache": [e.to_dict() for e in self.cache_snapshot],
            "meta": copy.deepcopy(self.meta),
        }


@dataclass
class Stats:
    hits: int = 0
    misses: int = 0
    evictions: int = 0

    @property
    def hit_ratio(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total else 0.0

    def to_dict(self) -> dict:
        return {"hits": self.hits, "misses": self.misses,
                "hitRatio": self.hit_ratio, "evictions": self.evictions}


@dataclass
class SimulationResult:
    policy_name: str
    capacity: int
    steps: List[Step] = field(default_factory=list)
    stats: Stats = field(default_factory=Stats)

    def to_dict(self) -> dict:
        return {
            "policy": self.policy_name,
            "capacity": self.capacity,
            "steps": [s.to_dict() for s in self.steps],
            "stats": self.stats.to_dict(),
        }


@dataclass(frozen=True)
class ParseFailure:
    """
    Returned instead of any result when the trace yields no operations.
    Callers must check for it before touching statistics.
    """
    error: str = "Failed to parse trace"

    def to_dict(self) -> dict:
        return {"error": self.error}
