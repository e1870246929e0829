from enum import Enum

from .arc import ARC
from .base import BasePolicy, GetResult, PutResult
from .fifo import FIFO
from .lfu import LFU
from .lru import LRU


class PolicyName(str, Enum):
    LRU  = "LRU"
    FIFO = "FIFO"
    LFU  = "LFU"
    ARC  = "ARC"

    @classmethod
    def lookup(cls, name):
        """Return the member for ``name`` (case-insensitive) or None."""
        try:
            return cls(str(name).strip().upper())
        except ValueError:
            return None


POLICIES = {
    PolicyName.LRU:  LRU,
    PolicyName.FIFO: FIFO,
    PolicyName.LFU:  LFU,
    PolicyName.ARC:  ARC,
}


def make_policy(name: PolicyName, capacity: int, bound_ghosts: bool = False) -> BasePolicy:
    if name is PolicyName.ARC:
        return ARC(capacity, bound_ghosts=bound_ghosts)
    return POLICIES[name](capacity)


__all__ = ["ARC", "FIFO", "LFU", "LRU", "BasePolicy", "GetResult",
           "PutResult", "PolicyName", "POLICIES", "make_policy"]
