# cachesim/policies/arc.py
from collections import OrderedDict

from .base import MISS, NO_EVICTION, BasePolicy, GetResult, PutResult

# value held by a key re-admitted through a ghost hit on get()
PLACEHOLDER = ""


class ARC(BasePolicy):
    """
    Simplified Adaptive Replacement Cache.

    T1 holds keys seen once recently, T2 keys seen at least twice. B1/B2 are
    ghost lists of keys evicted from T1/T2 (keys only, no values). ``p`` is
    the adaptation target for T1 and always stays within [0, capacity].

    Differences from the textbook algorithm:
      * a hit on a key already in T2 does not move it inside T2;
      * ``p`` moves by exactly 1 per adaptation;
      * a ghost hit on get() is still reported as a miss and re-admits the
        key into T1 with a placeholder value;
      * ghost lists are unbounded unless ``bound_ghosts`` is set, in which
        case they are trimmed to |T1|+|B1| <= c and |T2|+|B2| <= 2c.

    Every list is an OrderedDict whose *last* key is the list front (MRU),
    so the LRU tail is popitem(last=False).
    """
    name = "ARC"

    def __init__(self, capacity: int, bound_ghosts: bool = False):
        super().__init__(capacity)
        self.bound_ghosts = bound_ghosts
        self.p  = 0
        self.t1 = OrderedDict()
        self.t2 = OrderedDict()
        self.b1 = OrderedDict()
        self.b2 = OrderedDict()

    # ----------------------------------------------------------
    def _promote(self, key):
        if key in self.t1:
            del self.t1[key]
            self.t2[key] = None                     # front of T2
            self.p = max(0, self.p - 1)
            if self.bound_ghosts:
                self._trim_ghosts()
        # already in T2: left where it is

    def get(self, key: str) -> GetResult:
        if key in self.store:                       # ------------- HIT
            self._promote(key)
            return GetResult(True, self.store[key])

        # ------------- ghost hits adapt p, then re-admit into T1
        if key in self.b1:
            del self.b1[key]
            self.p = min(self.capacity, self.p + 1)
            self.replace(key, PLACEHOLDER)
        elif key in self.b2:
            del self.b2[key]
            self.p = max(0, self.p - 1)
            self.replace(key, PLACEHOLDER)
        return MISS

    def put(self, key: str, value: str) -> PutResult:
        if key in self.store:
            self.store[key] = value
            self._promote(key)
            return NO_EVICTION
        return PutResult(self.replace(key, value))

    def replace(self, key: str, value: str):
        """
        Make room if T1+T2 is full, then insert ``key`` at the front of T1.
        Returns the evicted key or None.
        """
        evicted = None
        if len(self.t1) + len(self.t2) >= self.capacity:
            if self.t1 and (len(self.t1) > self.p or not self.t2):
                evicted, _ = self.t1.popitem(last=False)
                self.b1[evicted] = None
            else:
                evicted, _ = self.t2.popitem(last=False)
                self.b2[evicted] = None
            del self.store[evicted]

        # a resident key is never a ghost at the same time
        self.b1.pop(key, None)
        self.b2.pop(key, None)
        self.t1[key] = None
        self.store[key] = value

        if self.bound_ghosts:
            self._trim_ghosts()
        return evicted

    def _trim_ghosts(self):
        while self.b1 and len(self.t1) + len(self.b1) > self.capacity:
            self.b1.popitem(last=False)
        while self.b2 and len(self.t2) + len(self.b2) > 2 * self.capacity:
            self.b2.popitem(last=False)

    def meta(self) -> dict:
        front_first = lambda lst: list(reversed(lst))
        return {"arcSets": {
            "T1": front_first(self.t1),
            "T2": front_first(self.t2),
            "B1": front_first(self.b1),
            "B2": front_first(self.b2),
            "p":  self.p,
        }}
