# cachesim/policies/metrics.py
from typing import Iterable

import numpy as np
import pandas as pd

from ..model import GET, SimulationResult

COLUMNS = ["policy", "capacity", "hits", "misses", "hit_ratio",
           "evictions", "steps"]


def results_frame(results: Iterable[SimulationResult]) -> pd.DataFrame:
    """One row per policy run, in the given order."""
    rows = [(r.policy_name, r.capacity, r.stats.hits, r.stats.misses,
             r.stats.hit_ratio, r.stats.evictions, len(r.steps))
            for r in results]
    return pd.DataFrame(rows, columns=COLUMNS)


def hit_ratio_curve(result: SimulationResult) -> np.ndarray:
    """
    Running hit ratio after each recorded GET step.
    Sampled results only see the GETs that were recorded.
    """
    hits = np.array([s.hit for s in result.steps if s.op_type == GET], dtype=float)
    if not hits.size:
        return hits
    return np.cumsum(hits) / np.arange(1, hits.size + 1)


def eviction_counts(result: SimulationResult) -> pd.Series:
    """How many times each key was evicted, most evicted first."""
    evicted = [s.evicted for s in result.steps if s.evicted is not None]
    return pd.Series(evicted, dtype=object).value_counts()
