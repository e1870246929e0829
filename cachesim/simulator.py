# cachesim/simulator.py
import json
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Sequence, Union

import tqdm

from .config import ANIMATE_MAX_OPS, SimulationRequest
from .model import GET, Operation, ParseFailure, SimulationResult, Step
from .policies import PolicyName, make_policy
from .trace import parse_trace

logger = logging.getLogger(__name__)


class CacheSim:
    """
    Replays an operation list through one freshly built policy instance.
    The instance is owned by this object and never shared.
    """
    def __init__(self, capacity: int, policy_ctor: Callable, name: str = None):
        self.capacity = capacity
        self.policy   = policy_ctor(capacity)
        self.name     = name or getattr(self.policy, "name", type(self.policy).__name__)

    def replay(self, operations: Sequence[Operation], animate: bool = True,
               snapshot_every: int = 1, progress: bool = False) -> SimulationResult:
        """
        Apply every operation in order and return the recorded result.

        With ``animate`` every step is kept; otherwise only every
        ``snapshot_every``-th step and the last one. Stats always cover
        the whole trace.
        """
        result = SimulationResult(self.name, self.capacity)
        stats  = result.stats
        last   = len(operations) - 1
        it = tqdm.tqdm(operations, desc=self.name, unit="op",
                       disable=not progress, leave=False)

        for i, op in enumerate(it):
            evicted = None
            hit = False
            if op.type == GET:
                hit = self.policy.get(op.key).hit
                if hit:
                    stats.hits += 1
                else:
                    stats.misses += 1
            else:
                evicted = self.policy.put(op.key, op.value).evicted
                if evicted is not None:
                    stats.evictions += 1

            if animate or i % snapshot_every == 0 or i == last:
                result.steps.append(Step.record(
                    i, op, hit, evicted, self.policy.snapshot(), self.policy.meta()))

        logger.debug("%s: replayed %d ops, hits=%d misses=%d evictions=%d",
                     self.name, len(operations), stats.hits, stats.misses,
                     stats.evictions)
        return result


def resolve_policies(names) -> List[PolicyName]:
    """Known policy names in request order, without duplicates."""
    selected = []
    for name in names:
        policy = PolicyName.lookup(name)
        if policy is None:
            logger.warning("skipping unknown policy %r", name)
            continue
        if policy not in selected:
            selected.append(policy)
    return selected


def run_simulation(request: SimulationRequest, workers: int = None,
                   progress: bool = False
                   ) -> Union[List[SimulationResult], ParseFailure]:
    """
    Parse the request's trace and replay it once per requested policy.

    Raises ConfigError for an invalid request. Returns a ParseFailure when
    the trace holds no operation, otherwise one SimulationResult per known
    policy in request order.
    """
    request.validate()
    parsed = parse_trace(request.trace_text)
    if parsed.empty:
        return ParseFailure()

    ops = parsed.operations
    animate = request.animate
    if animate and len(ops) > ANIMATE_MAX_OPS:
        logger.warning("%d operations exceed the animate limit of %d, "
                       "recording every %d steps instead",
                       len(ops), ANIMATE_MAX_OPS, request.snapshot_every)
        animate = False

    def _run(name: PolicyName) -> SimulationResult:
        sim = CacheSim(request.capacity,
                       lambda cap: make_policy(name, cap, request.bound_ghosts),
                       name=name.value)
        return sim.replay(ops, animate=animate,
                          snapshot_every=request.snapshot_every,
                          progress=progress)

    selected = resolve_policies(request.policies)
    if workers and workers > 1 and len(selected) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(_run, selected))
    return [_run(name) for name in selected]


def simulate(trace_text: str, capacity: int, policies=("LRU",), **kwargs):
    """Shortcut for run_simulation(SimulationRequest(...))."""
    workers  = kwargs.pop("workers", None)
    progress = kwargs.pop("progress", False)
    request = SimulationRequest(capacity=capacity, policies=list(policies),
                                trace_text=trace_text, **kwargs)
    return run_simulation(request, workers=workers, progress=progress)


def results_to_json(response, unwrap_single: bool = False, **dump_kw) -> str:
    """
    Serialise a run_simulation() response for the presentation layer.
    ``unwrap_single`` returns a bare object when exactly one policy ran.
    """
    if isinstance(response, ParseFailure):
        payload = response.to_dict()
    else:
        payload = [r.to_dict() for r in response]
        if unwrap_single and len(payload) == 1:
            payload = payload[0]
    return json.dumps(payload, **dump_kw)
