# cachesim/config.py
import json
import pathlib
from dataclasses import dataclass, field, fields
from typing import List

import yaml

DEFAULT_CAPACITY       = 3
DEFAULT_POLICIES       = ("LRU",)
DEFAULT_SNAPSHOT_EVERY = 1000
# animate mode falls back to sampling above this many operations
ANIMATE_MAX_OPS        = 20_000

# wire (camelCase) name -> field name
_ALIASES = {
    "snapshotEvery": "snapshot_every",
    "traceText":     "trace_text",
    "boundGhosts":   "bound_ghosts",
}


class ConfigError(ValueError):
    """Raised for a request that must be rejected before any replay."""


@dataclass
class SimulationRequest:
    capacity: int = DEFAULT_CAPACITY
    policies: List[str] = field(default_factory=lambda: list(DEFAULT_POLICIES))
    animate: bool = True                        # presentation hint, also picks recording mode
    snapshot_every: int = DEFAULT_SNAPSHOT_EVERY
    trace_text: str = ""
    bound_ghosts: bool = False                  # ARC only

    def validate(self) -> "SimulationRequest":
        # bool is an int subclass, reject it explicitly
        if isinstance(self.capacity, bool) or not isinstance(self.capacity, int) \
                or self.capacity < 1:
            raise ConfigError(f"capacity must be a positive integer, got {self.capacity!r}")
        if isinstance(self.snapshot_every, bool) or not isinstance(self.snapshot_every, int) \
                or self.snapshot_every < 1:
            raise ConfigError(f"snapshotEvery must be a positive integer, got {self.snapshot_every!r}")
        if isinstance(self.policies, str):
            self.policies = [self.policies]
        if not isinstance(self.policies, (list, tuple)) \
                or not all(isinstance(p, str) for p in self.policies):
            raise ConfigError(f"policies must be a list of policy names, got {self.policies!r}")
        if not isinstance(self.trace_text, str):
            raise ConfigError(f"traceText must be a string, got {type(self.trace_text).__name__}")
        return self

    @classmethod
    def from_dict(cls, data: dict) -> "SimulationRequest":
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for k, v in (data or {}).items():
            name = _ALIASES.get(k, k)
            if name in known:
                kwargs[name] = v
        return cls(**kwargs)

    def to_dict(self) -> dict:
        return {
            "capacity": self.capacity,
            "policies": list(self.policies),
            "animate": self.animate,
            "snapshotEvery": self.snapshot_every,
            "traceText": self.trace_text,
            "boundGhosts": self.bound_ghosts,
        }


def load_request(path) -> SimulationRequest:
    """
    Read a request from a .yaml/.yml or .json file.
    A ``traceFile`` entry, relative to the request file, fills ``trace_text``.
    """
    path = pathlib.Path(path)
    with open(path) as f:
        if path.suffix == ".json":
            data = json.load(f)
        else:
            data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping, got {type(data).__name__}")

    trace_file = data.pop("traceFile", None) or data.pop("trace_file", None)
    if trace_file:
        data["trace_text"] = (path.parent / trace_file).read_text()
    return SimulationRequest.from_dict(data)
