from .config import ConfigError, SimulationRequest, load_request
from .model import (CacheEntry, Operation, ParseFailure, SimulationResult,
                    Stats, Step)
from .policies import ARC, FIFO, LFU, LRU, PolicyName, make_policy
from .simulator import CacheSim, results_to_json, run_simulation, simulate
from .trace import ParsedTrace, parse_trace, parse_trace_file

__version__ = "0.1.0"
