"""
Compare eviction policies on a GET/PUT trace file.

    python -m cachesim.evaluate traces/demo.txt --capacity 3 --policy LRU --policy ARC
    python -m cachesim.evaluate --request request.yaml --out results/
"""
import argparse
import logging
import pathlib
import sys

from .config import ConfigError, SimulationRequest, load_request
from .model import ParseFailure
from .policies import PolicyName
from .policies.metrics import eviction_counts, hit_ratio_curve, results_frame
from .simulator import results_to_json, run_simulation

ALL_POLICIES = [p.value for p in PolicyName]


def build_request(args) -> SimulationRequest:
    if args.request:
        req = load_request(args.request)
    else:
        req = SimulationRequest()
    if args.trace:
        req.trace_text = pathlib.Path(args.trace).read_text()
    if args.capacity is not None:
        req.capacity = args.capacity
    if args.policy:
        req.policies = args.policy
    elif not args.request:
        req.policies = list(ALL_POLICIES)
    if args.sample is not None:
        req.animate = False
        req.snapshot_every = args.sample
    if args.bound_ghosts:
        req.bound_ghosts = True
    return req


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    ap.add_argument("trace", nargs="?", help="trace file, one 'OP KEY [VALUE]' per line")
    ap.add_argument("--request", help="YAML/JSON request file")
    ap.add_argument("--capacity", type=int)
    ap.add_argument("--policy", action="append",
                    help=f"policy to run, repeatable (default: all of {ALL_POLICIES})")
    ap.add_argument("--sample", type=int, metavar="N",
                    help="record only every Nth step instead of all of them")
    ap.add_argument("--bound-ghosts", action="store_true",
                    help="trim ARC ghost lists to the canonical bounds")
    ap.add_argument("--workers", type=int, default=1)
    ap.add_argument("--out", default=".", help="directory for results.csv / results.json")
    ap.add_argument("--json", action="store_true", help="also write results.json")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    if not args.trace and not args.request:
        ap.error("need a trace file or --request")

    try:
        req = build_request(args)
        response = run_simulation(req, workers=args.workers, progress=True)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    if isinstance(response, ParseFailure):
        print(f"error: {response.error}", file=sys.stderr)
        return 2

    out = pathlib.Path(args.out)
    out.mkdir(parents=True, exist_ok=True)

    res = results_frame(response)
    res.to_csv(out / "results.csv", index=False)
    print(res.to_string(index=False))

    for r in response:
        curve = hit_ratio_curve(r)
        final = f"{curve[-1]:.3f}" if curve.size else "n/a"
        top = eviction_counts(r).head(3)
        victims = ", ".join(f"{k}x{n}" for k, n in top.items()) or "none"
        print(f"\n{r.policy_name}: final running hit ratio {final}; most evicted: {victims}")

    if args.json:
        (out / "results.json").write_text(results_to_json(response, indent=2))
    print("\nWrote", out / "results.csv")
    return 0


if __name__ == "__main__":
    sys.exit(main())
