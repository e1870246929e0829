from __future__ import annotations

import random
from pathlib import Path

import pytest

from cachesim.model import GET, PUT, Operation

DEMO_TRACE = Path(__file__).resolve().parents[1] / "traces" / "demo.txt"


def ops(text: str):
    """Semicolon separated trace -> list of Operation, e.g. 'PUT A 1; GET A'."""
    out = []
    for chunk in text.split(";"):
        parts = chunk.split()
        if not parts:
            continue
        op = parts[0].upper()
        out.append(Operation(op, parts[1], " ".join(parts[2:]) if op == PUT else ""))
    return out


@pytest.fixture(scope="session")
def demo_text() -> str:
    return DEMO_TRACE.read_text()


@pytest.fixture(scope="session")
def eviction_trace():
    return ops("PUT A 1; PUT B 2; PUT C 3; GET A; PUT D 4")


@pytest.fixture(scope="session")
def random_trace():
    rng = random.Random(7)
    keys = [chr(ord("A") + i) for i in range(8)]
    trace = []
    for i in range(400):
        key = rng.choice(keys)
        if rng.random() < 0.5:
            trace.append(Operation(GET, key, ""))
        else:
            trace.append(Operation(PUT, key, f"v{i}"))
    return trace
