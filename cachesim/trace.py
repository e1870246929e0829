# cachesim/trace.py
import logging
import pathlib
from typing import List, NamedTuple, Tuple

from .model import GET, PUT, Operation

logger = logging.getLogger(__name__)

OPS = (GET, PUT)


class ParsedTrace(NamedTuple):
    operations: List[Operation]
    skipped: List[Tuple[int, str]]      # (line number, reason)

    @property
    def empty(self) -> bool:
        """True when nothing usable was found, i.e. the trace must not be replayed."""
        return not self.operations


def parse_trace(text: str) -> ParsedTrace:
    """
    Lenient parser for ``OP KEY [VALUE...]`` lines.

    Blank lines are ignored. Lines with a single token or an unknown op are
    dropped and remembered in ``skipped``; nothing here ever raises.
    """
    ops, skipped = [], []
    # only \n ends a line, other separators stay inside the value
    for lineno, line in enumerate(text.split("\n"), start=1):
        parts = line.split()
        if not parts:
            continue
        if len(parts) < 2:
            skipped.append((lineno, "missing key"))
            continue

        op = parts[0].upper()
        if op not in OPS:
            skipped.append((lineno, f"unknown operation {parts[0]!r}"))
            continue
        # trailing tokens only mean something for PUT
        value = " ".join(parts[2:]) if op == PUT else ""
        ops.append(Operation(op, parts[1], value))

    if skipped:
        logger.debug("dropped %d malformed trace line(s): %s",
                     len(skipped), skipped[:10])
    logger.debug("parsed %d operation(s)", len(ops))
    return ParsedTrace(ops, skipped)


def parse_trace_file(path) -> ParsedTrace:
    return parse_trace(pathlib.Path(path).read_text())
