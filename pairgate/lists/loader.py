"""Pair list loader for pairgate.

File format: one group per line, names separated by ``;``. Every line declares
all unordered pairs among its names, so ``alice;bob;carol`` lists
{alice,bob}, {alice,carol} and {bob,carol}. Lines never pair with each other.

No comments, no escaping, no header. Names are used verbatim (no whitespace
trimming); empty lines and single-name lines contribute nothing.

Loading is one-shot: the file is read and closed before load() returns, and
the result is a frozenset that is never modified afterwards.
"""

from __future__ import annotations

from itertools import combinations
from typing import Iterable

from pairgate.constants import LIST_FILE_ENCODING, PAIR_SEPARATOR
from pairgate.models.pair import PairIdentity
from pairgate.utils.logger import PerformanceLogger, get_logger

logger = get_logger(__name__)


class PairListReadError(OSError):
    """The list file was opened but could not be read to the end."""


# ─── Line parsing ────────────────────────────────────────────────────────────


def split_line(line: str) -> list[str]:
    """Split one list line into name tokens.

    Trailing empty tokens (``a;b;``) are dropped; interior empty tokens are
    kept verbatim. An empty line yields no tokens.
    """
    tokens = line.split(PAIR_SEPARATOR)
    while tokens and tokens[-1] == "":
        tokens.pop()
    return tokens


def expand_line(line: str) -> set[PairIdentity]:
    """Return every unordered pair among the names on one line."""
    return {PairIdentity(a, b) for a, b in combinations(split_line(line), 2)}


def parse_pair_lines(lines: Iterable[str]) -> frozenset[PairIdentity]:
    """Parse list lines into the set of listed pairs.

    Each element of ``lines`` may still carry its line terminator.
    """
    pairs: set[PairIdentity] = set()
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line:
            continue
        pairs.update(expand_line(line))
    return frozenset(pairs)


# ─── PairListLoader ──────────────────────────────────────────────────────────


class PairListLoader:
    """Reads pair list files.

    Usage:
        pairs = PairListLoader().load("/path/to/pairs.txt")

    Raises OSError when the file cannot be opened or read; nothing is
    returned in that case. There is no fallback to an empty list.
    """

    def __init__(self, encoding: str = LIST_FILE_ENCODING) -> None:
        self.encoding = encoding

    def load(self, path: str) -> frozenset[PairIdentity]:
        """Load a list file and return its listed pairs."""
        line_count = 0

        def _counted(fh: Iterable[str]) -> Iterable[str]:
            nonlocal line_count
            for line in fh:
                line_count += 1
                yield line

        # PerformanceLogger records the single ERROR on failure.
        with PerformanceLogger("Pair list load", logger=logger.bind(path=path)) as perf:
            try:
                with open(path, encoding=self.encoding) as fh:
                    pairs = parse_pair_lines(_counted(fh))
            except UnicodeDecodeError as exc:
                raise PairListReadError(
                    f"could not decode {path} as {self.encoding} near line {line_count + 1}: {exc.reason}"
                ) from exc

        logger.info(
            "Pair list loaded",
            path=path,
            lines=line_count,
            pairs=len(pairs),
            duration_ms=round(perf.duration_ms, 3),
        )
        return pairs
