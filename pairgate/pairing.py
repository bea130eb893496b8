"""Candidate pair enumeration for a comparison engine.

candidate_pairs() is the engine side of the filter contract: every unordered
pair of submissions is offered to the filter exactly once, in input order
(i < j), and only pairs the filter passes are yielded for comparison.
"""

from __future__ import annotations

from typing import Iterator, Optional, Sequence, TypeVar

from pairgate.filters.base import PairFilter, PassAllFilter
from pairgate.utils.logger import get_logger

logger = get_logger(__name__)

S = TypeVar("S")


def count_pairs(n: int) -> int:
    """Number of unordered pairs among ``n`` submissions."""
    if n < 2:
        return 0
    return n * (n - 1) // 2


def candidate_pairs(
    submissions: Sequence[S],
    pair_filter: Optional[PairFilter] = None,
) -> Iterator[tuple[S, S]]:
    """Yield the submission pairs that should be compared.

    Args:
        submissions: Submissions in the order the engine enumerates them.
        pair_filter: Filter to consult; None checks every pair.

    Yields:
        (a, b) with a preceding b in ``submissions``, for each pair where
        pair_filter.should_check(a, b) is True.
    """
    active = pair_filter if pair_filter is not None else PassAllFilter()
    considered = 0
    skipped = 0
    for i, first in enumerate(submissions):
        for second in submissions[i + 1:]:
            considered += 1
            if active.should_check(first, second):
                yield first, second
            else:
                skipped += 1

    logger.debug(
        "Candidate pairs enumerated",
        submissions=len(submissions),
        considered=considered,
        skipped=skipped,
        checked=considered - skipped,
    )
