"""Pair filter protocol.

A comparison engine calls should_check(a, b) once per candidate pair and skips
the comparison when it returns False. Implementations are read-only after
construction and may be called from any number of threads.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pairgate.models.submission import NamedSubmission


@runtime_checkable
class PairFilter(Protocol):
    def should_check(self, submission_a: NamedSubmission, submission_b: NamedSubmission) -> bool:
        """Should the given submissions be compared against each other?"""
        ...


class PassAllFilter:
    """Filter used when no pair list is configured: every pair is checked."""

    def should_check(self, submission_a: NamedSubmission, submission_b: NamedSubmission) -> bool:
        return True

    def __repr__(self) -> str:
        return "PassAllFilter()"
