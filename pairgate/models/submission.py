"""Submission contract consumed by pair filters.

Filters only ever read ``name``. Any object with a string ``name`` attribute
satisfies NamedSubmission; Submission is the minimal concrete type used by the
CLI and tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol


class NamedSubmission(Protocol):
    """Anything with a stable, unique submission name."""

    @property
    def name(self) -> str: ...


@dataclass(frozen=True)
class Submission:
    """A submission identified by name.

    Fields:
        name: Identity key; must match list file tokens exactly.
        path: Optional location of the submission's sources (not used by filters).
    """

    name: str
    path: Optional[str] = None
