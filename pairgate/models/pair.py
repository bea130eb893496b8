"""Unordered pair of submission names.

PairIdentity(a, b) and PairIdentity(b, a) are the same value for equality,
hashing and set membership. Both derive from ``key``, the two names in
lexicographic order, so one set entry covers both argument orders.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class PairIdentity:
    """Two submission names, compared as an unordered pair.

    Names are kept exactly as given (case-sensitive, untrimmed).
    A pair of a name with itself is representable and needs no special case.
    """

    name_a: str
    name_b: str

    @property
    def key(self) -> tuple[str, str]:
        """Canonical (sorted) form of the pair."""
        if self.name_b < self.name_a:
            return (self.name_b, self.name_a)
        return (self.name_a, self.name_b)

    @property
    def names(self) -> frozenset[str]:
        return frozenset((self.name_a, self.name_b))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PairIdentity):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return f"{self.key[0]};{self.key[1]}"
