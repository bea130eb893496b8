"""List-backed pair filters.

ListFilter wraps one frozen set of listed pairs plus a policy tag:

  ALLOW — only listed pairs are checked
  DENY  — every pair except the listed ones is checked

Both policies load their list the same way (PairListLoader) and differ only in
the polarity applied to the membership test. should_check() does a single
frozenset lookup and never logs; it is called once per submission pair.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pairgate.lists.loader import PairListLoader
from pairgate.models.pair import PairIdentity
from pairgate.models.submission import NamedSubmission
from pairgate.utils.logger import get_logger

logger = get_logger(__name__)


class ListPolicy(str, Enum):
    ALLOW = "allow"
    DENY = "deny"


class ListFilter:
    """Pair filter backed by an immutable set of listed pairs.

    Build with new_allow_list_filter() / new_deny_list_filter() (or
    ListFilter.from_file()) to load from disk, or pass an already-parsed set directly.
    """

    __slots__ = ("_listed_pairs", "_policy")

    def __init__(self, listed_pairs: frozenset[PairIdentity], policy: ListPolicy) -> None:
        self._listed_pairs = frozenset(listed_pairs)
        self._policy = ListPolicy(policy)

    @classmethod
    def from_file(
        cls,
        path: str,
        policy: ListPolicy,
        loader: Optional[PairListLoader] = None,
    ) -> "ListFilter":
        """Load ``path`` and return a ready filter.

        Raises:
            OSError: The list file could not be opened or read. No filter is built.
        """
        pairs = (loader or PairListLoader()).load(path)
        pair_filter = cls(pairs, policy)
        logger.info(
            "Pair filter ready",
            policy=pair_filter.policy.value,
            path=path,
            listed_pairs=len(pairs),
        )
        return pair_filter

    @property
    def policy(self) -> ListPolicy:
        return self._policy

    @property
    def listed_pairs(self) -> frozenset[PairIdentity]:
        return self._listed_pairs

    def is_pair_listed(self, submission_a: NamedSubmission, submission_b: NamedSubmission) -> bool:
        return PairIdentity(submission_a.name, submission_b.name) in self._listed_pairs

    def should_check(self, submission_a: NamedSubmission, submission_b: NamedSubmission) -> bool:
        listed = PairIdentity(submission_a.name, submission_b.name) in self._listed_pairs
        if self._policy is ListPolicy.ALLOW:
            return listed
        return not listed

    def __len__(self) -> int:
        return len(self._listed_pairs)

    def __repr__(self) -> str:
        return f"ListFilter(policy={self._policy.value!r}, listed_pairs={len(self._listed_pairs)})"


def new_allow_list_filter(path: str, loader: Optional[PairListLoader] = None) -> ListFilter:
    """Allow-list filter: only pairs listed in ``path`` are checked."""
    return ListFilter.from_file(path, ListPolicy.ALLOW, loader=loader)


def new_deny_list_filter(path: str, loader: Optional[PairListLoader] = None) -> ListFilter:
    """Deny-list filter: only pairs NOT listed in ``path`` are checked."""
    return ListFilter.from_file(path, ListPolicy.DENY, loader=loader)

