"""pairgate — decide which submission pairs a similarity checker should compare.

    from pairgate import Submission, new_deny_list_filter

    pair_filter = new_deny_list_filter("collaborators.txt")
    pair_filter.should_check(Submission("alice"), Submission("bob"))
"""
from pairgate.filters import (
    ListFilter,
    ListPolicy,
    PairFilter,
    PassAllFilter,
    new_allow_list_filter,
    new_deny_list_filter,
)
from pairgate.lists import PairListLoader, PairListReadError
from pairgate.models import NamedSubmission, PairIdentity, Submission
from pairgate.pairing import candidate_pairs

__version__ = "0.1.0"

__all__ = [
    "ListFilter",
    "ListPolicy",
    "NamedSubmission",
    "PairFilter",
    "PairIdentity",
    "PairListLoader",
    "PairListReadError",
    "PassAllFilter",
    "Submission",
    "candidate_pairs",
    "new_allow_list_filter",
    "new_deny_list_filter",
]
