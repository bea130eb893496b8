"""pairgate filters — decide whether a submission pair should be compared.

Public API:
    PairFilter            — protocol: should_check(a, b) -> bool
    ListFilter            — list-backed filter, ALLOW or DENY policy
    ListPolicy            — ALLOW | DENY
    PassAllFilter         — no policy configured; every pair is checked
    new_allow_list_filter — allow-list filter loaded from a file
    new_deny_list_filter  — deny-list filter loaded from a file
"""
from pairgate.filters.base import PairFilter, PassAllFilter
from pairgate.filters.list_filter import (
    ListFilter,
    ListPolicy,
    new_allow_list_filter,
    new_deny_list_filter,
)

__all__ = [
    "ListFilter",
    "ListPolicy",
    "PairFilter",
    "PassAllFilter",
    "new_allow_list_filter",
    "new_deny_list_filter",
]
