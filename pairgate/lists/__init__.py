"""pairgate pair lists — parsing of ``;``-separated pair list files.

Public API:
    PairListLoader     — reads a list file into a frozenset of PairIdentity
    PairListReadError  — read failure mid-file (an OSError)
    parse_pair_lines   — pure parser over any iterable of lines
"""
from pairgate.lists.loader import (
    PairListLoader,
    PairListReadError,
    expand_line,
    parse_pair_lines,
    split_line,
)

__all__ = [
    "PairListLoader",
    "PairListReadError",
    "expand_line",
    "parse_pair_lines",
    "split_line",
]
