"""pairgate models package.

  - pair.py        — PairIdentity, the symmetric set key for two submission names
  - submission.py  — Submission and the NamedSubmission protocol filters read from
"""
from pairgate.models.pair import PairIdentity
from pairgate.models.submission import NamedSubmission, Submission

__all__ = ["NamedSubmission", "PairIdentity", "Submission"]
