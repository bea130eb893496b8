"""Tests for candidate_pairs() — the comparison engine's side of the filter contract."""

from __future__ import annotations

from structlog.testing import capture_logs

from pairgate.filters import ListFilter, ListPolicy
from pairgate.models import PairIdentity, Submission
from pairgate.pairing import candidate_pairs, count_pairs


def _names(pairs):
    return [(a.name, b.name) for a, b in pairs]


class RecordingFilter:
    """Records every should_check() call and passes everything."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def should_check(self, submission_a, submission_b) -> bool:
        self.calls.append((submission_a.name, submission_b.name))
        return True


COHORT = [Submission(n) for n in ("a", "b", "c", "d")]


class TestCountPairs:
    def test_values(self):
        assert count_pairs(0) == 0
        assert count_pairs(1) == 0
        assert count_pairs(2) == 1
        assert count_pairs(4) == 6
        assert count_pairs(1_000) == 499_500


class TestCandidatePairs:
    def test_no_filter_yields_every_pair_in_order(self):
        assert _names(candidate_pairs(COHORT)) == [
            ("a", "b"), ("a", "c"), ("a", "d"),
            ("b", "c"), ("b", "d"),
            ("c", "d"),
        ]

    def test_filter_called_once_per_unordered_pair(self):
        recorder = RecordingFilter()
        list(candidate_pairs(COHORT, recorder))
        assert len(recorder.calls) == count_pairs(len(COHORT))
        assert len({frozenset(call) for call in recorder.calls}) == len(recorder.calls)

    def test_never_pairs_submission_with_itself(self):
        recorder = RecordingFilter()
        list(candidate_pairs(COHORT, recorder))
        assert all(a != b for a, b in recorder.calls)

    def test_allow_list_restricts(self):
        allow = ListFilter(frozenset({PairIdentity("d", "b")}), ListPolicy.ALLOW)
        assert _names(candidate_pairs(COHORT, allow)) == [("b", "d")]

    def test_deny_list_excludes(self):
        deny = ListFilter(frozenset({PairIdentity("a", "b"), PairIdentity("c", "d")}), ListPolicy.DENY)
        assert _names(candidate_pairs(COHORT, deny)) == [
            ("a", "c"), ("a", "d"), ("b", "c"), ("b", "d"),
        ]

    def test_fewer_than_two_submissions(self):
        assert list(candidate_pairs([])) == []
        assert list(candidate_pairs([Submission("solo")])) == []

    def test_lazy(self):
        recorder = RecordingFilter()
        pairs = candidate_pairs(COHORT, recorder)
        assert recorder.calls == []
        next(pairs)
        assert len(recorder.calls) == 1

    def test_summary_logged_when_exhausted(self):
        deny = ListFilter(frozenset({PairIdentity("a", "b")}), ListPolicy.DENY)
        with capture_logs() as logs:
            list(candidate_pairs(COHORT, deny))
        summary = [e for e in logs if e["event"] == "Candidate pairs enumerated"]
        assert len(summary) == 1
        assert summary[0]["considered"] == 6
        assert summary[0]["skipped"] == 1
        assert summary[0]["checked"] == 5
