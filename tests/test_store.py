"""Tests for the review store."""

import dataclasses
import pytest
from sentix.core.models import ReviewStatus, SentimentAnalysis, SentimentType
from sentix.core.store import ReviewStore
from sentix.services.llm import AnalysisError


def _analysis(sentiment=SentimentType.POSITIVE, score=0.9, aspects=None):
    return SentimentAnalysis(
        sentiment=sentiment,
        score=score,
        reasoning="The customer is happy.",
        key_aspects=tuple(aspects) if aspects is not None else ("shipping",),
    )


class TestSubmit:
    """Submitting reviews."""

    def setup_method(self):
        self.store = ReviewStore()

    def test_submit_creates_analyzing_entry_at_head(self):
        """New entries start as analyzing and are placed first."""
        first = self.store.submit("First review")
        second = self.store.submit("Second review")

        assert len(self.store) == 2
        assert self.store.entries[0].id == second.id
        assert self.store.entries[1].id == first.id
        assert second.status == ReviewStatus.ANALYZING
        assert second.analysis is None
        assert second.error is None

    @pytest.mark.parametrize("text", ["", "   ", "\n\t  ", None])
    def test_blank_input_is_ignored(self, text):
        """Blank or whitespace-only input never creates an entry."""
        assert self.store.submit(text) is None
        assert len(self.store) == 0

    def test_text_is_stripped(self):
        entry = self.store.submit("  Great product!  \n")
        assert entry.text == "Great product!"

    def test_ids_are_unique(self):
        ids = {self.store.submit(f"Review {i}").id for i in range(20)}
        assert len(ids) == 20

    def test_entries_are_immutable(self):
        """Entries handed out cannot be changed behind the store's back."""
        entry = self.store.submit("Review")
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.status = ReviewStatus.COMPLETED
        assert self.store.get(entry.id).status == ReviewStatus.ANALYZING

    def test_entries_is_a_snapshot(self):
        """Mutating the returned list does not touch the store."""
        self.store.submit("Review")
        snapshot = self.store.entries
        snapshot.clear()
        assert len(self.store) == 1


class TestResolve:
    """Resolving analysis outcomes."""

    def setup_method(self):
        self.store = ReviewStore()

    def test_resolve_with_analysis_completes_entry(self):
        entry = self.store.submit("Great product, fast shipping!")
        analysis = _analysis()

        assert self.store.resolve(entry.id, analysis) is True

        resolved = self.store.get(entry.id)
        assert resolved.status == ReviewStatus.COMPLETED
        assert resolved.analysis == analysis
        assert resolved.error is None
        assert resolved.text == entry.text
        assert resolved.timestamp == entry.timestamp

    def test_resolve_with_error_marks_entry_failed(self):
        entry = self.store.submit("Some review")

        self.store.resolve(entry.id, AnalysisError())

        resolved = self.store.get(entry.id)
        assert resolved.status == ReviewStatus.ERROR
        assert resolved.error == "Failed to analyze sentiment. Please try again."
        assert resolved.analysis is None

    def test_resolve_only_touches_matching_entry(self):
        a = self.store.submit("Review A")
        b = self.store.submit("Review B")

        self.store.resolve(a.id, _analysis())

        assert self.store.get(a.id).status == ReviewStatus.COMPLETED
        assert self.store.get(b.id).status == ReviewStatus.ANALYZING
        assert [e.id for e in self.store.entries] == [b.id, a.id]

    def test_out_of_order_resolution(self):
        """Results land on their own entry regardless of arrival order."""
        a = self.store.submit("Review A")
        b = self.store.submit("Review B")

        self.store.resolve(b.id, _analysis(SentimentType.NEGATIVE, 0.1))
        self.store.resolve(a.id, _analysis(SentimentType.POSITIVE, 0.8))

        assert self.store.get(a.id).analysis.sentiment == SentimentType.POSITIVE
        assert self.store.get(b.id).analysis.sentiment == SentimentType.NEGATIVE

    def test_resolve_removed_entry_is_noop(self):
        """A late result for a removed entry is discarded."""
        entry = self.store.submit("Review")
        other = self.store.submit("Other review")
        self.store.remove(entry.id)

        assert self.store.resolve(entry.id, _analysis()) is False
        assert len(self.store) == 1
        assert self.store.get(entry.id) is None
        assert self.store.entries[0].id == other.id

    def test_resolve_unknown_id_after_clear(self):
        entry = self.store.submit("Review")
        self.store.clear(confirmed=True)

        assert self.store.resolve(entry.id, AnalysisError()) is False
        assert len(self.store) == 0


class TestRemoveAndClear:
    """Removing entries."""

    def setup_method(self):
        self.store = ReviewStore()

    def test_remove_keeps_relative_order(self):
        a = self.store.submit("A")
        b = self.store.submit("B")
        c = self.store.submit("C")

        assert self.store.remove(b.id) is True
        assert [e.id for e in self.store.entries] == [c.id, a.id]

    def test_remove_unknown_id(self):
        self.store.submit("A")
        assert self.store.remove("missing") is False
        assert len(self.store) == 1

    def test_clear_requires_confirmation(self):
        self.store.submit("A")
        self.store.submit("B")

        assert self.store.clear(confirmed=False) is False
        assert len(self.store) == 2

        assert self.store.clear(confirmed=True) is True
        assert len(self.store) == 0


if __name__ == "__main__":
    pytest.main([__file__])
