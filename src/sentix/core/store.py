"""In-memory review store.

The store owns the list of review entries. Entries are kept most recent
first and every transition after submission is addressed by entry id, so
analysis results may arrive in any order.
"""

import logging
import time
import uuid
from dataclasses import replace
from typing import List, Optional, Union

from .models import ReviewEntry, ReviewStatus, SentimentAnalysis

logger = logging.getLogger(__name__)

Outcome = Union[SentimentAnalysis, Exception]


class ReviewStore:
    """Ordered collection of review entries with explicit transitions."""

    def __init__(self):
        self._entries: List[ReviewEntry] = []

    @property
    def entries(self) -> List[ReviewEntry]:
        """Snapshot of the entries, most recent first."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, entry_id: str) -> Optional[ReviewEntry]:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def submit(self, text: str) -> Optional[ReviewEntry]:
        """Add a review in the analyzing state.

        Blank input is ignored and returns None. Otherwise the new entry is
        placed at the head of the collection and returned so the caller can
        start its analysis.
        """
        if not text or not text.strip():
            return None

        entry = ReviewEntry(
            id=uuid.uuid4().hex,
            text=text.strip(),
            timestamp=time.time(),
            status=ReviewStatus.ANALYZING,
        )
        self._entries.insert(0, entry)
        logger.debug(f"Submitted review {entry.id}")
        return entry

    def resolve(self, entry_id: str, outcome: Outcome) -> bool:
        """Record the outcome of an entry's analysis.

        A SentimentAnalysis completes the entry; an exception marks it as
        failed with the exception's message. Returns False when the entry is
        no longer in the store, in which case nothing changes.
        """
        for index, entry in enumerate(self._entries):
            if entry.id != entry_id:
                continue
            if isinstance(outcome, SentimentAnalysis):
                self._entries[index] = replace(
                    entry, status=ReviewStatus.COMPLETED, analysis=outcome, error=None
                )
            else:
                self._entries[index] = replace(
                    entry, status=ReviewStatus.ERROR, analysis=None, error=str(outcome)
                )
            logger.debug(f"Resolved review {entry_id} as {self._entries[index].status.value}")
            return True

        logger.info(f"Discarding result for removed review {entry_id}")
        return False

    def remove(self, entry_id: str) -> bool:
        before = len(self._entries)
        self._entries = [e for e in self._entries if e.id != entry_id]
        return len(self._entries) < before

    def clear(self, confirmed: bool) -> bool:
        """Drop every entry, but only once the user has confirmed."""
        if not confirmed:
            return False
        self._entries = []
        logger.info("Cleared all reviews")
        return True
