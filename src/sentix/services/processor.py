"""Runs reviews through analysis and writes the outcome back to the store."""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterable, List, Optional

from ..core.config import settings
from ..core.models import ReviewEntry, ReviewStatus
from ..core.store import ReviewStore
from .llm import AnalysisError

logger = logging.getLogger(__name__)


class ReviewProcessor:
    """Submits reviews to a store and resolves them with the service's result.

    Only the calling thread touches the store. Batch analysis may run on
    worker threads, but each result is resolved here by entry id.
    """

    def __init__(self, store: ReviewStore, service):
        self.store = store
        self.service = service

    def _analyze(self, entry: ReviewEntry):
        try:
            return self.service.analyze(entry.text)
        except AnalysisError as e:
            return e
        except Exception as e:
            logger.error(f"Sentiment service raised unexpectedly for review {entry.id}: {e}")
            error = AnalysisError()
            error.__cause__ = e
            return error

    def submit(self, text: str) -> Optional[ReviewEntry]:
        """Add a review without analyzing it yet."""
        return self.store.submit(text)

    def analyze_entries(self, entries: List[ReviewEntry], max_workers: Optional[int] = None) -> List[ReviewEntry]:
        """Analyze already submitted entries and resolve each by id."""
        workers = max(1, max_workers or settings.max_concurrent_requests)

        if workers == 1 or len(entries) <= 1:
            for entry in entries:
                self.store.resolve(entry.id, self._analyze(entry))
        else:
            logger.info(f"Analyzing {len(entries)} reviews with {workers} workers")
            with ThreadPoolExecutor(max_workers=workers) as executor:
                future_to_id = {executor.submit(self._analyze, entry): entry.id for entry in entries}
                for future in as_completed(future_to_id):
                    self.store.resolve(future_to_id[future], future.result())

        return [self.store.get(e.id) or e for e in entries]

    def analyze_pending(self, max_workers: Optional[int] = None) -> List[ReviewEntry]:
        """Analyze every entry still waiting for a result."""
        pending = [e for e in self.store.entries if e.status == ReviewStatus.ANALYZING]
        # oldest first, matching submission order
        pending.reverse()
        return self.analyze_entries(pending, max_workers)

    def process(self, text: str) -> Optional[ReviewEntry]:
        """Submit one review and wait for its analysis."""
        entry = self.submit(text)
        if entry is None:
            return None
        return self.analyze_entries([entry], max_workers=1)[0]

    def process_many(self, texts: Iterable[str], max_workers: Optional[int] = None) -> List[ReviewEntry]:
        """Submit a batch of reviews.

        With a single worker each review is submitted and resolved before
        the next one. With more, every review is submitted up front and
        resolved as its analysis finishes.
        """
        workers = max(1, max_workers or settings.max_concurrent_requests)

        if workers == 1:
            entries = [self.process(text) for text in texts]
            return [e for e in entries if e is not None]

        entries = [e for e in (self.submit(text) for text in texts) if e is not None]
        if not entries:
            return []
        return self.analyze_entries(entries, workers)
