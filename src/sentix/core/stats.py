"""Aggregate analytics over review entries."""

import math
from collections import Counter
from typing import Iterable, List, Tuple

from .constants import ScoreConstants
from .models import AspectCount, ReviewEntry, ReviewStatus, SentimentStats, SentimentType

__all__ = [
    "compute_stats",
    "compute_top_aspects",
    "sentiment_distribution",
    "percentage",
    "score_band",
]


def compute_stats(entries: Iterable[ReviewEntry]) -> SentimentStats:
    """Sentiment counts and mean score over completed entries only."""
    completed = [e for e in entries if e.status == ReviewStatus.COMPLETED and e.analysis]
    total = len(completed)
    if total == 0:
        return SentimentStats()

    counts = Counter(e.analysis.sentiment for e in completed)
    average_score = sum(e.analysis.score for e in completed) / total

    return SentimentStats(
        total=total,
        positive=counts[SentimentType.POSITIVE],
        negative=counts[SentimentType.NEGATIVE],
        neutral=counts[SentimentType.NEUTRAL],
        average_score=average_score,
    )


def compute_top_aspects(entries: Iterable[ReviewEntry], limit: int = 5) -> List[AspectCount]:
    """Most mentioned aspects, merged case-insensitively.

    Ties keep the order in which the aspects were first encountered.
    """
    counts = Counter()
    for entry in entries:
        if entry.analysis is None:
            continue
        for aspect in entry.analysis.key_aspects:
            counts[aspect.lower()] += 1

    # most_common keeps insertion order among equal counts
    return [AspectCount(name, count) for name, count in counts.most_common(max(0, limit))]


def sentiment_distribution(stats: SentimentStats) -> List[Tuple[str, int]]:
    """Non-empty slices for the distribution chart."""
    slices = [
        ("Positive", stats.positive),
        ("Neutral", stats.neutral),
        ("Negative", stats.negative),
    ]
    return [(label, value) for label, value in slices if value > 0]


def percentage(part: float, whole: float) -> int:
    if not whole:
        return 0
    # half-up, so 62.5% shows as 63%
    return math.floor(part / whole * 100 + 0.5)


def score_band(score: float) -> str:
    if score > ScoreConstants.HIGH_THRESHOLD:
        return "high"
    if score < ScoreConstants.LOW_THRESHOLD:
        return "low"
    return "medium"
