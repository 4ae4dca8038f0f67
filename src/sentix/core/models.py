"""Data models for Sentix."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

__all__ = [
    "SentimentType",
    "ReviewStatus",
    "SentimentAnalysis",
    "ReviewEntry",
    "SentimentStats",
    "AspectCount",
]


class SentimentType(Enum):
    POSITIVE = "POSITIVE"
    NEGATIVE = "NEGATIVE"
    NEUTRAL = "NEUTRAL"


class ReviewStatus(Enum):
    PENDING = "pending"
    ANALYZING = "analyzing"
    COMPLETED = "completed"
    ERROR = "error"


@dataclass(frozen=True)
class SentimentAnalysis:
    """Structured result of classifying one review."""
    sentiment: SentimentType
    score: float  # 0.0 (extremely negative) to 1.0 (extremely positive)
    reasoning: str
    key_aspects: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ReviewEntry:
    """A submitted review and its processing state.

    Entries are never modified in place; the store swaps in a new copy on
    each transition.
    """
    id: str
    text: str
    timestamp: float
    status: ReviewStatus = ReviewStatus.PENDING
    analysis: Optional[SentimentAnalysis] = None
    error: Optional[str] = None


@dataclass
class SentimentStats:
    """Aggregate over the completed entries."""
    total: int = 0
    positive: int = 0
    negative: int = 0
    neutral: int = 0
    average_score: float = 0.0


@dataclass
class AspectCount:
    """How often a (lower-cased) aspect was mentioned."""
    name: str
    count: int
