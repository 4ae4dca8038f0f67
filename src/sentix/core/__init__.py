"""Core modules for Sentix."""

from .models import *
from .config import settings
from .store import ReviewStore
from .stats import *

__all__ = [
    "settings",
    "ReviewStore",
    "ReviewEntry",
    "ReviewStatus",
    "SentimentAnalysis",
    "SentimentType",
    "SentimentStats",
    "AspectCount",
    "compute_stats",
    "compute_top_aspects",
]
