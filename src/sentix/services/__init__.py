"""Services for Sentix."""

from .llm import SentimentServiceFactory, OpenAISentimentService, AnalysisError
from .processor import ReviewProcessor

__all__ = [
    "SentimentServiceFactory",
    "OpenAISentimentService",
    "AnalysisError",
    "ReviewProcessor",
]
