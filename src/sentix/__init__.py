"""Sentix - AI-powered e-commerce review sentiment dashboard."""

__version__ = "1.0.0"
__author__ = "Sentix Team"

from .core.models import *
from .core.config import settings
from .core.store import ReviewStore
from .services.llm import SentimentServiceFactory, AnalysisError
from .services.processor import ReviewProcessor

__all__ = [
    "settings",
    "ReviewStore",
    "ReviewProcessor",
    "SentimentServiceFactory",
    "AnalysisError",
]
