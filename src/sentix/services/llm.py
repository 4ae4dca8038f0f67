"""LLM service for OpenAI sentiment classification."""

import logging
import json
import math
from typing import Any, Dict, Optional
import openai
from ..core.config import settings
from ..core.constants import PromptConstants, AnalysisDefaults
from ..core.models import SentimentAnalysis, SentimentType

logger = logging.getLogger(__name__)

SENTIMENT_SCHEMA = {
    "type": "object",
    "properties": {
        "sentiment": {
            "type": "string",
            "description": "The primary sentiment of the text. Must be one of: POSITIVE, NEGATIVE, NEUTRAL.",
        },
        "score": {
            "type": "number",
            "description": "A sentiment intensity score from 0.0 (extremely negative) to 1.0 (extremely positive). 0.5 is neutral.",
        },
        "reasoning": {
            "type": "string",
            "description": "A short one-sentence explanation for why this sentiment was chosen.",
        },
        "keyAspects": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Key product aspects mentioned in the review (e.g., 'price', 'durability', 'shipping').",
        },
    },
    "required": ["sentiment", "score", "reasoning", "keyAspects"],
    "additionalProperties": False,
}


def _reject_constant(name: str):
    raise ValueError(f"Non-finite number {name} in model response")


class AnalysisError(Exception):
    """Raised when a review could not be classified."""

    def __init__(self, message: str = AnalysisDefaults.ERROR_MESSAGE):
        super().__init__(message)


def normalize_analysis(payload: Dict[str, Any]) -> SentimentAnalysis:
    """Coerce a decoded model response into a SentimentAnalysis.

    Missing or unusable fields fall back to neutral defaults instead of
    failing the whole analysis.
    """
    raw_sentiment = payload.get("sentiment")
    try:
        sentiment = SentimentType(raw_sentiment.upper())
    except (AttributeError, ValueError):
        sentiment = SentimentType.NEUTRAL

    score = payload.get("score")
    if isinstance(score, bool) or not isinstance(score, (int, float)) or not math.isfinite(score):
        score = AnalysisDefaults.SCORE

    reasoning = payload.get("reasoning") or AnalysisDefaults.REASONING

    aspects = payload.get("keyAspects")
    if not isinstance(aspects, list):
        aspects = []

    return SentimentAnalysis(
        sentiment=sentiment,
        score=float(score),
        reasoning=str(reasoning),
        key_aspects=tuple(a for a in aspects if isinstance(a, str)),
    )


class SentimentServiceFactory:
    """Factory for creating sentiment services."""

    @staticmethod
    def create():
        """Create the OpenAI-backed sentiment service."""
        return OpenAISentimentService()


class OpenAISentimentService:
    """OpenAI-based sentiment classifier."""

    def __init__(self, client: Optional[Any] = None):
        self.model = settings.openai_model
        if client is not None:
            self.client = client
        elif settings.openai_api_key:
            self.client = openai.OpenAI(api_key=settings.openai_api_key)
            logger.info(f"OpenAI sentiment service initialized with model {self.model}")
        else:
            self.client = None
            logger.warning("No OpenAI API key configured - every analysis will fail")

    def _request(self, text: str) -> str:
        if self.client is None:
            raise RuntimeError("OpenAI API key is not configured")

        response = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": PromptConstants.SYSTEM_INSTRUCTION},
                {"role": "user", "content": PromptConstants.USER_TEMPLATE.format(text=text)},
            ],
            response_format={
                "type": "json_schema",
                "json_schema": {
                    "name": PromptConstants.SCHEMA_NAME,
                    "strict": True,
                    "schema": SENTIMENT_SCHEMA,
                },
            },
            max_tokens=PromptConstants.MAX_TOKENS,
            temperature=settings.temperature,
            timeout=settings.request_timeout,
        )
        return response.choices[0].message.content or ""

    def analyze(self, text: str) -> SentimentAnalysis:
        """Classify one review.

        Any failure, whether transport, decoding or an unexpected payload
        shape, surfaces as AnalysisError with a fixed user-facing message.
        The original exception is kept as ``__cause__``.
        """
        try:
            content = self._request(text)
            payload = json.loads(content.strip() or "{}", parse_constant=_reject_constant)
            if not isinstance(payload, dict):
                raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")
            return normalize_analysis(payload)
        except Exception as e:
            logger.error(f"OpenAI sentiment analysis failed: {e}")
            raise AnalysisError() from e
