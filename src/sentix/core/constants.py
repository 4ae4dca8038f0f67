"""Constants and configuration values for Sentix."""

# Prompt Constants
class PromptConstants:
    """Constants for the sentiment classification request."""

    SYSTEM_INSTRUCTION = (
        "You are an expert e-commerce sentiment analyst. Provide precise classification "
        "and scoring based on the linguistic nuances of customer feedback. Ensure the "
        "'sentiment' property is exactly 'POSITIVE', 'NEGATIVE', or 'NEUTRAL'."
    )
    USER_TEMPLATE = 'Analyze the sentiment of the following e-commerce review: "{text}"'

    SCHEMA_NAME = "review_sentiment"
    MAX_TOKENS = 300  # plenty for one sentence of reasoning plus aspects


# Normalization defaults applied to the model response
class AnalysisDefaults:
    """Fallback values used when the model omits or garbles a field."""

    SCORE = 0.5
    REASONING = "No reasoning provided."
    ERROR_MESSAGE = "Failed to analyze sentiment. Please try again."


# Score bands for the per-review score bar
class ScoreConstants:
    """Thresholds for colouring a review's score."""

    HIGH_THRESHOLD = 0.7  # strictly above is "high"
    LOW_THRESHOLD = 0.4  # strictly below is "low"


# UI Constants
class UIConstants:
    """Constants for the Streamlit dashboard."""

    PAGE_TITLE = "Sentix · E-commerce Insights"
    PAGE_ICON = "😊"
    EXCERPT_LENGTH = 240  # chars shown per review card

    SENTIMENT_COLORS = {
        "Positive": "#10b981",
        "Neutral": "#f59e0b",
        "Negative": "#ef4444",
    }
    ASPECT_BAR_COLOR = "#6366f1"
    BAND_COLORS = {
        "high": "green",
        "medium": "orange",
        "low": "red",
    }


EXAMPLE_REVIEWS = [
    "The build quality of this laptop is absolutely stunning. It feels premium and the performance is snappy. Highly recommended!",
    "I'm disappointed with the shipping speed. It took three weeks to arrive, and the box was slightly crushed. Product itself is okay.",
    "Decent wireless earbuds for the price. Not the best sound quality, but they get the job done for the gym.",
    "STAY AWAY! The battery stopped charging after only 2 days. Customer support hasn't replied to my emails yet.",
    "Excellent customer service! They replaced my broken unit within 48 hours, no questions asked. The replacement works perfectly.",
]
