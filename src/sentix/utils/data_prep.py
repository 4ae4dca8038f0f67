"""Data preparation for export."""

import json
import datetime
from typing import Dict, Any, List
from ..core.models import ReviewEntry, SentimentStats, AspectCount
from .. import __version__


def prepare_export(
    entries: List[ReviewEntry],
    stats: SentimentStats,
    top_aspects: List[AspectCount],
) -> Dict[str, Any]:
    """Prepare data for JSON export."""

    reviews_data = []
    for entry in entries:
        review_dict = {
            "id": entry.id,
            "text": entry.text,
            "timestamp": entry.timestamp,
            "status": entry.status.value,
        }
        if entry.analysis is not None:
            review_dict["analysis"] = {
                "sentiment": entry.analysis.sentiment.value,
                "score": entry.analysis.score,
                "reasoning": entry.analysis.reasoning,
                "keyAspects": list(entry.analysis.key_aspects),
            }
        if entry.error is not None:
            review_dict["error"] = entry.error
        reviews_data.append(review_dict)

    return {
        "summary": {
            "total": stats.total,
            "positive": stats.positive,
            "negative": stats.negative,
            "neutral": stats.neutral,
            "average_score": stats.average_score,
        },
        "top_aspects": [{"name": a.name, "count": a.count} for a in top_aspects],
        "reviews": reviews_data,
        "metadata": {
            "export_timestamp": datetime.datetime.now().isoformat(),
            "version": __version__,
        },
    }


def to_json(data: Dict[str, Any]) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(to_json(data))
