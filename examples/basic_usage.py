"""Basic usage examples for Sentix."""

import os
from sentix import ReviewStore, ReviewProcessor, SentimentServiceFactory
from sentix.core.constants import EXAMPLE_REVIEWS
from sentix.core.stats import compute_stats, compute_top_aspects, percentage


def example_single_review():
    """Example: analyze one review."""
    print("🔍 Analyzing a single review")

    store = ReviewStore()
    processor = ReviewProcessor(store, SentimentServiceFactory.create())

    entry = processor.process("Great product, fast shipping!")
    print(f"📋 Status: {entry.status.value}")
    if entry.analysis:
        print(f"🎯 {entry.analysis.sentiment.value} ({percentage(entry.analysis.score, 1)}%)")
        print(f"💬 {entry.analysis.reasoning}")
    else:
        print(f"❌ {entry.error}")


def example_dashboard_stats():
    """Example: load the example reviews and print the dashboard numbers."""
    print("\n🔍 Loading example reviews")

    store = ReviewStore()
    processor = ReviewProcessor(store, SentimentServiceFactory.create())
    processor.process_many(EXAMPLE_REVIEWS)

    stats = compute_stats(store.entries)
    print(f"📊 Total analyzed: {stats.total}")
    print(f"😊 Satisfaction score: {percentage(stats.average_score, 1)}%")
    print(f"👍 Positive index: {percentage(stats.positive, stats.total)}%")
    print(f"👎 Negative rate: {percentage(stats.negative, stats.total)}%")

    print("🏷️ Top aspects:")
    for aspect in compute_top_aspects(store.entries):
        print(f"  {aspect.name}: {aspect.count}")


if __name__ == "__main__":
    if not os.getenv("OPENAI_API_KEY"):
        print("⚠️ OPENAI_API_KEY is not set - every analysis will end in an error entry")

    example_single_review()
    example_dashboard_stats()
