"""Command-line interface for Sentix."""

import argparse
import logging
import sys

from .core.config import settings
from .core.constants import EXAMPLE_REVIEWS
from .core.models import ReviewStatus
from .core.stats import compute_stats, compute_top_aspects, percentage
from .core.store import ReviewStore
from .services.llm import SentimentServiceFactory
from .services.processor import ReviewProcessor
from .utils.data_prep import prepare_export, export_to_json

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def cmd_analyze(args):
    """Analyze command."""
    texts = list(args.texts)
    if args.examples:
        texts.extend(EXAMPLE_REVIEWS)

    if not texts:
        print("Nothing to analyze. Pass review texts or --examples.")
        return

    store = ReviewStore()
    processor = ReviewProcessor(store, SentimentServiceFactory.create())

    print(f"Analyzing {len(texts)} reviews...")
    processor.process_many(texts, max_workers=args.workers)

    # Oldest first reads more naturally in a terminal
    for i, entry in enumerate(reversed(store.entries), 1):
        print(f"\n{i}. \"{entry.text[:100]}\"")
        if entry.status == ReviewStatus.COMPLETED:
            analysis = entry.analysis
            print(f"   {analysis.sentiment.value} ({percentage(analysis.score, 1)}%) - {analysis.reasoning}")
            if analysis.key_aspects:
                print(f"   Aspects: {', '.join(analysis.key_aspects)}")
        else:
            print(f"   Error: {entry.error}")

    stats = compute_stats(store.entries)
    top_aspects = compute_top_aspects(store.entries, settings.top_aspects_limit)

    print(f"\nTotal analyzed: {stats.total}")
    print(f"Satisfaction score: {percentage(stats.average_score, 1)}%")
    print(f"Positive index: {percentage(stats.positive, stats.total)}%")
    print(f"Negative rate: {percentage(stats.negative, stats.total)}%")
    if top_aspects:
        print("Top aspects:")
        for aspect in top_aspects:
            print(f"  {aspect.name}: {aspect.count}")

    if args.out:
        export_to_json(prepare_export(store.entries, stats, top_aspects), args.out)
        print(f"Results exported to {args.out}")


def cmd_ui(args):
    """UI command."""
    from .ui import run_streamlit_app

    print("Launching Sentix UI...")
    run_streamlit_app()


def build_parser():
    parser = argparse.ArgumentParser(description="Sentix - E-commerce Review Sentiment Dashboard")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Analyze review texts')
    analyze_parser.add_argument('texts', nargs='*', help='Review texts to analyze')
    analyze_parser.add_argument('--examples', action='store_true', help='Also analyze the built-in example reviews')
    analyze_parser.add_argument('--workers', type=int, default=None, help='Analysis calls allowed in flight')
    analyze_parser.add_argument('--out', help='Output JSON file')

    # UI command
    subparsers.add_parser('ui', help='Launch web UI')

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging()

    try:
        if args.command == 'analyze':
            cmd_analyze(args)
        elif args.command == 'ui':
            cmd_ui(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
    except Exception as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
