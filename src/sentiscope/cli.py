"""Command-line interface for SentiScope."""

import argparse
import logging
import subprocess
import sys
from pathlib import Path

from .core.config import settings
from .core.constants import AspectConstants, FileConstants, UIConstants
from .core.keywords import top_keywords
from .core.models import FilterCriteria
from .core.normalize import CSVParseError, load_csv, to_long_frame
from .services.dashboard import build_dashboard
from .services.dataset import DatasetStore
from .services.hybrid import HybridAnalysisService
from .utils.data_prep import export_to_json, prepare_export

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def _load_rows(path):
    """Read a CSV, exiting with a message when nothing usable is found."""
    try:
        rows = load_csv(path)
    except CSVParseError as e:
        print(f"Failed to parse CSV: {e}")
        sys.exit(1)
    if not rows:
        print("Failed to read rows from CSV")
        sys.exit(1)
    return rows


def cmd_summary(args):
    """Summary command."""
    rows = _load_rows(args.csv)
    criteria = FilterCriteria(
        hotel=args.hotel,
        sentiment=args.sentiment,
        language=args.language,
        aspect=args.aspect,
        query=args.search or "",
    )
    view = build_dashboard(rows, criteria)

    print(f"Loaded {len(rows)} aspect-rows from {args.csv}")
    print(f"Matching filters: {len(view.filtered)}")
    print(f"\nTotal reviews: {view.kpi.total_reviews}")
    print(f"Positive rate: {view.kpi.positive_rate}%")
    print(f"Average rating: {view.kpi.avg_rating:.1f}/5")

    print("\nAspect breakdown (pos/neu/neg):")
    for counts in view.aspect_counts:
        print(f"  {counts.aspect:<14} {counts.positive:>4} {counts.neutral:>4} {counts.negative:>4}")

    print("\nHotel x aspect net sentiment:")
    for row in view.heatmap:
        cells = ", ".join(
            f"{aspect}={score:+.2f}" for aspect, score in row.scores.items() if score is not None
        )
        print(f"  {row.hotel}: {cells or 'no data'}")

    if view.trend:
        print("\nSentiment over time:")
        for point in view.trend:
            print(f"  {point.date or '(no date)'}: {point.score:+.2f}")

    if args.out:
        export_to_json(prepare_export(view, include_rows=args.rows), args.out)
        print(f"\nResults exported to {args.out}")


def cmd_hybrid(args):
    """Hybrid analysis command."""
    store = DatasetStore(rows=_load_rows(args.csv))
    service = HybridAnalysisService(latency=args.latency)

    print(f"Running hybrid analysis on {len(store)} aspect-rows...")
    result = service.run_sync(store)
    print(result.message)

    if args.out:
        to_long_frame(store.snapshot()).to_csv(args.out, index=False)
        print(f"Rescored rows written to {args.out}")


def cmd_keywords(args):
    """Keywords command."""
    words = top_keywords(args.text, args.k)
    if not words:
        print("No keywords found")
        return
    for i, word in enumerate(words, 1):
        print(f"  {i}. {word}")


def cmd_ui(args):
    """UI command."""
    app_path = Path(__file__).parent / "ui" / "streamlit_app.py"

    if not app_path.exists():
        print(f"Streamlit app not found at {app_path}")
        return

    print("Launching SentiScope UI...")
    try:
        subprocess.run([
            sys.executable, "-m", "streamlit", "run", str(app_path)
        ], check=True)
    except subprocess.CalledProcessError as e:
        print(f"Failed to launch UI: {e}")
    except KeyboardInterrupt:
        print("\nUI stopped by user")


def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(description="SentiScope - Aspect-Based Sentiment Analysis for Hotel Reviews")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Summary command
    summary_parser = subparsers.add_parser('summary', help='Summarize a long- or wide-format CSV')
    summary_parser.add_argument('csv', help='Input CSV file')
    summary_parser.add_argument('--hotel', default=UIConstants.ALL, help='Hotel name filter')
    summary_parser.add_argument('--sentiment', default=UIConstants.ALL,
                                choices=[UIConstants.ALL, *AspectConstants.SENTIMENTS], help='Sentiment filter')
    summary_parser.add_argument('--language', default=UIConstants.ALL, help='Language code filter')
    summary_parser.add_argument('--aspect', default=UIConstants.ALL, help='Aspect filter')
    summary_parser.add_argument('--search', help='Case-insensitive text search over review text and hotel name')
    summary_parser.add_argument('--out', help='Output JSON file')
    summary_parser.add_argument('--rows', action='store_true', help='Include filtered rows in the JSON export')

    # Hybrid command
    hybrid_parser = subparsers.add_parser('hybrid', help='Run the hybrid ensemble over a CSV')
    hybrid_parser.add_argument('csv', help='Input CSV file')
    hybrid_parser.add_argument('--out', help='Write rescored long-format CSV here')
    hybrid_parser.add_argument('--latency', type=float, help='Simulated latency in seconds (default from settings)')

    # Keywords command
    keywords_parser = subparsers.add_parser('keywords', help='Top keywords of a text')
    keywords_parser.add_argument('text', help='Review text')
    keywords_parser.add_argument('-k', type=int, default=settings.keyword_top_k, help='Number of keywords')

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
        if args.command == 'summary':
            cmd_summary(args)
        elif args.command == 'hybrid':
            cmd_hybrid(args)
        elif args.command == 'keywords':
            cmd_keywords(args)
        elif args.command == 'ui':
            cmd_ui(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
    except Exception as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
