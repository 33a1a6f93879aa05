"""Load the games dataset into the search index, one document per row."""
import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))
from games_index.logging_utils import setup_logging
from games_index.pipeline import run_loader
from games_index.settings import settings

USAGE_EPILOG = (
    "Reads the dataset at GAMES_CSV and upserts each row into "
    "ES_BASE_URL/ES_INDEX. Settings come from the environment or .env."
)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="load_games_index.py",
        description="Load the video game sales dataset into the search index.",
        epilog=USAGE_EPILOG,
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main loading function."""
    parse_args(argv)
    setup_logging(settings.LOG_LEVEL)

    print("=" * 60)
    print("Loading Games Into Search Index")
    print("=" * 60)
    print(f"Dataset: {settings.GAMES_CSV}")
    print(f"Index:   {settings.ES_BASE_URL}/{settings.document_path}")

    try:
        report = run_loader(settings)
    except FileNotFoundError as e:
        print(f"ERROR: {e}")
        print("Please place the dataset CSV in dataset/ or set GAMES_CSV")
        sys.exit(1)
    except (ValueError, OSError) as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    print(f"[OK] Indexed {len(report.loaded)} games")
    if report.failures:
        print(f"[WARN] {len(report.failures)} games failed:")
        for failure in report.failures[:10]:
            print(f"  - {failure.record_id}: {failure.error}")
        if len(report.failures) > 10:
            print(f"  ... and {len(report.failures) - 10} more")
    print("=" * 60)
    print("Loading complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
