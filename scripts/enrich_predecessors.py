"""Enrich the games dataset with predecessor counts and mean sales."""
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))
from games_index.logging_utils import setup_logging
from games_index.pipeline import run_enricher
from games_index.settings import settings


def main():
    """Main enrichment function."""
    setup_logging(settings.LOG_LEVEL)

    print("=" * 60)
    print("Predecessors Dataset Enrichment")
    print("=" * 60)
    print(f"Dataset: {settings.GAMES_CSV}")
    print(f"Index:   {settings.ES_BASE_URL}/{settings.search_path}")

    try:
        report = run_enricher(settings)
    except FileNotFoundError as e:
        print(f"ERROR: {e}")
        print("Please place the dataset CSV in dataset/ or set GAMES_CSV")
        sys.exit(1)
    except (ValueError, OSError) as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    print(f"[OK] Saved {len(report.records)} rows to {report.output_path}")
    if report.failures:
        print(f"[WARN] {len(report.failures)} searches failed (written with zero predecessors):")
        for failure in report.failures[:10]:
            print(f"  - {failure.record_id}: {failure.error}")
        if len(report.failures) > 10:
            print(f"  ... and {len(report.failures) - 10} more")
    print("=" * 60)
    print("Enrichment complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
