"""Create the games index with the title analyzer and field mappings."""
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))
from games_index.index_client import IndexClientError
from games_index.index_settings import games_index_body
from games_index.logging_utils import setup_logging
from games_index.pipeline import make_client
from games_index.settings import settings


def main():
    """Create the index; an existing index is left untouched."""
    setup_logging(settings.LOG_LEVEL)

    print("=" * 60)
    print("Creating Games Index")
    print("=" * 60)
    print(f"PUT {settings.ES_BASE_URL}/{settings.ES_INDEX}")

    body = games_index_body(doc_type=settings.ES_DOC_TYPE)
    try:
        with make_client(settings) as client:
            response = client.create_index(settings.ES_INDEX, body)
    except IndexClientError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    if response.is_success:
        print(f"[OK] Created index {settings.ES_INDEX!r}")
    elif response.status_code == 400 and "already_exists" in response.text:
        print(f"[OK] Index {settings.ES_INDEX!r} already exists")
    else:
        print(f"ERROR: HTTP {response.status_code}: {response.text[:500]}")
        sys.exit(1)
    print("=" * 60)


if __name__ == "__main__":
    main()
