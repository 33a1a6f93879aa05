"""CSV input and output for the games dataset."""
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Sequence
import pandas as pd

from .schemas import GameRecord, PredecessorResult
from .settings import Settings


SOURCE_COLUMNS: List[str] = [
    "Name", "Platform", "Year_of_Release", "Genre", "Publisher",
    "NA_Sales", "EU_Sales", "JP_Sales", "Other_Sales", "Global_Sales",
    "Critic_Score", "Critic_Count", "User_Score", "User_Count", "Rating",
]
# The loader row shape has no rating
LOADER_COLUMNS: List[str] = [c for c in SOURCE_COLUMNS if c != "Rating"]

OUTPUT_COLUMNS: List[str] = SOURCE_COLUMNS + ["Predecessors_Count", "Predecessors_Sales_Mean"]

# Record attributes written under each source column
_RECORD_FIELDS: List[str] = [
    "name", "platform", "year_of_release", "genre", "publisher",
    "na_sales", "eu_sales", "jp_sales", "other_sales", "global_sales",
    "critic_score", "critic_count", "user_score", "user_count", "rating",
]


def read_games_csv(path: Path, required_columns: Sequence[str] = SOURCE_COLUMNS) -> pd.DataFrame:
    """
    Load the games CSV with every cell as a string.

    Empty cells stay empty strings; numeric coercion happens in parsing.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Games dataset not found at {path}")

    df = pd.read_csv(path, sep=",", dtype=str, keep_default_na=False, encoding="utf-8")
    missing = [c for c in required_columns if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns in {path}: {missing}")
    return df


def default_output_path(settings: Settings, now: Optional[datetime] = None) -> Path:
    """Configured OUTPUT_CSV, or a timestamped file next to the dataset."""
    if settings.OUTPUT_CSV is not None:
        return Path(settings.OUTPUT_CSV)
    now = now or datetime.now()
    return settings.DATASET_DIR / f"Predecessors_Dataset_{now.strftime('%Y-%m-%d_%H-%M-%S')}.csv"


def prepare_output_path(path: Path) -> Path:
    """Create the parent directory and truncate ``path``; raises OSError if unwritable."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8"):
        pass
    return path


def predecessors_frame(
    records: Iterable[GameRecord],
    predecessors: Mapping[int, PredecessorResult],
) -> pd.DataFrame:
    """One output row per record, in record order."""
    rows = []
    for record in records:
        result = predecessors[record.id]
        row = {col: getattr(record, field) for col, field in zip(SOURCE_COLUMNS, _RECORD_FIELDS)}
        if row["Rating"] is None:
            row["Rating"] = ""
        row["Predecessors_Count"] = result.count
        row["Predecessors_Sales_Mean"] = result.sales_mean
        rows.append(row)
    return pd.DataFrame(rows, columns=OUTPUT_COLUMNS)


def write_predecessors_csv(
    path: Path,
    records: Iterable[GameRecord],
    predecessors: Mapping[int, PredecessorResult],
) -> Path:
    """Write the semicolon-separated predecessors dataset."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df = predecessors_frame(records, predecessors)
    df.to_csv(path, sep=";", index=False, encoding="utf-8")
    return path
