"""Parse raw dataset rows into game records."""
import re
from typing import Any, List, Mapping
import pandas as pd

from .schemas import GameRecord

# Leading numeric prefix, e.g. "7.2abc" -> "7.2"
_INT_PREFIX = re.compile(r"^\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d+)?|\.\d+)(?:[eE][+-]?\d+)?")


def derive_series(name: str) -> str:
    """
    Derive the series name from a game title.

    Titles like "Halo: Combat Evolved" are assumed to be "<series>: <subtitle>",
    so the text before the first colon is used. Titles without a colon have no
    series. This is a heuristic and misses series that don't use colons.
    """
    if not name:
        return ""
    series, sep, _ = name.partition(":")
    return series if sep else ""


def coerce_int(value: Any, default: int = 0) -> int:
    """Coerce the leading integer of a cell, ``default`` if there is none."""
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return default
    m = _INT_PREFIX.match(str(value))
    if not m:
        return default
    return int(m.group(0))


def coerce_float(value: Any, default: float = 0.0) -> float:
    """Coerce the leading number of a cell, ``default`` if there is none."""
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return default
    m = _FLOAT_PREFIX.match(str(value))
    if not m:
        return default
    return float(m.group(0))


def _text(value: Any) -> str:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ""
    return str(value)


def parse_row(row: Mapping[str, Any], index: int, include_rating: bool = False) -> GameRecord:
    """
    Build a GameRecord from one CSV row.

    Args:
        row: Mapping of CSV column name to raw cell value
        index: 0-based position of the row among data rows
        include_rating: Keep the Rating column (enricher row shape)

    Returns:
        Parsed record; unparsable numeric cells become 0
    """
    name = _text(row.get("Name"))
    return GameRecord(
        id=int(index),
        name=name,
        series=derive_series(name),
        platform=_text(row.get("Platform")),
        year_of_release=coerce_int(row.get("Year_of_Release")),
        genre=_text(row.get("Genre")),
        publisher=_text(row.get("Publisher")),
        na_sales=coerce_float(row.get("NA_Sales")),
        eu_sales=coerce_float(row.get("EU_Sales")),
        jp_sales=coerce_float(row.get("JP_Sales")),
        other_sales=coerce_float(row.get("Other_Sales")),
        global_sales=coerce_float(row.get("Global_Sales")),
        critic_score=coerce_float(row.get("Critic_Score")),
        critic_count=coerce_int(row.get("Critic_Count")),
        user_score=coerce_float(row.get("User_Score")),
        user_count=coerce_int(row.get("User_Count")),
        rating=_text(row.get("Rating")) if include_rating else None,
    )


def parse_games(games: pd.DataFrame, include_rating: bool = False) -> List[GameRecord]:
    """Parse every data row; ids follow file order."""
    records: List[GameRecord] = []
    for index, row in enumerate(games.to_dict(orient="records")):
        records.append(parse_row(row, index, include_rating=include_rating))
    return records
