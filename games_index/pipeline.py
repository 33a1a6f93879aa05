"""Loader and enricher pipelines.

Both pipelines run one request per record, sequentially.  A record whose
request fails is logged and kept in the report's ``failures`` list; the run
moves on to the next record without retrying.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, Generic, List, Optional, TypeVar

from .aggregates import compute_predecessors
from .index_client import IndexClient, IndexClientError
from .parsing import parse_games
from .queries import build_similarity_query
from .schemas import GameRecord, PredecessorResult, SearchResponse
from .settings import Settings
from .storage import (
    LOADER_COLUMNS,
    SOURCE_COLUMNS,
    default_output_path,
    prepare_output_path,
    read_games_csv,
    write_predecessors_csv,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Used for records whose search failed
MISSING_PREDECESSORS = PredecessorResult(count=0, sales_mean=0.0)


@dataclass(frozen=True)
class RecordFailure:
    record_id: int
    error: str


@dataclass(frozen=True)
class RecordResult(Generic[T]):
    """Outcome of the request made for one record."""
    record_id: int
    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class LoadReport:
    loaded: List[int] = field(default_factory=list)
    failures: List[RecordFailure] = field(default_factory=list)


@dataclass
class EnrichmentReport:
    records: List[GameRecord] = field(default_factory=list)
    predecessors: Dict[int, PredecessorResult] = field(default_factory=dict)
    failures: List[RecordFailure] = field(default_factory=list)
    output_path: Optional[Path] = None


def make_client(settings: Settings) -> IndexClient:
    return IndexClient(
        settings.ES_BASE_URL,
        timeout=settings.REQUEST_TIMEOUT,
        search_size=settings.SEARCH_SIZE,
    )


# -------------------------
# LOADER
# -------------------------

def index_game(record: GameRecord, client: IndexClient, settings: Settings) -> RecordResult[int]:
    """Upsert one record; a non-2xx status counts as a failure."""
    try:
        response = client.put_document(settings.document_path, record.id, record.to_document())
    except IndexClientError as e:
        return RecordResult(record.id, error=str(e))
    if not response.is_success:
        return RecordResult(record.id, error=f"HTTP {response.status_code}: {response.text[:200]}")
    return RecordResult(record.id, value=response.status_code)


def load_games(records: List[GameRecord], client: IndexClient, settings: Settings) -> LoadReport:
    report = LoadReport()
    for record in records:
        result = index_game(record, client, settings)
        if result.ok:
            logger.info("Indexed game %s (HTTP %s)", record.id, result.value)
            report.loaded.append(record.id)
        else:
            logger.error("Failed to index game %s: %s", record.id, result.error)
            report.failures.append(RecordFailure(record.id, result.error))
    return report


def run_loader(settings: Settings, client: Optional[IndexClient] = None) -> LoadReport:
    """Read the dataset and upsert every game into the index."""
    games = read_games_csv(settings.GAMES_CSV, required_columns=LOADER_COLUMNS)
    records = parse_games(games, include_rating=False)
    logger.info("Parsed %s games from %s", len(records), settings.GAMES_CSV)

    if client is not None:
        return load_games(records, client, settings)
    with make_client(settings) as owned:
        return load_games(records, owned, settings)


# -------------------------
# ENRICHER
# -------------------------

def find_predecessors(
    record: GameRecord, client: IndexClient, settings: Settings
) -> RecordResult[SearchResponse]:
    body = build_similarity_query(record, index_name=settings.ES_INDEX, doc_type=settings.ES_DOC_TYPE)
    try:
        response = client.search(settings.search_path, body)
    except IndexClientError as e:
        return RecordResult(record.id, error=str(e))
    return RecordResult(record.id, value=response)


def enrich_games(records: List[GameRecord], client: IndexClient, settings: Settings) -> EnrichmentReport:
    """
    Search predecessors for every record and compute their statistics.

    Every record gets an entry in ``predecessors``; records whose search
    failed get ``MISSING_PREDECESSORS``.
    """
    report = EnrichmentReport(records=list(records))
    responses: Dict[int, SearchResponse] = {}

    for record in records:
        result = find_predecessors(record, client, settings)
        if result.ok:
            responses[record.id] = result.value
            logger.info("Found predecessors for game %s (%s hits)", record.id, result.value.hits.total)
        else:
            logger.error("Predecessor search failed for game %s: %s", record.id, result.error)
            report.failures.append(RecordFailure(record.id, result.error))

    computed = compute_predecessors(records, responses)
    report.predecessors = {r.id: computed.get(r.id, MISSING_PREDECESSORS) for r in records}
    return report


def run_enricher(
    settings: Settings,
    client: Optional[IndexClient] = None,
    now: Optional[datetime] = None,
) -> EnrichmentReport:
    """Read the dataset, enrich it from the index and write the output CSV."""
    games = read_games_csv(settings.GAMES_CSV, required_columns=SOURCE_COLUMNS)
    records = parse_games(games, include_rating=True)
    # fail before any search if the output can't be written
    output_path = prepare_output_path(default_output_path(settings, now))
    logger.info("Parsed %s games from %s", len(records), settings.GAMES_CSV)

    if client is not None:
        report = enrich_games(records, client, settings)
    else:
        with make_client(settings) as owned:
            report = enrich_games(records, owned, settings)

    report.output_path = write_predecessors_csv(output_path, report.records, report.predecessors)
    logger.info("Wrote %s rows to %s", len(report.records), report.output_path)
    return report
