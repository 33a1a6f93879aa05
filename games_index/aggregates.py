"""Predecessor statistics from search responses."""
import logging
from typing import Dict, Iterable, Mapping

from .schemas import GameRecord, PredecessorResult, SearchResponse

logger = logging.getLogger(__name__)


def compute_predecessor_result(record: GameRecord, response: SearchResponse) -> PredecessorResult:
    """
    Summarize the predecessors found for one record.

    ``sales_mean`` only averages hits in the record's genre, while ``count``
    is the total reported by the index, genre or not.
    """
    total = 0.0
    matched = 0
    for hit in response.hits.hits:
        if hit.source.genre == record.genre:
            total += hit.source.global_sales
            matched += 1

    logger.debug("record %s: sum %s count %s", record.id, total, matched)
    mean = total / matched if matched > 0 else 0.0
    return PredecessorResult(count=response.hits.total, sales_mean=mean)


def compute_predecessors(
    records: Iterable[GameRecord],
    responses: Mapping[int, SearchResponse],
) -> Dict[int, PredecessorResult]:
    """Compute results for every record that has a stored response."""
    by_id = {r.id: r for r in records}
    results: Dict[int, PredecessorResult] = {}
    for record_id, response in responses.items():
        record = by_id.get(record_id)
        if record is None:
            logger.warning("response for unknown record id %s ignored", record_id)
            continue
        results[record_id] = compute_predecessor_result(record, response)
    return results
