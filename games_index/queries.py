"""More-like-this query construction for predecessor lookup."""
from typing import Any, Dict

from .schemas import GameRecord

NAME_FIELD = "name"
SERIES_FIELD = "series.raw"


def _like_document(record: GameRecord, index_name: str, doc_type: str) -> Dict[str, Any]:
    like = {"_id": str(record.id), "_index": index_name}
    if doc_type:
        like["_type"] = doc_type
    return like


def more_like_this_clause(
    field: str,
    record: GameRecord,
    minimum_should_match: str,
    index_name: str = "games",
    doc_type: str = "game",
) -> Dict[str, Any]:
    """Similarity clause against the indexed document of ``record``."""
    return {
        "more_like_this": {
            "fields": [field],
            "like": [_like_document(record, index_name, doc_type)],
            "min_doc_freq": 1,
            "min_term_freq": 1,
            "boost_terms": 100,
            "max_query_terms": 100,
            "minimum_should_match": minimum_should_match,
        }
    }


def build_similarity_query(
    record: GameRecord,
    index_name: str = "games",
    doc_type: str = "game",
) -> Dict[str, Any]:
    """
    Build the predecessor query for a record.

    With a series, titles need to share half their terms and the series must
    match completely. Without one, the title alone must match all terms.
    """
    has_series = record.series != ""

    must = [
        more_like_this_clause(
            NAME_FIELD,
            record,
            "50%" if has_series else "100%",
            index_name=index_name,
            doc_type=doc_type,
        ),
        # always true for sales data, kept so the query shape stays stable
        {"range": {"global_sales": {"gte": 0}}},
    ]
    if has_series:
        must.append(
            more_like_this_clause(
                SERIES_FIELD,
                record,
                "100%",
                index_name=index_name,
                doc_type=doc_type,
            )
        )

    return {"query": {"bool": {"must": must}}}
