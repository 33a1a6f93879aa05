"""Settings and mappings for the games index."""
from typing import Any, Dict

# Typographic apostrophes folded to ASCII before tokenizing
QUOTE_MAPPINGS = [
    "\\u0091=>\\u0027",
    "\\u0092=>\\u0027",
    "\\u2018=>\\u0027",
    "\\u2019=>\\u0027",
    "\\u201B=>\\u0027",
]

TITLE_ANALYZER = "games_english"


def analysis_settings() -> Dict[str, Any]:
    """English title analyzer that drops digits and count words ("one", "two")."""
    return {
        "filter": {
            "games_quantity_stop": {"type": "stop", "stopwords": ["one", "two"]},
            "english_stop": {"type": "stop", "stopwords": "_english_"},
            "english_stemmer": {"type": "stemmer", "language": "english"},
            "english_possessive_stemmer": {"type": "stemmer", "language": "possessive_english"},
        },
        "char_filter": {
            "quotes_mapping": {"type": "mapping", "mappings": QUOTE_MAPPINGS},
            "strip_digits": {"type": "pattern_replace", "pattern": "(\\d+)", "replacement": ""},
        },
        "analyzer": {
            TITLE_ANALYZER: {
                "tokenizer": "standard",
                "char_filter": ["quotes_mapping", "strip_digits"],
                "filter": [
                    "lowercase",
                    "english_possessive_stemmer",
                    "english_stemmer",
                    "english_stop",
                    "games_quantity_stop",
                ],
            }
        },
    }


def game_properties() -> Dict[str, Any]:
    """Field mappings matching GameRecord documents."""
    keyword = {"type": "keyword"}
    props: Dict[str, Any] = {
        "id": {"type": "integer"},
        "name": {"type": "text", "analyzer": TITLE_ANALYZER},
        # series.raw holds the untokenized series for exact similarity
        "series": {
            "type": "text",
            "analyzer": TITLE_ANALYZER,
            "fields": {"raw": keyword},
        },
        "platform": keyword,
        "genre": keyword,
        "publisher": keyword,
        "year_of_release": {"type": "integer"},
        "critic_count": {"type": "integer"},
        "user_count": {"type": "integer"},
    }
    for field in (
        "na_sales",
        "eu_sales",
        "jp_sales",
        "other_sales",
        "global_sales",
        "critic_score",
        "user_score",
    ):
        props[field] = {"type": "float"}
    return props


def games_index_body(doc_type: str = "") -> Dict[str, Any]:
    """
    Request body for creating the games index.

    ``doc_type`` nests the mappings under a type name for indices that still
    use mapping types; leave empty for typeless indices.
    """
    mappings: Dict[str, Any] = {"properties": game_properties()}
    if doc_type:
        mappings = {doc_type: mappings}
    return {
        "settings": {"analysis": analysis_settings()},
        "mappings": mappings,
    }
