"""Pydantic record and search response schemas."""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class GameRecord(BaseModel):
    """One parsed row of the sales dataset."""
    id: int = Field(ge=0, description="0-based data row position, also the document id")
    name: str
    series: str = Field(description="Title prefix before the first colon, empty if none")
    platform: str
    year_of_release: int = 0
    genre: str
    publisher: str
    na_sales: float = 0.0
    eu_sales: float = 0.0
    jp_sales: float = 0.0
    other_sales: float = 0.0
    global_sales: float = 0.0
    critic_score: float = 0.0
    critic_count: int = 0
    user_score: float = 0.0
    user_count: int = 0
    rating: Optional[str] = None

    def to_document(self) -> Dict[str, Any]:
        """Flat key/value document written to the index (no rating)."""
        return self.model_dump(exclude={"rating"})


class PredecessorResult(BaseModel):
    """Predecessor statistics for one record."""
    count: int = 0
    sales_mean: float = 0.0


# -------------------------
# SEARCH RESPONSE
# -------------------------

class HitSource(BaseModel):
    model_config = ConfigDict(extra="allow")

    genre: str
    global_sales: float


class SearchHit(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    source: HitSource = Field(alias="_source")


class SearchHits(BaseModel):
    model_config = ConfigDict(extra="allow")

    total: int
    hits: List[SearchHit] = Field(default_factory=list)

    @field_validator("total", mode="before")
    @classmethod
    def _unwrap_total(cls, value: Any) -> Any:
        # Elasticsearch 7+ reports {"value": n, "relation": "eq"}
        if isinstance(value, dict):
            return value.get("value")
        return value


class SearchResponse(BaseModel):
    """Subset of a ``_search`` response used for predecessor statistics."""
    model_config = ConfigDict(extra="allow")

    hits: SearchHits
