"""
Search-related data models for the indexing system
"""

from pydantic import BaseModel, ConfigDict, field_validator
from typing import List, Dict, Optional, Any

from ..config import SearchConfig

# A stored document: field name -> value. Indexable values are a string or a
# list of strings; other scalars are kept for filtering and boosting.
Document = Dict[str, Any]


class SearchOptions(BaseModel):
    """Search options with matching, pagination, boosting and filters"""
    model_config = ConfigDict(extra="forbid")

    fuzzy: bool = False
    max_distance: int = SearchConfig.DEFAULT_MAX_DISTANCE
    limit: int = SearchConfig.DEFAULT_LIMIT
    offset: int = 0
    boost: Dict[str, float] = {}
    filters: Dict[str, Any] = {}
    highlight_fields: Optional[List[str]] = None

    @field_validator("max_distance", "limit", "offset")
    @classmethod
    def clamp_non_negative(cls, value: int) -> int:
        """Negative pagination and distance values are clamped to zero"""
        return max(value, 0)


class DocumentEntry(BaseModel):
    """Batch item for add_documents"""
    id: str
    document: Document
    fields: Optional[List[str]] = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> str:
        """Ids are opaque strings; numeric ids are stored by their text"""
        return str(value)


class Highlight(BaseModel):
    """Marked-up text of a single document field"""
    field: str
    text: str


class SearchResult(BaseModel):
    """Search result with ranking information"""
    id: str
    document: Document
    score: float
    highlights: List[Highlight] = []


class SearchResponse(BaseModel):
    """One page of ranked results plus pagination metadata"""
    results: List[SearchResult] = []
    total: int = 0
    has_more: bool = False
    query: str
    options: SearchOptions


class IndexStats(BaseModel):
    """Statistics for an index"""
    total_documents: int
    total_terms: int
    cache_size: int
    avg_terms_per_document: float
