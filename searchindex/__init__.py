"""
searchindex - embeddable in-memory full-text search
"""

from .config import SearchConfig
from .cache import ResultCache, CacheConfig
from .search import (
    SearchIndex, SearchOptions, DocumentEntry, SearchResponse, SearchResult,
    Highlight, IndexStats
)
from .registry import IndexRegistry

__version__ = "0.1.0"

__all__ = [
    "SearchConfig",
    "ResultCache",
    "CacheConfig",
    "SearchIndex",
    "SearchOptions",
    "DocumentEntry",
    "SearchResponse",
    "SearchResult",
    "Highlight",
    "IndexStats",
    "IndexRegistry"
]
