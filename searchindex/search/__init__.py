"""
Search module for searchindex
Provides tokenization, inverted indexing, ranked search and highlighting
"""

from .tokenizer import Tokenizer, levenshtein_distance
from .models import (
    SearchOptions, DocumentEntry, Highlight, SearchResult, SearchResponse, IndexStats
)
from .indexer import DocumentIndexer
from .highlighter import Highlighter
from .engine import SearchEngine, RankingAlgorithm
from .index import SearchIndex

__all__ = [
    "Tokenizer",
    "levenshtein_distance",
    "SearchOptions",
    "DocumentEntry",
    "Highlight",
    "SearchResult",
    "SearchResponse",
    "IndexStats",
    "DocumentIndexer",
    "Highlighter",
    "SearchEngine",
    "RankingAlgorithm",
    "SearchIndex"
]
