"""
Public per-index API: ingestion, search, suggestions and stats
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from ..cache.manager import ResultCache
from .engine import SearchEngine
from .highlighter import Highlighter
from .indexer import DocumentIndexer
from .models import Document, DocumentEntry, IndexStats, SearchOptions, SearchResponse
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class SearchIndex:
    """
    A single, independent full-text index.

    Not internally synchronized: callers sharing an instance across threads
    must serialize writes against reads themselves.
    """

    def __init__(
        self,
        cache_size: Optional[int] = None,
        tokenizer: Optional[Tokenizer] = None,
        highlighter: Optional[Highlighter] = None
    ):
        self.cache = ResultCache(cache_size)
        self.indexer = DocumentIndexer(self.cache, tokenizer)
        self.engine = SearchEngine(self.indexer, self.cache, highlighter)

    def add_document(
        self,
        doc_id: str,
        document: Document,
        fields: Optional[Sequence[str]] = None
    ) -> None:
        self.indexer.add_document(doc_id, document, fields)

    def add_documents(self, entries: Iterable[Union[DocumentEntry, Mapping[str, Any]]]) -> None:
        self.indexer.add_documents(entries)

    def remove_document(self, doc_id: str) -> None:
        self.indexer.remove_document(doc_id)

    def search(
        self,
        query: str,
        options: Optional[Union[SearchOptions, Dict[str, Any]]] = None
    ) -> SearchResponse:
        return self.engine.search(query, options)

    def get_suggestions(self, prefix: str, limit: Optional[int] = None) -> List[str]:
        return self.engine.get_suggestions(prefix, limit)

    def get_stats(self) -> IndexStats:
        return self.indexer.get_stats()

    def get_document(self, doc_id: str) -> Optional[Document]:
        return self.indexer.get_document(doc_id)

    def clear(self) -> None:
        self.indexer.clear()
        logger.info("Index cleared")

    def __len__(self) -> int:
        return len(self.indexer)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self.indexer
