"""
Document indexer for searchindex
Owns the document table and the inverted postings (term -> document ids)
"""

import logging
import time
from collections import Counter
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Set, Tuple, Union

from ..cache.manager import ResultCache
from ..config import SearchConfig
from .models import Document, DocumentEntry, IndexStats
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class DocumentIndexer:
    """
    In-memory inverted index over the configured text fields of documents.

    Every mutation clears the attached result cache.
    """

    def __init__(self, cache: ResultCache, tokenizer: Optional[Tokenizer] = None):
        """Initialize indexer with the result cache it invalidates"""
        self.cache = cache
        self.tokenizer = tokenizer or Tokenizer()

        self.documents: Dict[str, Document] = {}
        self.postings: Dict[str, Set[str]] = {}
        self._doc_terms: Dict[str, List[str]] = {}
        self._doc_term_counts: Dict[str, Counter] = {}
        self._doc_fields: Dict[str, Tuple[str, ...]] = {}

    def add_document(
        self,
        doc_id: str,
        document: Document,
        fields: Optional[Sequence[str]] = None
    ) -> None:
        """
        Index a single document

        Re-adding an existing id replaces the previous version, including its
        postings.

        Args:
            doc_id: Opaque document identifier, numeric ids are stored as text
            document: Field name -> value mapping
            fields: Fields to index, defaults to SearchConfig.DEFAULT_FIELDS
        """
        doc_id = str(doc_id)
        indexed_fields = tuple(fields) if fields is not None else SearchConfig.DEFAULT_FIELDS
        terms = self.tokenizer.extract_terms(document, indexed_fields)
        stored = dict(document)

        if doc_id in self.documents:
            logger.debug(f"Re-indexing document {doc_id}")
            self._prune(doc_id)

        self.documents[doc_id] = stored
        self._doc_fields[doc_id] = indexed_fields
        self._doc_terms[doc_id] = terms
        self._doc_term_counts[doc_id] = Counter(terms)

        for term in terms:
            self.postings.setdefault(term, set()).add(doc_id)

        self.cache.clear()
        logger.debug(f"Indexed document {doc_id} ({len(terms)} terms)")

    def add_documents(self, entries: Iterable[Union[DocumentEntry, Mapping[str, Any]]]) -> None:
        """Index a batch of {id, document, fields} entries"""
        start_time = time.time()
        count = 0

        for entry in entries:
            if not isinstance(entry, DocumentEntry):
                entry = DocumentEntry(**entry)
            self.add_document(entry.id, entry.document, entry.fields)
            count += 1

        logger.info(f"Indexed {count} documents in {time.time() - start_time:.3f}s")

    def remove_document(self, doc_id: str) -> None:
        """Remove a document and prune it from every posting set"""
        doc_id = str(doc_id)
        if doc_id not in self.documents:
            logger.debug(f"Remove skipped, document {doc_id} not indexed")
            return

        self._prune(doc_id)
        self.cache.clear()
        logger.debug(f"Removed document {doc_id}")

    def _prune(self, doc_id: str) -> None:
        """Drop a document and its postings without touching the cache"""
        del self.documents[doc_id]
        del self._doc_fields[doc_id]
        del self._doc_term_counts[doc_id]

        for term in set(self._doc_terms.pop(doc_id)):
            doc_ids = self.postings.get(term)
            if doc_ids is None:
                continue
            doc_ids.discard(doc_id)
            if not doc_ids:
                del self.postings[term]

    def clear(self) -> None:
        """Empty documents, postings and the cache"""
        self.documents.clear()
        self.postings.clear()
        self._doc_terms.clear()
        self._doc_term_counts.clear()
        self._doc_fields.clear()
        self.cache.clear()

    def get_document(self, doc_id: str) -> Optional[Document]:
        return self.documents.get(str(doc_id))

    def get_indexed_fields(self, doc_id: str) -> Tuple[str, ...]:
        return self._doc_fields.get(doc_id, ())

    def term_frequency(self, doc_id: str, term: str) -> float:
        """Occurrences of term divided by the total terms of the document"""
        total = len(self._doc_terms.get(doc_id, ()))
        if not total:
            return 0.0
        return self._doc_term_counts[doc_id][term] / total

    def document_frequency(self, term: str) -> int:
        return len(self.postings.get(term, ()))

    def terms(self) -> List[str]:
        return list(self.postings)

    def get_stats(self) -> IndexStats:
        """Get index statistics"""
        total_documents = len(self.documents)
        total_postings = sum(len(doc_ids) for doc_ids in self.postings.values())
        average = round(total_postings / total_documents, 2) if total_documents else 0.0

        return IndexStats(
            total_documents=total_documents,
            total_terms=len(self.postings),
            cache_size=len(self.cache),
            avg_terms_per_document=average
        )

    def __len__(self) -> int:
        return len(self.documents)

    def __contains__(self, doc_id: object) -> bool:
        return str(doc_id) in self.documents
