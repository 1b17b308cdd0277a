"""
Search Engine Core for searchindex
Implements candidate matching, ranking, filtering, pagination and cache-first search
"""

import math
import logging
import time
from collections import defaultdict
from typing import List, Dict, Optional, Any, Union

from ..cache.manager import ResultCache
from ..config import SearchConfig
from .highlighter import Highlighter
from .indexer import DocumentIndexer
from .models import Document, SearchOptions, SearchResponse, SearchResult
from .tokenizer import levenshtein_distance

logger = logging.getLogger(__name__)


class RankingAlgorithm:
    """Combines token, TF-IDF and boost components into a relevance score"""

    def __init__(self, indexer: DocumentIndexer, weights: Optional[Dict[str, float]] = None):
        self.indexer = indexer
        self.weights = weights or SearchConfig.get_scoring_weights()

    def calculate_relevance_score(
        self,
        doc_id: str,
        token_score: float,
        query_terms: List[str],
        boost: Dict[str, float]
    ) -> float:
        """
        Calculate relevance score for a candidate document

        Args:
            doc_id: Candidate document id
            token_score: Accumulated exact and fuzzy match score
            query_terms: Normalized query terms
            boost: Field name -> multiplier

        Returns:
            Weighted relevance score
        """
        tfidf = self._calculate_tfidf(doc_id, query_terms)
        boost_score = self._calculate_boost(self.indexer.get_document(doc_id), boost)

        return (
            token_score * self.weights["token_score"]
            + tfidf * self.weights["tfidf"]
            + boost_score * self.weights["boost"]
        )

    def _calculate_tfidf(self, doc_id: str, query_terms: List[str]) -> float:
        """Sum of tf * idf over the query terms"""
        total_documents = len(self.indexer)
        score = 0.0

        for term in query_terms:
            tf = self.indexer.term_frequency(doc_id, term)
            if not tf:
                continue
            idf = math.log((total_documents + 1) / (self.indexer.document_frequency(term) + 1))
            score += tf * idf

        return score

    def _calculate_boost(self, document: Document, boost: Dict[str, float]) -> float:
        """Multiply the boost of every field the document has a value for"""
        score = 1.0
        for field, multiplier in boost.items():
            if document.get(field):
                score *= multiplier
        return score


class SearchEngine:
    """
    Core search engine with query processing, ranking, and caching
    """

    def __init__(
        self,
        indexer: DocumentIndexer,
        cache: ResultCache,
        highlighter: Optional[Highlighter] = None
    ):
        """Initialize search engine with an index store and its result cache"""
        self.indexer = indexer
        self.cache = cache
        self.highlighter = highlighter or Highlighter()
        self.tokenizer = indexer.tokenizer
        self.ranking = RankingAlgorithm(indexer)

    def search(
        self,
        query: str,
        options: Optional[Union[SearchOptions, Dict[str, Any]]] = None
    ) -> SearchResponse:
        """
        Main search method with cache-first strategy

        Args:
            query: Raw query text
            options: SearchOptions or a mapping of its fields

        Returns:
            SearchResponse with one page of ranked results
        """
        start_time = time.time()
        query = query or ""
        if options is None:
            options = SearchOptions()
        elif not isinstance(options, SearchOptions):
            options = SearchOptions(**options)

        cache_key_data = {"query": query, "options": options.model_dump()}
        cached_response = self.cache.get_cached_search_results(cache_key_data)
        if cached_response is not None:
            logger.debug(f"Cache HIT for search query: {query}")
            return cached_response.model_copy(deep=True)

        query_terms = self.tokenizer.tokenize(query)
        token_scores = self._score_candidates(query_terms, options)

        ranked = []
        for doc_id, token_score in token_scores.items():
            document = self.indexer.get_document(doc_id)
            if not self._matches_filters(document, options.filters):
                continue
            score = self.ranking.calculate_relevance_score(
                doc_id, token_score, query_terms, options.boost
            )
            ranked.append((doc_id, score))

        ranked.sort(key=lambda item: item[0])
        ranked.sort(key=lambda item: item[1], reverse=True)

        total = len(ranked)
        page = ranked[options.offset:options.offset + options.limit]

        results = []
        for doc_id, score in page:
            document = self.indexer.get_document(doc_id)
            fields = options.highlight_fields
            if fields is None:
                fields = self.indexer.get_indexed_fields(doc_id)
            results.append(SearchResult(
                id=doc_id,
                document=document,
                score=score,
                highlights=self.highlighter.highlight(document, query_terms, fields)
            ))

        response = SearchResponse(
            results=results,
            total=total,
            has_more=options.offset + options.limit < total,
            query=query,
            options=options
        )
        self.cache.cache_search_results(cache_key_data, response.model_copy(deep=True))

        logger.debug(
            f"Search completed: {len(results)} results in {time.time() - start_time:.3f}s "
            f"(query: '{query}', total_found: {total})"
        )
        return response

    def _score_candidates(self, query_terms: List[str], options: SearchOptions) -> Dict[str, float]:
        """Accumulate exact and fuzzy match scores per document id"""
        token_scores: Dict[str, float] = defaultdict(float)

        for term in query_terms:
            for doc_id in self.indexer.postings.get(term, ()):
                token_scores[doc_id] += 1.0

            if not options.fuzzy:
                continue

            for indexed_term, doc_ids in self.indexer.postings.items():
                # Edit distance is at least the length difference
                if abs(len(indexed_term) - len(term)) > options.max_distance:
                    continue
                distance = levenshtein_distance(term, indexed_term)
                if 0 < distance <= options.max_distance:
                    fuzzy_score = 1 / (distance + 1)
                    for doc_id in doc_ids:
                        token_scores[doc_id] += fuzzy_score

        return token_scores

    @staticmethod
    def _strict_equals(value: Any, expected: Any) -> bool:
        """Equality that also requires matching types, so True != 1 != 1.0"""
        return type(value) is type(expected) and value == expected

    def _matches_filters(self, document: Document, filters: Dict[str, Any]) -> bool:
        """Check every filter; list values mean membership, others equality"""
        for field, expected in filters.items():
            if field not in document:
                return False
            value = document[field]
            if isinstance(expected, (list, tuple)):
                if not any(self._strict_equals(value, item) for item in expected):
                    return False
            elif not self._strict_equals(value, expected):
                return False
        return True

    def get_suggestions(self, prefix: str, limit: Optional[int] = None) -> List[str]:
        """Get sorted autocomplete suggestions from the indexed terms"""
        if limit is None:
            limit = SearchConfig.DEFAULT_SUGGESTION_LIMIT
        prefix = (prefix or "").lower()

        matches = sorted(term for term in self.indexer.postings if term.startswith(prefix))
        return matches[:max(limit, 0)]
