"""
In-memory LRU result cache for search responses
Handles canonical query keys, bounded capacity and full invalidation
"""
import json
import hashlib
import logging
from collections import OrderedDict
from typing import Any, Optional, Dict
from .config import CacheConfig

logger = logging.getLogger(__name__)


class ResultCache:
    """LRU cache keyed by a canonical hash of query data"""

    def __init__(self, capacity: Optional[int] = None):
        """Initialize cache with a maximum number of entries"""
        self.config = CacheConfig()
        self.capacity = self.config.get_capacity(capacity)
        self.enabled = self.capacity > 0
        self._entries: "OrderedDict[str, Any]" = OrderedDict()
        self.hits = 0
        self.misses = 0

        if not self.enabled:
            logger.warning("Result cache initialized with zero capacity - caching disabled")

    def _generate_key(self, identifier: str) -> str:
        """Generate cache key with proper prefix"""
        return f"{self.config.SEARCH_PREFIX}{identifier}"

    def _hash_query(self, query_data: Dict[str, Any]) -> str:
        """Generate hash for query data to use as cache key"""
        query_str = json.dumps(query_data, sort_keys=True, default=str)
        return hashlib.md5(query_str.encode()).hexdigest()

    def make_key(self, query_data: Dict[str, Any]) -> str:
        """Build the cache key for a query, independent of mapping order"""
        return self._generate_key(self._hash_query(query_data))

    def get(self, key: str) -> Optional[Any]:
        """Get cached value and mark it most recently used"""
        if not self.enabled or key not in self._entries:
            self.misses += 1
            logger.debug(f"Cache MISS: {key}")
            return None

        self._entries.move_to_end(key)
        self.hits += 1
        logger.debug(f"Cache HIT: {key}")
        return self._entries[key]

    def set(self, key: str, value: Any) -> bool:
        """Store value, evicting the least recently used entry when full"""
        if not self.enabled:
            return False

        self._entries[key] = value
        self._entries.move_to_end(key)
        logger.debug(f"Cache SET: {key}")

        while len(self._entries) > self.capacity:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug(f"Cache EVICT: {evicted}")
        return True

    def clear(self) -> int:
        """Drop every cached entry and return how many were removed"""
        removed = len(self._entries)
        self._entries.clear()
        if removed:
            logger.debug(f"Cache INVALIDATE: {removed} entries")
        return removed

    def get_cached_search_results(self, query_data: Dict[str, Any]) -> Optional[Any]:
        """Get cached search response by query data"""
        return self.get(self.make_key(query_data))

    def cache_search_results(self, query_data: Dict[str, Any], response: Any) -> bool:
        """Cache a search response under its query data"""
        return self.set(self.make_key(query_data), response)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def get_cache_stats(self) -> Dict[str, Any]:
        """Get cache statistics"""
        return {
            "size": len(self._entries),
            "capacity": self.capacity,
            "hits": self.hits,
            "misses": self.misses,
            "enabled": self.enabled,
        }
