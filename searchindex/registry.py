"""
Named registry of independent search indexes
"""

import logging
from typing import Dict, List, Optional

from .search.index import SearchIndex

logger = logging.getLogger(__name__)


class IndexRegistry:
    """Routes index names to SearchIndex instances; holds no documents itself"""

    DEFAULT_INDEX = "default"

    def __init__(self, cache_size: Optional[int] = None):
        """Initialize an empty registry; cache_size is passed to new indexes"""
        self.cache_size = cache_size
        self._indexes: Dict[str, SearchIndex] = {}

    def get_index(self, name: str = DEFAULT_INDEX) -> SearchIndex:
        """Return the named index, creating it on first use"""
        index = self._indexes.get(name)
        if index is None:
            index = self.create_index(name)
        return index

    def create_index(self, name: str) -> SearchIndex:
        """Create a fresh index, replacing any existing one with this name"""
        if name in self._indexes:
            logger.info(f"Replacing index '{name}'")
        else:
            logger.info(f"Creating index '{name}'")
        index = SearchIndex(cache_size=self.cache_size)
        self._indexes[name] = index
        return index

    def delete_index(self, name: str) -> None:
        """Drop the named index and its state; unknown names are ignored"""
        if self._indexes.pop(name, None) is not None:
            logger.info(f"Deleted index '{name}'")

    def clear_all(self) -> None:
        """Clear every managed index, keeping the instances registered"""
        for index in self._indexes.values():
            index.clear()
        logger.info(f"Cleared {len(self._indexes)} indexes")

    def names(self) -> List[str]:
        return list(self._indexes)

    def __len__(self) -> int:
        return len(self._indexes)

    def __contains__(self, name: object) -> bool:
        return name in self._indexes
