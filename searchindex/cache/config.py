"""
Cache configuration settings
"""
import os


class CacheConfig:
    """Configuration class for result cache settings"""

    # Maximum number of cached search responses per index
    SEARCH_CACHE_SIZE = int(os.getenv("SEARCH_CACHE_SIZE", "100"))

    # Key prefixes
    SEARCH_PREFIX = "search:"

    @classmethod
    def get_capacity(cls, capacity=None) -> int:
        """Resolve cache capacity, falling back to the configured default"""
        if capacity is None:
            return cls.SEARCH_CACHE_SIZE
        return max(int(capacity), 0)
