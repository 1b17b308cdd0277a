"""
Cache module for searchindex
Provides the bounded LRU result cache used by each index
"""

from .manager import ResultCache
from .config import CacheConfig

__all__ = [
    'ResultCache',
    'CacheConfig'
]
