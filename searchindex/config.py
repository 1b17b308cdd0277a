"""
Search engine configuration settings
"""
import os
from typing import FrozenSet, Tuple


def _split_env(name: str, default: str) -> Tuple[str, ...]:
    """Read a comma separated environment variable as a tuple"""
    raw = os.getenv(name, default)
    return tuple(part.strip() for part in raw.split(",") if part.strip())


class SearchConfig:
    """Configuration class for indexing, scoring and highlighting"""

    # Fields indexed when a caller does not name any
    DEFAULT_FIELDS = _split_env("SEARCH_DEFAULT_FIELDS", "name,description,tags")

    # Tokenization
    MIN_TOKEN_LENGTH = int(os.getenv("SEARCH_MIN_TOKEN_LENGTH", "3"))
    STOP_WORDS: FrozenSet[str] = frozenset({
        'the', 'a', 'an', 'and', 'or', 'but', 'in', 'on', 'at', 'to', 'for'
    })

    # Query defaults
    DEFAULT_MAX_DISTANCE = int(os.getenv("SEARCH_MAX_DISTANCE", "2"))
    DEFAULT_LIMIT = int(os.getenv("SEARCH_DEFAULT_LIMIT", "10"))
    DEFAULT_SUGGESTION_LIMIT = int(os.getenv("SEARCH_SUGGESTION_LIMIT", "5"))

    # Scoring weights
    TOKEN_WEIGHT = 0.4
    TFIDF_WEIGHT = 0.4
    BOOST_WEIGHT = 0.2

    # Highlight markers
    HIGHLIGHT_PRE_TAG = os.getenv("SEARCH_HIGHLIGHT_PRE_TAG", "<mark>")
    HIGHLIGHT_POST_TAG = os.getenv("SEARCH_HIGHLIGHT_POST_TAG", "</mark>")

    @classmethod
    def get_scoring_weights(cls) -> dict:
        """Get the weights used to combine relevance components"""
        return {
            "token_score": cls.TOKEN_WEIGHT,
            "tfidf": cls.TFIDF_WEIGHT,
            "boost": cls.BOOST_WEIGHT,
        }
