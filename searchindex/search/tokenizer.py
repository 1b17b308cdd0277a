"""
Text normalization and tokenization for indexing and querying
"""

import re
from typing import Iterable, List, Optional, Sequence

from ..config import SearchConfig
from .models import Document

_NON_WORD = re.compile(r'[^\w\s]')


class Tokenizer:
    """Splits raw text into normalized index terms"""

    def __init__(
        self,
        stop_words: Optional[Iterable[str]] = None,
        min_length: Optional[int] = None
    ):
        self.stop_words = frozenset(
            stop_words if stop_words is not None else SearchConfig.STOP_WORDS
        )
        self.min_length = min_length if min_length is not None else SearchConfig.MIN_TOKEN_LENGTH

    def clean_text(self, text: Optional[str]) -> str:
        """Lowercase text and replace punctuation with spaces"""
        if not text:
            return ""
        return _NON_WORD.sub(' ', text.lower())

    def tokenize(self, text: Optional[str]) -> List[str]:
        """
        Tokenize text into index terms

        Args:
            text: Raw text, may be empty or None

        Returns:
            Terms in their original order, duplicates kept
        """
        return [
            token for token in self.clean_text(text).split()
            if len(token) >= self.min_length and token not in self.stop_words
        ]

    def extract_terms(self, document: Document, fields: Sequence[str]) -> List[str]:
        """Tokenize the combined text of the named document fields"""
        parts = []
        for field in fields:
            value = document.get(field)
            if isinstance(value, (list, tuple)):
                parts.append(" ".join(str(item) for item in value if item is not None))
            elif isinstance(value, str):
                parts.append(value)
        return self.tokenize(" ".join(parts))


def levenshtein_distance(source: str, target: str) -> int:
    """Minimum number of single-character edits turning source into target"""
    if source == target:
        return 0
    if not source:
        return len(target)
    if not target:
        return len(source)

    previous = list(range(len(target) + 1))
    for i, source_char in enumerate(source, start=1):
        current = [i]
        for j, target_char in enumerate(target, start=1):
            if source_char == target_char:
                current.append(previous[j - 1])
            else:
                current.append(min(previous[j - 1], previous[j], current[j - 1]) + 1)
        previous = current
    return previous[-1]
