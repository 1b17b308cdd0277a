"""
Highlighting of matched query terms within displayable document fields
"""

import re
from typing import List, Optional, Sequence

from ..config import SearchConfig
from .models import Document, Highlight

_NON_WORD = re.compile(r'[^\w]')


class Highlighter:
    """Wraps words containing a query term in a marker pair"""

    def __init__(self, pre_tag: Optional[str] = None, post_tag: Optional[str] = None):
        self.pre_tag = pre_tag if pre_tag is not None else SearchConfig.HIGHLIGHT_PRE_TAG
        self.post_tag = post_tag if post_tag is not None else SearchConfig.HIGHLIGHT_POST_TAG

    def highlight(
        self,
        document: Document,
        query_terms: Sequence[str],
        fields: Sequence[str]
    ) -> List[Highlight]:
        """
        Generate highlighted text for search results

        Args:
            document: Stored document
            query_terms: Normalized query terms
            fields: Fields to consider, only string values are highlighted

        Returns:
            One Highlight per field with at least one marked word
        """
        highlights = []
        if not query_terms:
            return highlights

        for field in fields:
            text = document.get(field)
            if not text or not isinstance(text, str):
                continue

            marked = False
            words = []
            for word in text.split():
                normalized = _NON_WORD.sub('', word.lower())
                if normalized and any(term in normalized for term in query_terms):
                    words.append(f"{self.pre_tag}{word}{self.post_tag}")
                    marked = True
                else:
                    words.append(word)

            if marked:
                highlights.append(Highlight(field=field, text=" ".join(words)))

        return highlights
