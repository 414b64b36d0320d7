"""
Keyword Matching

Decides whether a job keyword is present in resume text. Matching is
lenient: it accepts substring containment and stem
equivalence so that "machine learning" matches "machine-learning" and
"react" matches "ReactJS".
"""

import re
from functools import lru_cache
from typing import Optional

from .nlp import Stemmer, default_stemmer

_PUNCT = re.compile(r"[^\w\s]")
_SPACES = re.compile(r"\s+")


def normalize_keyword(text: Optional[str]) -> str:
    """Lowercase, turn punctuation into spaces, collapse whitespace."""
    t = (text or "").lower()
    t = _PUNCT.sub(" ", t)
    return _SPACES.sub(" ", t).strip()


class KeywordMatcher:
    """Fuzzy keyword presence test (exact, substring, and stem rules)."""

    def __init__(self, stemmer: Optional[Stemmer] = None):
        self.stemmer = stemmer or default_stemmer()
        self._stem = lru_cache(maxsize=4096)(self.stemmer.stem)

    def exists(self, keyword: str, text: str) -> bool:
        norm_keyword = normalize_keyword(keyword)
        norm_text = normalize_keyword(text)
        if not norm_keyword or not norm_text:
            return False

        # Direct match
        if norm_keyword in norm_text:
            return True

        parts = norm_keyword.split(" ")
        words = norm_text.split(" ")

        # Multi-word keywords: every part must show up somewhere
        if len(parts) > 1:
            return all(
                any(self._word_matches(part, word) for word in words)
                for part in parts
            )

        stemmed_keyword = self._stem(norm_keyword)
        for word in words:
            if word in norm_keyword or norm_keyword in word:
                return True
            stemmed_word = self._stem(word)
            if (
                stemmed_keyword == stemmed_word
                or stemmed_word in stemmed_keyword
                or stemmed_keyword in stemmed_word
            ):
                return True
        return False

    def _word_matches(self, part: str, word: str) -> bool:
        return part in word or word in part or self._stem(part) == self._stem(word)
