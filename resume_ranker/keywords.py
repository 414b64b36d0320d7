"""
Keyword Extraction Engine

Derives a ranked keyword list from resume or job description text:
- Multi-word skill phrases from the technical skill vocabulary
- Nouns and adjectives from a part-of-speech tagger
- Technical skill terms (frequency doubled)
- Vocabulary-only fallback for corrupted / unreadable text
"""

import logging
import re
from collections import Counter
from dataclasses import dataclass
from typing import Optional

from nltk.tokenize import RegexpTokenizer

from .clean import TextNormalizer
from .config import AnalyzerConfig
from .nlp import GrammaticalTagger, NltkTagger

logger = logging.getLogger(__name__)

# Words with inner hyphens/dots ("scikit-learn", "node.js") stay whole for tagging
_TAG_TOKENIZER = RegexpTokenizer(r"\w+(?:[-.]\w+)*")
_NUMERIC = re.compile(r"^\d+$")
_HAS_LETTER = re.compile(r"[a-zA-Z]")
_EDGE_PUNCT = ".-"


@dataclass(frozen=True)
class Keyword:
    """A candidate keyword with its (possibly boosted) frequency."""
    term: str
    frequency: int

    def to_dict(self) -> dict:
        return {"keyword": self.term, "frequency": self.frequency}


class KeywordExtractor:
    """
    Extract ranked keywords from text.

    The tagger supplies nouns and adjectives; if it cannot tag (missing
    model) extraction still works from the skill vocabulary alone.
    """

    def __init__(
        self,
        config: Optional[AnalyzerConfig] = None,
        tagger: Optional[GrammaticalTagger] = None,
        normalizer: Optional[TextNormalizer] = None,
    ):
        self.config = config or AnalyzerConfig()
        self.tagger = tagger if tagger is not None else NltkTagger()
        self.normalizer = normalizer or TextNormalizer(self.config)
        self._skills = self.config.technical_skill_set
        self._phrase_patterns = [
            (phrase, re.compile(r"\b" + re.escape(phrase) + r"\b"))
            for phrase in self.config.skill_phrases
        ]

    def extract(self, text: str, top_n: int = 20) -> list[Keyword]:
        """
        Extract up to `top_n` keywords, most frequent first.

        Ties keep the order in which terms were first seen.
        """
        cleaned = self.normalizer.clean(text)
        if not self.normalizer.is_valid(cleaned):
            logger.warning("Text appears to be corrupted or non-textual. Using fallback extraction.")
            return self.extract_fallback(text, top_n)

        counts = Counter(t for t in self._candidates(cleaned) if self._keep(t))
        for term in counts:
            if term in self._skills:
                counts[term] *= 2

        ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
        return [Keyword(term, freq) for term, freq in ranked[:top_n]]

    def extract_fallback(self, text: Optional[str], top_n: int = 20) -> list[Keyword]:
        """Vocabulary substring scan of the raw text; generic placeholders if nothing is found."""
        lowered = (text or "").lower()
        found = [Keyword(skill, 1) for skill in self.config.technical_skills if skill in lowered]
        if not found:
            found = [Keyword(term, 1) for term in self.config.fallback_keywords]
        return found[:top_n]

    def _candidates(self, cleaned: str) -> list[str]:
        lowered = cleaned.lower()
        candidates = []

        # Skill phrases
        for phrase, pattern in self._phrase_patterns:
            candidates.extend(phrase for _ in pattern.finditer(lowered))

        # Nouns and adjectives
        tagged = self.tagger.tag(_TAG_TOKENIZER.tokenize(cleaned))
        candidates.extend(w for w, tag in tagged if tag.startswith("NN") and len(w) > 2)
        candidates.extend(w for w, tag in tagged if tag.startswith("JJ") and len(w) > 3)

        # Technical skills as whole words
        for word in lowered.split():
            word = word.strip(_EDGE_PUNCT)
            if word in self._skills:
                candidates.append(word)

        return [c.lower().strip() for c in candidates]

    def _keep(self, term: str) -> bool:
        return (
            len(term) > 2
            and term not in self.config.stopwords
            and not _NUMERIC.match(term)
            and bool(_HAS_LETTER.search(term))
        )
