import re
from typing import Optional

from nltk.tokenize import RegexpTokenizer

from .config import AnalyzerConfig
from .nlp import Stemmer, default_stemmer
from .scoring import Document

# Document-format artifacts left behind by naive text extraction
_FORMAT_COMMAND = re.compile(r"/[A-Za-z]+\s*\d*\s*[A-Za-z]*\s*")
_OBJECT_REFERENCE = re.compile(r"\d+\s+\d+\s+obj")
_FORMAT_KEYWORD = re.compile(r"\b(?:endobj|stream|endstream)\b")
_DISALLOWED_CHARS = re.compile(r"[^\w\s\-.]")

_WORD_TOKENIZER = RegexpTokenizer(r"\w+")
_ALPHA = re.compile(r"^[a-zA-Z]+$")


def clean_text(t: Optional[str]) -> str:
    """Strip document-format noise and punctuation (except - and .), normalize whitespace."""
    if not t or not isinstance(t, str):
        return ""
    t = t.replace("\x00", " ")
    t = _FORMAT_COMMAND.sub(" ", t)
    t = _OBJECT_REFERENCE.sub(" ", t)
    t = _FORMAT_KEYWORD.sub(" ", t)
    t = _DISALLOWED_CHARS.sub(" ", t)
    t = re.sub(r"\s+", " ", t).strip()
    return t


class TextNormalizer:
    """Cleans extracted text, checks it is real prose, and turns it into stemmed tokens."""

    def __init__(self, config: Optional[AnalyzerConfig] = None, stemmer: Optional[Stemmer] = None):
        self.config = config or AnalyzerConfig()
        self.stemmer = stemmer or default_stemmer()

    def clean(self, raw_text: Optional[str]) -> str:
        return clean_text(raw_text)

    def is_valid(self, text: str) -> bool:
        """True if the cleaned text looks like resume/job content rather than binary noise."""
        if not text or len(text) < self.config.min_text_length:
            return False
        lowered = text.lower()
        return any(word in lowered for word in self.config.content_indicators)

    def tokenize(self, text: str) -> list[str]:
        tokens = _WORD_TOKENIZER.tokenize(text.lower())
        return [
            self.stemmer.stem(tok)
            for tok in tokens
            if len(tok) > 2 and _ALPHA.match(tok) and tok not in self.config.stopwords
        ]

    def stem(self, word: str) -> str:
        return self.stemmer.stem(word)

    def document(self, raw_text: Optional[str]) -> Document:
        """
        Build a corpus Document.

        Invalid (noise) text keeps its cleaned form but contributes no tokens.
        """
        cleaned = self.clean(raw_text)
        tokens = tuple(self.tokenize(cleaned)) if self.is_valid(cleaned) else ()
        return Document(raw_text=raw_text or "", clean_text=cleaned, tokens=tokens)
