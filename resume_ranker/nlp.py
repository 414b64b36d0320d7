"""
NLP Capabilities

Stemming and part-of-speech tagging used by the analysis engine, behind
small interfaces so alternative implementations can be injected:
- Stemmer: word -> morphological root (NLTK Porter stemmer by default)
- GrammaticalTagger: tokens -> Penn Treebank tags (NLTK perceptron tagger)
"""

import logging
import threading
from functools import lru_cache
from typing import Protocol

import nltk
from nltk.stem import PorterStemmer
from nltk.tag import PerceptronTagger

logger = logging.getLogger(__name__)

# Resource names differ between NLTK releases (3.9 added the "_eng" variant)
TAGGER_RESOURCES = (
    ("averaged_perceptron_tagger_eng", "taggers/averaged_perceptron_tagger_eng"),
    ("averaged_perceptron_tagger", "taggers/averaged_perceptron_tagger"),
)


class Stemmer(Protocol):
    def stem(self, word: str) -> str:
        ...


class GrammaticalTagger(Protocol):
    def tag(self, tokens: list[str]) -> list[tuple[str, str]]:
        ...


@lru_cache(maxsize=1)
def default_stemmer() -> PorterStemmer:
    """Shared Porter stemmer (stateless, safe across threads)."""
    return PorterStemmer()


def _tagger_data_available() -> bool:
    for _, resource in TAGGER_RESOURCES:
        try:
            nltk.data.find(resource)
            return True
        except LookupError:
            continue
    return False


@lru_cache(maxsize=1)
def ensure_nltk_data(download: bool = True) -> bool:
    """
    Make sure the POS tagger model is installed.

    Args:
        download: Try a quiet download when the model is missing

    Returns:
        True if the tagger can be used
    """
    if _tagger_data_available():
        return True
    if not download:
        return False

    for package, _ in TAGGER_RESOURCES:
        logger.info(f"Downloading NLTK resource '{package}'")
        try:
            nltk.download(package, quiet=True, raise_on_error=True)
        except (OSError, ValueError) as e:
            logger.warning(f"NLTK download of '{package}' failed: {e}")
            continue
        if _tagger_data_available():
            return True
    return False


class NltkTagger:
    """
    Part-of-speech tagger backed by NLTK's averaged perceptron tagger.

    The model is loaded once per instance on first use. The tagger never
    downloads anything unless built with download=True; call
    ensure_nltk_data() during setup to install the model. When the model is
    missing, tagging degrades to an empty result and keyword extraction
    falls back on the technical skill vocabulary.
    """

    def __init__(self, download: bool = False):
        self._download = download
        self._available = None
        self._model = None
        self._lock = threading.Lock()

    @property
    def available(self) -> bool:
        if self._available is None:
            self._available = ensure_nltk_data(self._download)
            if not self._available:
                logger.warning(
                    "NLTK POS tagger data unavailable; nouns and adjectives "
                    "will not be extracted. Run: python -m nltk.downloader "
                    "averaged_perceptron_tagger_eng"
                )
        return self._available

    def _get_model(self) -> PerceptronTagger:
        with self._lock:
            if self._model is None:
                self._model = PerceptronTagger()
            return self._model

    def tag(self, tokens: list[str]) -> list[tuple[str, str]]:
        if not tokens or not self.available:
            return []
        try:
            return self._get_model().tag(tokens)
        except LookupError as e:
            # Installed model does not match the one this NLTK release loads
            logger.warning(f"NLTK POS tagging unavailable: {e}")
            self._available = False
            return []
