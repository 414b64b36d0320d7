import pytest

from resume_ranker import AnalyzerConfig, ResumeAnalyzer
from resume_ranker.clean import TextNormalizer
from resume_ranker.keywords import KeywordExtractor


class StubTagger:
    """Deterministic POS tagger: looks tokens up in fixed noun / adjective sets."""

    def __init__(self, nouns=(), adjectives=()):
        self.nouns = {n.lower() for n in nouns}
        self.adjectives = {a.lower() for a in adjectives}

    def tag(self, tokens):
        tagged = []
        for tok in tokens:
            low = tok.lower()
            if low in self.nouns:
                tagged.append((tok, "NN"))
            elif low in self.adjectives:
                tagged.append((tok, "JJ"))
            else:
                tagged.append((tok, "DT"))
        return tagged


class AllNounsTagger:
    def tag(self, tokens):
        return [(tok, "NN") for tok in tokens]


class EmptyTagger:
    def tag(self, tokens):
        return []


JOB_NOUNS = (
    "python", "developer", "docker", "aws", "experience", "engineer",
    "containers", "kitchen", "bread", "chef", "cakes", "restaurant",
)
JOB_ADJECTIVES = ("senior", "scalable", "busy")


@pytest.fixture
def config() -> AnalyzerConfig:
    return AnalyzerConfig()


@pytest.fixture
def tagger() -> StubTagger:
    return StubTagger(nouns=JOB_NOUNS, adjectives=JOB_ADJECTIVES)


@pytest.fixture
def normalizer(config) -> TextNormalizer:
    return TextNormalizer(config)


@pytest.fixture
def extractor(config, tagger) -> KeywordExtractor:
    return KeywordExtractor(config, tagger)


@pytest.fixture
def analyzer(config, tagger) -> ResumeAnalyzer:
    return ResumeAnalyzer(config, tagger=tagger)
