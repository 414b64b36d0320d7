"""Rank resumes against a job description with TF-IDF similarity and keyword coverage."""

from .analyzer import AnalysisResult, AnalysisSummary, ResumeAnalyzer, ResumeInput, analyze_resumes
from .config import AnalyzerConfig, load_config
from .exceptions import AnalysisError, ConfigError, DuplicateResultError, ResultNotFoundError, ResumeRankerError
from .keywords import Keyword, KeywordExtractor
from .matching import KeywordMatcher
from .ranking import PerResumeResult, ResumeScorer
from .storage import HistoryEntry, InMemoryResultStore, StoredAnalysis

__all__ = [
    "AnalysisError",
    "AnalysisResult",
    "AnalysisSummary",
    "AnalyzerConfig",
    "ConfigError",
    "DuplicateResultError",
    "HistoryEntry",
    "InMemoryResultStore",
    "Keyword",
    "KeywordExtractor",
    "KeywordMatcher",
    "PerResumeResult",
    "ResultNotFoundError",
    "ResumeAnalyzer",
    "ResumeInput",
    "ResumeRankerError",
    "ResumeScorer",
    "StoredAnalysis",
    "analyze_resumes",
    "load_config",
]
