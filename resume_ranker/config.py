"""
Analyzer Configuration

Tunable limits and vocabularies for the analysis engine. Defaults reproduce
the standard ranking behavior; a JSON file can override any field.

Example file:
    {
        "job_top_n": 25,
        "max_workers": 4,
        "technical_skills": ["python", "rust", "terraform"]
    }
"""

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Union

from .exceptions import ConfigError
from .vocabulary import (
    CONTENT_INDICATORS,
    FALLBACK_KEYWORDS,
    STOPWORDS,
    TECHNICAL_SKILLS,
)

# Configuration constants
JOB_TOP_N = 20               # Keywords extracted from the job description
RESUME_TOP_N = 20            # Keywords extracted from each resume
KEYWORD_OUTPUT_LIMIT = 10    # Matching / missing keywords kept per resume
RESUME_KEYWORD_LIMIT = 15    # Resume keywords kept for display
FEEDBACK_TERM_LIMIT = 5      # Terms listed in each feedback sentence
NAIVE_KEYWORD_LIMIT = 10     # Words taken by the last-resort job keyword fallback
MIN_TEXT_LENGTH = 10         # Shorter cleaned text is never "real" content

# Vocabulary fields: name -> container type
_VOCABULARY_FIELDS = {
    "stopwords": frozenset,
    "technical_skills": tuple,
    "content_indicators": tuple,
    "fallback_keywords": tuple,
}


@dataclass(frozen=True)
class AnalyzerConfig:
    """Immutable settings shared by every component of one analyzer."""
    job_top_n: int = JOB_TOP_N
    resume_top_n: int = RESUME_TOP_N
    keyword_output_limit: int = KEYWORD_OUTPUT_LIMIT
    resume_keyword_limit: int = RESUME_KEYWORD_LIMIT
    feedback_term_limit: int = FEEDBACK_TERM_LIMIT
    naive_keyword_limit: int = NAIVE_KEYWORD_LIMIT
    min_text_length: int = MIN_TEXT_LENGTH
    max_workers: int = 1
    stopwords: frozenset = STOPWORDS
    technical_skills: tuple = TECHNICAL_SKILLS
    content_indicators: tuple = CONTENT_INDICATORS
    fallback_keywords: tuple = FALLBACK_KEYWORDS

    @property
    def technical_skill_set(self) -> frozenset:
        return frozenset(self.technical_skills)

    @property
    def skill_phrases(self) -> tuple:
        """Multi-word technical skills (e.g. "machine learning")."""
        return tuple(s for s in self.technical_skills if " " in s)

    def with_overrides(self, **overrides) -> "AnalyzerConfig":
        """Return a copy with the given fields replaced and validated."""
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

        values = {}
        for name, value in overrides.items():
            if name in _VOCABULARY_FIELDS:
                if isinstance(value, str) or not isinstance(value, (list, tuple, set, frozenset)):
                    raise ConfigError(f"Config key '{name}' must be a list of strings")
                container = _VOCABULARY_FIELDS[name]
                values[name] = container(str(v).lower().strip() for v in value)
            else:
                if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                    raise ConfigError(f"Config key '{name}' must be a non-negative integer")
                values[name] = value

        return replace(self, **values)


def load_config(path: Union[str, Path]) -> AnalyzerConfig:
    """
    Load an AnalyzerConfig from a JSON file.

    Args:
        path: Path to a JSON object whose keys are AnalyzerConfig fields

    Returns:
        AnalyzerConfig with the file's values over the defaults
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    return AnalyzerConfig().with_overrides(**data)
