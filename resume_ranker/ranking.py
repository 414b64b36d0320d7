"""
Resume Scoring & Ranking

Combines two signals into one score per resume:
  TF-IDF cosine similarity with the job description (0-1)
  Keyword coverage: share of job keywords found in the resume (0-100%)

Final Score = round(max(similarity * 100, coverage %))

Resumes are ranked by score, highest first; ties keep submission order.
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence

from .config import AnalyzerConfig
from .keywords import Keyword
from .matching import KeywordMatcher
from .scoring import Document, VectorSimilarityScorer

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


class MatchLevel(Enum):
    """Qualitative similarity bands."""
    EXCELLENT = "Excellent"
    GOOD = "Good"
    MODERATE = "Moderate"
    LIMITED = "Limited"

    @classmethod
    def from_similarity(cls, similarity: float) -> "MatchLevel":
        if similarity > 0.7:
            return cls.EXCELLENT
        elif similarity > 0.5:
            return cls.GOOD
        elif similarity > 0.3:
            return cls.MODERATE
        else:
            return cls.LIMITED


LEVEL_FEEDBACK = {
    MatchLevel.EXCELLENT: "Excellent match! This candidate's resume aligns very well with the job requirements.",
    MatchLevel.GOOD: "Good match. This candidate shows strong alignment with several key requirements.",
    MatchLevel.MODERATE: "Moderate match. Some relevant skills present, but significant gaps remain.",
    MatchLevel.LIMITED: "Limited match. This candidate may need significant upskilling or may not be suitable for this role.",
}


@dataclass(frozen=True)
class PerResumeResult:
    """Score, keyword breakdown and feedback for one resume."""
    filename: str
    score: int
    match_percentage: int
    matching_keywords: tuple[Keyword, ...]
    missing_keywords: tuple[Keyword, ...]
    resume_keywords: tuple[Keyword, ...]
    feedback: tuple[str, ...]
    similarity: float = field(default=0.0, compare=False)

    @property
    def match_level(self) -> MatchLevel:
        return MatchLevel.from_similarity(self.similarity)

    def to_dict(self) -> dict:
        return {
            "filename": self.filename,
            "score": self.score,
            "matchPercentage": self.match_percentage,
            "matchingKeywords": [k.to_dict() for k in self.matching_keywords],
            "missingKeywords": [k.to_dict() for k in self.missing_keywords],
            "resumeKeywords": [k.to_dict() for k in self.resume_keywords],
            "feedback": list(self.feedback),
        }


def generate_feedback(
    matching: Sequence[Keyword],
    missing: Sequence[Keyword],
    similarity: float,
    term_limit: int = 5,
) -> list[str]:
    """Band sentence, then strong areas and areas for improvement."""
    feedback = [LEVEL_FEEDBACK[MatchLevel.from_similarity(similarity)]]

    if matching:
        feedback.append(f"Strong areas: {', '.join(k.term for k in matching[:term_limit])}")

    if missing:
        feedback.append(f"Areas for improvement: {', '.join(k.term for k in missing[:term_limit])}")

    return feedback


class ResumeScorer:
    """Scores the resumes of one corpus against a fixed job keyword list."""

    def __init__(
        self,
        job_keywords: Sequence[Keyword],
        similarity_scorer: VectorSimilarityScorer,
        matcher: Optional[KeywordMatcher] = None,
        config: Optional[AnalyzerConfig] = None,
    ):
        self.job_keywords = tuple(job_keywords)
        self.similarity_scorer = similarity_scorer
        self.matcher = matcher or KeywordMatcher()
        self.config = config or AnalyzerConfig()

    def partition(self, text: str) -> tuple[list[Keyword], list[Keyword]]:
        """Split the job keywords into (found, not found) for a resume text, keeping order."""
        matching, missing = [], []
        for keyword in self.job_keywords:
            if self.matcher.exists(keyword.term, text):
                matching.append(keyword)
            else:
                missing.append(keyword)
        return matching, missing

    def score(
        self,
        index: int,
        filename: str,
        document: Document,
        resume_keywords: Sequence[Keyword] = (),
    ) -> PerResumeResult:
        """
        Score the resume at corpus position `index`.

        Args:
            index: Corpus index (1-based; 0 is the job description)
            filename: Name reported in the result
            document: The resume's corpus document
            resume_keywords: Keywords extracted from the resume, for display

        Returns:
            PerResumeResult with capped keyword lists
        """
        limit = self.config.keyword_output_limit
        similarity = self.similarity_scorer.similarity(index)
        matching, missing = self.partition(document.clean_text)

        coverage = 100 * len(matching) / len(self.job_keywords) if self.job_keywords else 0.0
        score = round_half_up(max(similarity * 100, coverage))

        missing = missing[:limit]
        feedback = generate_feedback(matching, missing, similarity, self.config.feedback_term_limit)

        logger.debug(
            f"{filename}: similarity={similarity:.3f}, coverage={coverage:.1f}%, score={score}"
        )

        return PerResumeResult(
            filename=filename,
            score=score,
            match_percentage=round_half_up(coverage),
            matching_keywords=tuple(matching[:limit]),
            missing_keywords=tuple(missing),
            resume_keywords=tuple(resume_keywords[:self.config.resume_keyword_limit]),
            feedback=tuple(feedback),
            similarity=similarity,
        )


def rank_results(results: Sequence[PerResumeResult]) -> list[PerResumeResult]:
    """Sort by score, highest first (stable: equal scores keep submission order)."""
    return sorted(results, key=lambda r: r.score, reverse=True)
