"""
Resume Analyzer

Ranks a batch of resumes against one job description:
1. Extract job keywords (with a naive long-word fallback)
2. Build a TF-IDF corpus: job description + resumes
3. Score every resume (similarity + keyword coverage + feedback)
4. Rank and summarize

Each call builds and discards its own corpus; analyzers hold no
per-request state and can be shared across threads.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, Union

from .clean import TextNormalizer
from .config import AnalyzerConfig
from .exceptions import AnalysisError
from .keywords import Keyword, KeywordExtractor
from .matching import KeywordMatcher
from .nlp import GrammaticalTagger, Stemmer
from .ranking import PerResumeResult, ResumeScorer, rank_results, round_half_up
from .scoring import Corpus, VectorSimilarityScorer

logger = logging.getLogger(__name__)

NO_KEYWORDS_MESSAGE = (
    "No meaningful keywords found in job description. Please check the file content."
)


@dataclass(frozen=True)
class ResumeInput:
    """Already-extracted resume text."""
    filename: str
    content: str

    @classmethod
    def coerce(cls, value: Union["ResumeInput", Mapping]) -> "ResumeInput":
        if isinstance(value, cls):
            return value
        return cls(filename=value["filename"], content=value.get("content") or "")


@dataclass(frozen=True)
class AnalysisSummary:
    total_resumes: int
    average_score: int
    top_score: int
    top_candidate: str

    def to_dict(self) -> dict:
        return {
            "totalResumes": self.total_resumes,
            "averageScore": self.average_score,
            "topScore": self.top_score,
            "topCandidate": self.top_candidate,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Ranked outcome of one analysis request. Never mutated once built."""
    job_keywords: tuple[Keyword, ...]
    ranked_resumes: tuple[PerResumeResult, ...]
    summary: AnalysisSummary

    @property
    def top_resume(self) -> Optional[PerResumeResult]:
        return self.ranked_resumes[0] if self.ranked_resumes else None

    def to_dict(self) -> dict:
        return {
            "jobKeywords": [k.to_dict() for k in self.job_keywords],
            "rankedResumes": [r.to_dict() for r in self.ranked_resumes],
            "summary": self.summary.to_dict(),
        }


def summarize(ranked: Sequence[PerResumeResult], total_resumes: int) -> AnalysisSummary:
    """Summary statistics; an empty ranking averages to 0."""
    if not ranked:
        return AnalysisSummary(total_resumes=total_resumes, average_score=0, top_score=0, top_candidate="None")

    average = sum(r.score for r in ranked) / len(ranked)
    return AnalysisSummary(
        total_resumes=total_resumes,
        average_score=round_half_up(average),
        top_score=ranked[0].score,
        top_candidate=ranked[0].filename,
    )


class ResumeAnalyzer:
    """Analysis engine: wires the normalizer, extractor, matcher and scorers together."""

    def __init__(
        self,
        config: Optional[AnalyzerConfig] = None,
        tagger: Optional[GrammaticalTagger] = None,
        stemmer: Optional[Stemmer] = None,
    ):
        self.config = config or AnalyzerConfig()
        self.normalizer = TextNormalizer(self.config, stemmer)
        self.extractor = KeywordExtractor(self.config, tagger, self.normalizer)
        self.matcher = KeywordMatcher(self.normalizer.stemmer)

    def job_keywords(self, job_description: str) -> list[Keyword]:
        """
        Keywords of the job description.

        Raises:
            AnalysisError: if neither extraction nor the naive fallback finds any
        """
        cleaned = self.normalizer.clean(job_description)
        if not self.normalizer.is_valid(cleaned):
            logger.warning("Job description is very short or unreadable, proceeding with basic analysis")

        keywords = self.extractor.extract(cleaned, self.config.job_top_n)
        if keywords:
            return keywords

        logger.warning("No keywords extracted from job description; using long-word fallback")
        keywords = self._naive_keywords(cleaned)
        if not keywords:
            raise AnalysisError(NO_KEYWORDS_MESSAGE)
        return keywords

    def _naive_keywords(self, cleaned: str) -> list[Keyword]:
        words = [
            w for w in cleaned.lower().split()
            if len(w) > 3 and w not in self.config.stopwords
        ]
        unique = list(dict.fromkeys(words))[:self.config.naive_keyword_limit]
        return [Keyword(w, 1) for w in unique]

    def analyze(
        self,
        job_description: str,
        resumes: Sequence[Union[ResumeInput, Mapping]],
    ) -> AnalysisResult:
        """
        Score and rank resumes against a job description.

        Args:
            job_description: Extracted job description text
            resumes: Resumes in submission order (ResumeInput or {filename, content})

        Returns:
            AnalysisResult with one ranked entry per submitted resume

        Raises:
            AnalysisError: if the job description yields no keywords, or the
                analysis fails unexpectedly
        """
        try:
            return self._analyze(job_description, [ResumeInput.coerce(r) for r in resumes])
        except AnalysisError:
            raise
        except Exception as e:
            logger.exception("Analysis error")
            raise AnalysisError(f"Failed to analyze resumes: {e}") from e

    def _analyze(self, job_description: str, resumes: list[ResumeInput]) -> AnalysisResult:
        logger.info(f"Analyzing {len(resumes)} resume(s)")

        job_keywords = self.job_keywords(job_description)

        job_doc = self.normalizer.document(job_description)
        resume_docs = [self.normalizer.document(r.content) for r in resumes]
        corpus = Corpus.build(job_doc, resume_docs)

        scorer = ResumeScorer(job_keywords, VectorSimilarityScorer(corpus), self.matcher, self.config)

        def score_one(position: int) -> PerResumeResult:
            doc = resume_docs[position]
            resume_keywords = self.extractor.extract(doc.clean_text, self.config.resume_top_n)
            return scorer.score(position + 1, resumes[position].filename, doc, resume_keywords)

        positions = range(len(resumes))
        if self.config.max_workers > 1 and len(resumes) > 1:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                results = list(executor.map(score_one, positions))
        else:
            results = [score_one(p) for p in positions]

        ranked = rank_results(results)
        summary = summarize(ranked, len(resumes))

        logger.info(
            f"Analysis complete: top candidate {summary.top_candidate} "
            f"({summary.top_score}), average {summary.average_score}"
        )

        return AnalysisResult(
            job_keywords=tuple(job_keywords),
            ranked_resumes=tuple(ranked),
            summary=summary,
        )


def analyze_resumes(
    job_description: str,
    resumes: Sequence[Union[ResumeInput, Mapping]],
    config: Optional[AnalyzerConfig] = None,
) -> AnalysisResult:
    """Convenience wrapper: analyze with a default-configured ResumeAnalyzer."""
    return ResumeAnalyzer(config).analyze(job_description, resumes)
