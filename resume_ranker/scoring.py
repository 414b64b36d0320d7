"""
Scoring Module

TF-IDF vector-space similarity between the job description and each resume.
The job description is always document 0 of the corpus.
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np
from sklearn.feature_extraction.text import TfidfVectorizer


@dataclass(frozen=True)
class Document:
    """One text of the corpus: raw, cleaned and stemmed tokens."""
    raw_text: str
    clean_text: str
    tokens: tuple[str, ...]

    @property
    def terms(self) -> list[str]:
        """Distinct tokens in first-seen order."""
        return list(dict.fromkeys(self.tokens))


@dataclass(frozen=True)
class Corpus:
    """Job description (index 0) followed by resumes in submission order."""
    documents: tuple[Document, ...]

    @classmethod
    def build(cls, job: Document, resumes: Sequence[Document]) -> "Corpus":
        return cls(documents=(job, *resumes))

    @property
    def job(self) -> Document:
        return self.documents[0]

    @property
    def resume_count(self) -> int:
        return len(self.documents) - 1

    def __len__(self) -> int:
        return len(self.documents)

    def __getitem__(self, index: int) -> Document:
        return self.documents[index]


def cosine_similarity(vec1, vec2) -> float:
    """
    Compute cosine similarity between two vectors.

    Args:
        vec1: First vector
        vec2: Second vector (same length)

    Returns:
        Similarity score, 0.0 when either vector has zero magnitude
    """
    vec1 = np.asarray(vec1, dtype=float)
    vec2 = np.asarray(vec2, dtype=float)
    dot_product = np.dot(vec1, vec2)
    norm1 = np.linalg.norm(vec1)
    norm2 = np.linalg.norm(vec2)

    if norm1 == 0 or norm2 == 0:
        return 0.0

    return float(dot_product / (norm1 * norm2))


def _identity(tokens):
    return tokens


class VectorSimilarityScorer:
    """
    TF-IDF weights fitted once over a whole corpus.

    Documents arrive pre-tokenized and stemmed, so the vectorizer uses an
    identity analyzer. IDF counts every document, including the job
    description; a term absent from a document weighs 0.
    """

    def __init__(self, corpus: Corpus):
        self.corpus = corpus
        self._vocabulary: dict[str, int] = {}
        self._matrix = None

        if any(doc.tokens for doc in corpus.documents):
            vect = TfidfVectorizer(analyzer=_identity)
            self._matrix = vect.fit_transform([list(doc.tokens) for doc in corpus.documents])
            self._vocabulary = vect.vocabulary_

    def vectors(self, index: int) -> tuple[np.ndarray, np.ndarray]:
        """
        Term-aligned weight vectors for the job description and one resume.

        The vectors span the distinct terms of document 0 and document
        `index`, in that order.
        """
        if index < 1 or index >= len(self.corpus):
            raise IndexError(f"Resume index {index} out of range 1..{self.corpus.resume_count}")

        terms = list(dict.fromkeys(self.corpus.job.terms + self.corpus[index].terms))
        if self._matrix is None or not terms:
            return np.zeros(len(terms)), np.zeros(len(terms))

        cols = [self._vocabulary[t] for t in terms]
        job_vec = self._matrix[0, cols].toarray().ravel()
        resume_vec = self._matrix[index, cols].toarray().ravel()
        return job_vec, resume_vec

    def similarity(self, index: int) -> float:
        """Cosine similarity (0..1) between the job description and resume `index`."""
        job_vec, resume_vec = self.vectors(index)
        score = cosine_similarity(job_vec, resume_vec)
        return max(0.0, min(1.0, score))
