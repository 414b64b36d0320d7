"""
Unit tests for cosine similarity and the TF-IDF corpus scorer.
"""

import numpy as np
import pytest

from resume_ranker.scoring import Corpus, Document, VectorSimilarityScorer, cosine_similarity


def doc(*tokens: str) -> Document:
    return Document(raw_text=" ".join(tokens), clean_text=" ".join(tokens), tokens=tuple(tokens))


class TestCosineSimilarity:

    @pytest.mark.parametrize("vec", [[1.0, 2.0, 3.0], [0.5], [0.0, 4.0, 0.1]])
    def test_self_similarity_is_one(self, vec):
        assert cosine_similarity(vec, vec) == pytest.approx(1.0)

    def test_zero_vector(self):
        assert cosine_similarity([0.0, 0.0], [1.0, 2.0]) == 0.0
        assert cosine_similarity([1.0, 2.0], [0.0, 0.0]) == 0.0
        assert cosine_similarity([], []) == 0.0

    def test_orthogonal(self):
        assert cosine_similarity([1.0, 0.0], [0.0, 3.0]) == 0.0

    def test_magnitude_independent(self):
        assert cosine_similarity([1.0, 2.0], [2.0, 4.0]) == pytest.approx(1.0)

    def test_returns_python_float(self):
        assert isinstance(cosine_similarity(np.array([1.0]), np.array([1.0])), float)


class TestCorpus:

    def test_job_is_first(self):
        job = doc("python")
        corpus = Corpus.build(job, [doc("java"), doc("rust")])
        assert corpus.job is job
        assert len(corpus) == 3
        assert corpus.resume_count == 2
        assert corpus[2].tokens == ("rust",)


class TestVectorSimilarityScorer:

    def test_identical_documents(self):
        job = doc("python", "docker", "aw", "python")
        scorer = VectorSimilarityScorer(Corpus.build(job, [job, doc("bake", "bread")]))
        assert scorer.similarity(1) == pytest.approx(1.0)
        assert scorer.similarity(1) <= 1.0

    def test_disjoint_documents(self):
        scorer = VectorSimilarityScorer(Corpus.build(doc("python", "docker"), [doc("bake", "bread")]))
        assert scorer.similarity(1) == 0.0

    def test_partial_overlap_between_zero_and_one(self):
        corpus = Corpus.build(
            doc("python", "docker", "aw"),
            [doc("python", "java"), doc("bake")],
        )
        sim = VectorSimilarityScorer(corpus).similarity(1)
        assert 0.0 < sim < 1.0

    def test_more_overlap_scores_higher(self):
        corpus = Corpus.build(
            doc("python", "docker", "aw"),
            [doc("python", "docker", "java"), doc("python", "rust", "java")],
        )
        scorer = VectorSimilarityScorer(corpus)
        assert scorer.similarity(1) > scorer.similarity(2)

    def test_empty_resume(self):
        scorer = VectorSimilarityScorer(Corpus.build(doc("python"), [doc()]))
        assert scorer.similarity(1) == 0.0

    def test_corpus_without_terms(self):
        scorer = VectorSimilarityScorer(Corpus.build(doc(), [doc(), doc()]))
        assert scorer.similarity(1) == 0.0
        assert scorer.similarity(2) == 0.0

    def test_vectors_span_union_of_terms(self):
        corpus = Corpus.build(doc("python", "docker"), [doc("docker", "bake", "bake")])
        job_vec, resume_vec = VectorSimilarityScorer(corpus).vectors(1)
        # python, docker, bake
        assert len(job_vec) == len(resume_vec) == 3
        assert job_vec[2] == 0.0
        assert resume_vec[0] == 0.0
        assert resume_vec[2] > resume_vec[1] > 0.0

    @pytest.mark.parametrize("index", [0, 2, -1])
    def test_index_out_of_range(self, index):
        scorer = VectorSimilarityScorer(Corpus.build(doc("python"), [doc("python")]))
        with pytest.raises(IndexError):
            scorer.similarity(index)
