"""
Tests for AnalyzerConfig and JSON config loading.
"""

import json

import pytest

from resume_ranker.config import AnalyzerConfig, load_config
from resume_ranker.exceptions import ConfigError
from resume_ranker.vocabulary import FALLBACK_KEYWORDS, STOPWORDS, TECHNICAL_SKILLS


class TestAnalyzerConfig:

    def test_defaults(self):
        config = AnalyzerConfig()
        assert config.job_top_n == 20
        assert config.keyword_output_limit == 10
        assert config.resume_keyword_limit == 15
        assert config.feedback_term_limit == 5
        assert config.max_workers == 1
        assert config.stopwords is STOPWORDS
        assert config.fallback_keywords == FALLBACK_KEYWORDS

    def test_skill_phrases(self):
        phrases = AnalyzerConfig().skill_phrases
        assert "machine learning" in phrases
        assert all(" " in p for p in phrases)
        assert "python" in AnalyzerConfig().technical_skill_set

    def test_frozen(self):
        with pytest.raises(AttributeError):
            AnalyzerConfig().job_top_n = 5

    def test_overrides_normalize_vocabulary(self):
        config = AnalyzerConfig().with_overrides(technical_skills=[" Rust ", "Go"], stopwords=["Foo"])
        assert config.technical_skills == ("rust", "go")
        assert config.stopwords == frozenset({"foo"})

    def test_unknown_key(self):
        with pytest.raises(ConfigError, match="Unknown config keys: bogus"):
            AnalyzerConfig().with_overrides(bogus=1)

    @pytest.mark.parametrize("value", ["3", -1, 2.5, True])
    def test_bad_limit(self, value):
        with pytest.raises(ConfigError):
            AnalyzerConfig().with_overrides(job_top_n=value)

    def test_bad_vocabulary(self):
        with pytest.raises(ConfigError):
            AnalyzerConfig().with_overrides(technical_skills="python")


class TestLoadConfig:

    def test_load(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"job_top_n": 25, "max_workers": 4, "technical_skills": ["terraform"]}))
        config = load_config(path)
        assert config.job_top_n == 25
        assert config.max_workers == 4
        assert config.technical_skills == ("terraform",)
        # Untouched fields keep their defaults
        assert config.resume_keyword_limit == 15
        assert AnalyzerConfig().technical_skills == TECHNICAL_SKILLS

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigError, match="JSON object"):
            load_config(str(path))
