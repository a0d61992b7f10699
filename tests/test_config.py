"""Tests for settings and pipeline options."""

import pytest
from pydantic import ValidationError

from commentlens.core.config import PipelineOptions, Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("COMMENT_CAP", raising=False)
    config = Settings(_env_file=None)
    
    assert config.prediction_base_url == "http://localhost:5000"
    assert config.prediction_endpoint == "/predict"
    assert config.comment_cap == 500
    assert config.request_attempts == 1
    assert config.effective_visualization_url == "http://localhost:5000"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("COMMENT_CAP", "200")
    monkeypatch.setenv("PREDICTION_ENDPOINT", "/predict_with_timestamps")
    monkeypatch.setenv("STRICT_SENTIMENT_BUCKETING", "false")
    monkeypatch.setenv("VISUALIZATION_BASE_URL", "http://render:8080")
    
    config = Settings(_env_file=None)
    options = PipelineOptions.from_settings(config)
    
    assert options.comment_cap == 200
    assert options.prediction_endpoint == "/predict_with_timestamps"
    assert options.strict_sentiment_bucketing is False
    assert config.effective_visualization_url == "http://render:8080"


def test_comment_cap_must_be_positive(monkeypatch):
    monkeypatch.setenv("COMMENT_CAP", "0")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
