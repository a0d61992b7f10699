"""Core modules for CommentLens."""

from .models import *
from .config import settings, Settings, PipelineOptions
from .metrics import compute_metrics, normalize_sentiment, tally_sentiments
from .urls import extract_video_id

__all__ = [
    "settings",
    "Settings",
    "PipelineOptions",
    "Comment",
    "Prediction",
    "SentimentPoint",
    "Metrics",
    "FetchResult",
    "PredictionResult",
    "VisualizationResult",
    "Report",
    "compute_metrics",
    "normalize_sentiment",
    "tally_sentiments",
    "extract_video_id",
]
