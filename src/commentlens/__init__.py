"""CommentLens - sentiment overview of YouTube video comments."""

__version__ = "1.0.0"
__author__ = "CommentLens Team"

from .core.models import *
from .core.config import settings
from .pipeline import AnalysisPipeline, analyze_url
from .services.youtube_client import YouTubeCommentService
from .services.sentiment_client import SentimentClient
from .services.visualization_client import VisualizationClient

__all__ = [
    "settings",
    "AnalysisPipeline",
    "analyze_url",
    "YouTubeCommentService",
    "SentimentClient",
    "VisualizationClient",
]
