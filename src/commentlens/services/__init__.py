"""Services for CommentLens."""

from .youtube_client import YouTubeCommentService
from .sentiment_client import SentimentClient
from .visualization_client import VisualizationClient

__all__ = [
    "YouTubeCommentService",
    "SentimentClient",
    "VisualizationClient",
]
