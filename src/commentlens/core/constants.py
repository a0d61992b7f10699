"""Constants and configuration values for CommentLens."""

import re


# YouTube Constants
class YouTubeConstants:
    """Constants related to the YouTube Data API."""
    
    API_SERVICE_NAME = "youtube"
    API_VERSION = "v3"
    PAGE_SIZE = 100  # maxResults per commentThreads page (API maximum)
    MIN_COMMENT_CAP = 200
    MAX_COMMENT_CAP = 500
    UNKNOWN_AUTHOR = "Unknown"
    
    # Only full watch-page URLs are accepted
    WATCH_URL_RE = re.compile(r"^https://(?:www\.)?youtube\.com/watch\?v=([\w-]{11})")


# Sentiment Constants
class SentimentConstants:
    """Constants for sentiment labels and scoring."""
    
    NEGATIVE = -1
    NEUTRAL = 0
    POSITIVE = 1
    RECOGNIZED = (POSITIVE, NEUTRAL, NEGATIVE)
    LABELS = {POSITIVE: "Positive", NEUTRAL: "Neutral", NEGATIVE: "Negative"}
    SCORE_SCALE = 10  # normalized score range is [0, SCORE_SCALE]


# Visualization Constants
class VisualizationConstants:
    """Rendering endpoints on the analysis server."""
    
    CHART = "chart"
    TREND = "trend"
    WORDCLOUD = "wordcloud"
    ENDPOINTS = {
        CHART: "/generate_chart",
        TREND: "/generate_trend_graph",
        WORDCLOUD: "/generate_wordcloud",
    }
    TITLES = {
        CHART: "Sentiment Analysis Results",
        TREND: "Sentiment Trend Over Time",
        WORDCLOUD: "Comment Wordcloud",
    }
    MAX_WORKERS = 3


# UI Constants
class UIConstants:
    """Constants for report rendering."""
    
    MAX_COMMENT_PREVIEW = 240  # chars shown per comment in the terminal


# User-facing messages
class Messages:
    """Text shown to the user by the pipeline."""
    
    INVALID_URL = "This is not a valid YouTube URL. Please open a YouTube video page."
    FETCHING = "Fetching comments..."
    NO_COMMENTS = "No comments found for this video."
    FETCH_FAILED = "Could not fetch comments: {error}"
    PARTIAL_FETCH = "Comment fetch stopped early ({error}); continuing with {count} comments."
    ANALYZING = "Fetched {count} comments. Performing sentiment analysis..."
    PREDICTION_FAILED = "Error fetching sentiment predictions: {error}"


# File and Path Constants
class FileConstants:
    """Constants for file operations."""
    
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    EXPORT_VERSION = "1.0.0"
