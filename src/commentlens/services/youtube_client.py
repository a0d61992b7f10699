"""YouTube comment collection service for CommentLens."""

import logging
from typing import Any, Dict, Optional

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from ..core.config import settings
from ..core.constants import YouTubeConstants
from ..core.models import Comment, FetchResult
from .retry import retrying

logger = logging.getLogger(__name__)


def parse_comment_item(item: Dict[str, Any]) -> Comment:
    """Normalize one commentThreads item into a Comment."""
    snippet = item["snippet"]["topLevelComment"]["snippet"]
    author = snippet.get("authorChannelId") or {}
    return Comment(
        text=snippet.get("textOriginal", ""),
        timestamp=snippet.get("publishedAt", ""),
        author_id=author.get("value") or YouTubeConstants.UNKNOWN_AUTHOR,
    )


class YouTubeCommentService:
    """Top-level comment fetcher backed by the YouTube Data API v3."""
    
    def __init__(self, api_key: Optional[str] = None, page_size: int = YouTubeConstants.PAGE_SIZE,
                 client: Any = None, attempts: Optional[int] = None):
        self.api_key = settings.youtube_api_key if api_key is None else api_key
        self.page_size = page_size
        self.attempts = attempts or settings.request_attempts
        self.youtube = client
        if self.youtube is None:
            self._init_youtube()
    
    def _init_youtube(self):
        """Initialize YouTube client."""
        if not self.api_key:
            logger.warning("YouTube API key not provided, comment fetching is disabled")
            return
        try:
            self.youtube = build(
                YouTubeConstants.API_SERVICE_NAME,
                YouTubeConstants.API_VERSION,
                developerKey=self.api_key,
            )
            logger.info("YouTube client initialized successfully")
        except Exception as e:
            logger.error(f"Failed to initialize YouTube client: {e}")
            self.youtube = None
    
    def _list_page(self, video_id: str, page_token: Optional[str]) -> Dict[str, Any]:
        request = self.youtube.commentThreads().list(
            part="snippet",
            videoId=video_id,
            maxResults=self.page_size,
            pageToken=page_token,
            textFormat="plainText",
        )
        return retrying(self.attempts)(request.execute)
    
    def fetch_comments(self, video_id: str, cap: Optional[int] = None) -> FetchResult:
        """Fetch up to ``cap`` top-level comments for a video.

        Pages are requested until the cap is reached or the API stops
        returning a ``nextPageToken``. A failing request ends the loop; the
        comments gathered so far are returned together with the error.
        """
        cap = settings.comment_cap if cap is None else cap
        if not self.youtube:
            return FetchResult(error="YouTube API key not configured")
        
        comments = []
        page_token = None
        pages = 0
        try:
            while len(comments) < cap:
                response = self._list_page(video_id, page_token)
                pages += 1
                
                for item in response.get("items", []):
                    if len(comments) >= cap:
                        break
                    comments.append(parse_comment_item(item))
                
                page_token = response.get("nextPageToken")
                if not page_token:
                    break
        except HttpError as e:
            logger.error(f"YouTube comments fetch failed after {pages} pages: {e}")
            return FetchResult(comments=comments, error=f"YouTube API error: {e}")
        except Exception as e:
            logger.error(f"YouTube comments fetch error after {pages} pages: {e}")
            return FetchResult(comments=comments, error=str(e) or e.__class__.__name__)
        
        logger.info(f"Retrieved {len(comments)} comments for video {video_id} in {pages} pages")
        return FetchResult(comments=comments)
