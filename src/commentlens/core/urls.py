"""Video identifier extraction from watch-page URLs."""

from typing import Optional

from .constants import YouTubeConstants


def extract_video_id(url: Optional[str]) -> Optional[str]:
    """Return the 11-character video id of a watch-page URL, or None."""
    if not url:
        return None
    match = YouTubeConstants.WATCH_URL_RE.match(url.strip())
    return match.group(1) if match else None


def is_watch_url(url: Optional[str]) -> bool:
    return extract_video_id(url) is not None
