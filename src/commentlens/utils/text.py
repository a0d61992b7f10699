"""Text helpers shared by the report renderers."""

from ..core.constants import UIConstants


def excerpt(s, n=UIConstants.MAX_COMMENT_PREVIEW):
    """Single-line preview of a comment, cut to ``n`` characters."""
    s = (s or "").strip().replace("\n", " ")
    return s if len(s) <= n else s[:n-1] + "…"
