"""Data models for CommentLens."""

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any


@dataclass(frozen=True)
class Comment:
    """A top-level comment as returned by the comment listing API."""
    text: str
    timestamp: str  # ISO-8601, as published by YouTube
    author_id: str = "Unknown"


@dataclass(frozen=True)
class Prediction:
    """Sentiment label for one comment, aligned with its Comment."""
    comment: str
    sentiment: int  # -1, 0 or 1
    timestamp: str


@dataclass(frozen=True)
class SentimentPoint:
    """Single point of the sentiment trend series."""
    timestamp: str
    sentiment: int


@dataclass
class Metrics:
    """Summary statistics for one analysis run."""
    total_comments: int
    unique_commenters: int
    avg_word_length: float
    avg_sentiment_score: float
    normalized_sentiment_score: float
    sentiment_counts: Dict[str, int]
    sentiment_points: List[SentimentPoint] = field(default_factory=list)


@dataclass
class FetchResult:
    """Outcome of a comment fetch.

    ``error`` is set when the fetch stopped on a failure; ``comments`` still
    holds whatever was collected before that point.
    """
    comments: List[Comment] = field(default_factory=list)
    error: Optional[str] = None
    
    @property
    def failed(self) -> bool:
        return self.error is not None
    
    @property
    def is_empty(self) -> bool:
        return not self.comments


@dataclass
class PredictionResult:
    """Outcome of a call to the prediction service."""
    predictions: List[Prediction] = field(default_factory=list)
    error: Optional[str] = None
    
    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class VisualizationResult:
    """Rendered image returned by one of the visualization endpoints."""
    kind: str
    image: Optional[bytes] = None
    content_type: str = "image/png"
    error: Optional[str] = None
    
    @property
    def ok(self) -> bool:
        return self.error is None and bool(self.image)


@dataclass
class Section:
    """One rendered fragment of a report."""
    kind: str  # "message", "error", "video", "metrics", "visualization", "comments"
    title: str = ""
    body: str = ""
    level: str = "info"  # "info", "warning" or "error"
    data: Any = None


@dataclass
class Report:
    """Output accumulator threaded through the pipeline stages.

    Stages only append sections; a renderer walks them once at the end.
    """
    url: str = ""
    video_id: Optional[str] = None
    sections: List[Section] = field(default_factory=list)
    comments: List[Comment] = field(default_factory=list)
    predictions: List[Prediction] = field(default_factory=list)
    metrics: Optional[Metrics] = None
    visualizations: Dict[str, VisualizationResult] = field(default_factory=dict)
    halted: bool = False
    
    def add(self, kind: str, title: str = "", body: str = "", level: str = "info", data: Any = None) -> Section:
        section = Section(kind=kind, title=title, body=body, level=level, data=data)
        self.sections.append(section)
        return section
    
    def message(self, body: str, level: str = "info") -> Section:
        return self.add("message", body=body, level=level)
    
    def error(self, body: str) -> Section:
        return self.add("error", body=body, level="error")
    
    def halt(self) -> "Report":
        self.halted = True
        return self
    
    def messages(self) -> List[str]:
        """Plain texts of message and error sections, in order."""
        return [s.body for s in self.sections if s.kind in ("message", "error")]
