"""Summary metrics over fetched comments and their predictions."""

import logging
from typing import Dict, Iterable, List, Sequence

from .constants import SentimentConstants
from .models import Comment, Metrics, Prediction, SentimentPoint

logger = logging.getLogger(__name__)


def count_words(text: str) -> int:
    """Count whitespace-delimited, non-empty tokens."""
    return len((text or "").split())


def tally_sentiments(predictions: Iterable[Prediction], strict: bool = True) -> Dict[str, int]:
    """Count predictions per sentiment bucket.

    The three recognized buckets are always present. With ``strict`` any
    other value is dropped; otherwise it gets a bucket of its own.
    """
    counts = {str(value): 0 for value in SentimentConstants.RECOGNIZED}
    for prediction in predictions:
        key = str(prediction.sentiment)
        if key in counts:
            counts[key] += 1
        elif strict:
            logger.debug(f"Dropping unrecognized sentiment value {prediction.sentiment!r}")
        else:
            counts[key] = counts.get(key, 0) + 1
    return counts


def normalize_sentiment(avg_sentiment: float) -> float:
    """Rescale an average sentiment from [-1, 1] to [0, 10]."""
    return round(((avg_sentiment + 1) / 2) * SentimentConstants.SCORE_SCALE, 2)


def sentiment_points(predictions: Iterable[Prediction]) -> List[SentimentPoint]:
    return [SentimentPoint(timestamp=p.timestamp, sentiment=p.sentiment) for p in predictions]


def compute_metrics(
    comments: Sequence[Comment],
    predictions: Sequence[Prediction],
    strict: bool = True,
) -> Metrics:
    """Compute the summary metrics for one run.

    Raises ValueError for an empty comment list; callers stop on "no comments"
    before getting here.
    """
    total_comments = len(comments)
    if total_comments == 0:
        raise ValueError("Cannot compute metrics without comments")
    
    unique_commenters = len({c.author_id for c in comments})
    total_words = sum(count_words(c.text) for c in comments)
    avg_word_length = round(total_words / total_comments, 2)
    
    # Average is rounded before normalizing, as displayed
    total_sentiment = sum(p.sentiment for p in predictions)
    avg_sentiment_score = round(total_sentiment / total_comments, 2)
    
    return Metrics(
        total_comments=total_comments,
        unique_commenters=unique_commenters,
        avg_word_length=avg_word_length,
        avg_sentiment_score=avg_sentiment_score,
        normalized_sentiment_score=normalize_sentiment(avg_sentiment_score),
        sentiment_counts=tally_sentiments(predictions, strict=strict),
        sentiment_points=sentiment_points(predictions),
    )
