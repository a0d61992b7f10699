"""Client for the locally hosted sentiment prediction service."""

import logging
from typing import Any, Dict, List, Optional, Sequence

import requests

from ..core.config import settings
from ..core.models import Comment, Prediction, PredictionResult
from .retry import retrying

logger = logging.getLogger(__name__)


class SentimentServiceError(Exception):
    """Raised when the prediction service answers with something unusable."""


class SentimentClient:
    """Posts comment texts to the prediction endpoint in a single request."""
    
    def __init__(self, base_url: Optional[str] = None, endpoint: Optional[str] = None,
                 include_timestamps: Optional[bool] = None, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None, attempts: Optional[int] = None):
        self.base_url = (base_url or settings.prediction_base_url).rstrip("/")
        self.endpoint = endpoint or settings.prediction_endpoint
        self.include_timestamps = settings.include_timestamps if include_timestamps is None else include_timestamps
        self.timeout = settings.request_timeout if timeout is None else timeout
        self.session = session or requests.Session()
        self.attempts = attempts or settings.request_attempts
    
    @property
    def url(self) -> str:
        return f"{self.base_url}/{self.endpoint.lstrip('/')}"
    
    def build_payload(self, comments: Sequence[Comment]) -> Dict[str, Any]:
        """Bare texts, or full objects when timestamps should round-trip."""
        if self.include_timestamps:
            return {"comments": [
                {"text": c.text, "timestamp": c.timestamp, "authorId": c.author_id}
                for c in comments
            ]}
        return {"comments": [c.text for c in comments]}
    
    def _post(self, payload: Dict[str, Any]) -> Any:
        response = self.session.post(self.url, json=payload, timeout=self.timeout)
        if not response.ok:
            raise SentimentServiceError(f"prediction service returned HTTP {response.status_code}")
        try:
            return response.json()
        except ValueError as e:
            raise SentimentServiceError(f"prediction service returned invalid JSON: {e}") from e
    
    @staticmethod
    def parse_predictions(results: Any, comments: Sequence[Comment]) -> List[Prediction]:
        """Align the service's answers with the input comments."""
        if not isinstance(results, list):
            raise SentimentServiceError("prediction service did not return a list")
        if len(results) != len(comments):
            raise SentimentServiceError(
                f"expected {len(comments)} predictions, got {len(results)}"
            )
        
        predictions = []
        for result, comment in zip(results, comments):
            if not isinstance(result, dict) or "sentiment" not in result:
                raise SentimentServiceError(f"malformed prediction: {result!r}")
            try:
                sentiment = int(result["sentiment"])
            except (TypeError, ValueError) as e:
                raise SentimentServiceError(f"unparsable sentiment {result['sentiment']!r}") from e
            predictions.append(Prediction(
                comment=result.get("comment", comment.text),
                sentiment=sentiment,
                timestamp=comment.timestamp,
            ))
        return predictions
    
    def predict(self, comments: Sequence[Comment]) -> PredictionResult:
        """Get one sentiment label per comment, in input order."""
        if not comments:
            return PredictionResult()
        
        try:
            results = retrying(self.attempts)(self._post, self.build_payload(comments))
            predictions = self.parse_predictions(results, comments)
        except SentimentServiceError as e:
            logger.error(f"Prediction failed: {e}")
            return PredictionResult(error=str(e))
        except requests.RequestException as e:
            logger.error(f"Prediction request to {self.url} failed: {e}")
            return PredictionResult(error=f"could not reach prediction service: {e}")
        
        logger.info(f"Received {len(predictions)} predictions from {self.url}")
        return PredictionResult(predictions=predictions)
