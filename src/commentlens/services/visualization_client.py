"""Requesters for the chart, trend graph and word cloud renderings."""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Dict, Iterable, Optional, Sequence

import requests

from ..core.config import settings
from ..core.constants import VisualizationConstants
from ..core.models import Metrics, SentimentPoint, VisualizationResult
from .retry import retrying

logger = logging.getLogger(__name__)


class VisualizationClient:
    """Posts aggregate payloads to the rendering endpoints and returns images."""
    
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None, attempts: Optional[int] = None):
        self.base_url = (base_url or settings.effective_visualization_url).rstrip("/")
        self.timeout = settings.request_timeout if timeout is None else timeout
        self.session = session or requests.Session()
        self.attempts = attempts or settings.request_attempts
    
    def _request(self, kind: str, payload: Dict[str, Any]) -> VisualizationResult:
        url = self.base_url + VisualizationConstants.ENDPOINTS[kind]
        try:
            response = retrying(self.attempts)(self.session.post, url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"Rendering {kind} failed: {e}")
            return VisualizationResult(kind=kind, error=str(e))
        
        if not response.ok:
            logger.warning(f"Rendering {kind} failed: HTTP {response.status_code}")
            return VisualizationResult(kind=kind, error=f"HTTP {response.status_code}")
        if not response.content:
            logger.warning(f"Rendering {kind} returned an empty body")
            return VisualizationResult(kind=kind, error="empty image")
        
        content_type = response.headers.get("Content-Type", "image/png")
        logger.info(f"Rendered {kind} ({len(response.content)} bytes)")
        return VisualizationResult(kind=kind, image=response.content, content_type=content_type)
    
    def fetch_chart(self, sentiment_counts: Dict[str, int]) -> VisualizationResult:
        """Sentiment distribution chart."""
        return self._request(VisualizationConstants.CHART, {"sentiment_counts": dict(sentiment_counts)})
    
    def fetch_trend_graph(self, points: Iterable[SentimentPoint]) -> VisualizationResult:
        """Sentiment over time."""
        data = [{"timestamp": p.timestamp, "sentiment": p.sentiment} for p in points]
        return self._request(VisualizationConstants.TREND, {"sentiment_data": data})
    
    def fetch_wordcloud(self, texts: Sequence[str]) -> VisualizationResult:
        """Word cloud of the raw comment texts."""
        return self._request(VisualizationConstants.WORDCLOUD, {"comments": list(texts)})
    
    def fetch_all(self, metrics: Metrics, texts: Sequence[str], wait: bool = True) -> Dict[str, VisualizationResult]:
        """Issue the three renderings concurrently.

        With ``wait`` the call returns once all three have finished. Without
        it the requests keep running in the background and only results
        that are already done are returned.
        """
        jobs = {
            VisualizationConstants.CHART: (self.fetch_chart, metrics.sentiment_counts),
            VisualizationConstants.TREND: (self.fetch_trend_graph, metrics.sentiment_points),
            VisualizationConstants.WORDCLOUD: (self.fetch_wordcloud, list(texts)),
        }
        
        executor = ThreadPoolExecutor(max_workers=VisualizationConstants.MAX_WORKERS)
        futures = {executor.submit(fn, arg): kind for kind, (fn, arg) in jobs.items()}
        
        results = {}
        if wait:
            for future in as_completed(futures):
                kind = futures[future]
                results[kind] = future.result()
            executor.shutdown(wait=True)
        else:
            for future, kind in futures.items():
                if future.done():
                    results[kind] = future.result()
            executor.shutdown(wait=False)
        
        rendered = [kind for kind, result in results.items() if result.ok]
        logger.info(f"Visualizations rendered: {rendered or 'none'}")
        return results
