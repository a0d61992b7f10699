"""Analysis pipeline: URL -> comments -> predictions -> metrics -> report."""

import logging
from typing import Optional

from .core.config import PipelineOptions, Settings, settings as default_settings
from .core.constants import Messages, SentimentConstants, VisualizationConstants
from .core.metrics import compute_metrics
from .core.models import Report
from .core.urls import extract_video_id
from .services.sentiment_client import SentimentClient
from .services.visualization_client import VisualizationClient
from .services.youtube_client import YouTubeCommentService

logger = logging.getLogger(__name__)


def sentiment_label(value: int) -> str:
    return SentimentConstants.LABELS.get(value, str(value))


class AnalysisPipeline:
    """Runs every stage for one video and collects the output in a Report.

    Each stage only starts once the previous one produced something usable:
    a bad URL or an empty comment list stops the run, and so does a failed
    prediction call. Visualization failures never stop it.
    """

    def __init__(self, options: Optional[PipelineOptions] = None,
                 youtube: Optional[YouTubeCommentService] = None,
                 sentiment: Optional[SentimentClient] = None,
                 visualizer: Optional[VisualizationClient] = None,
                 config: Optional[Settings] = None):
        config = config or default_settings
        self.options = options or PipelineOptions.from_settings(config)
        self.youtube = youtube or YouTubeCommentService(
            api_key=config.youtube_api_key, attempts=config.request_attempts
        )
        self.sentiment = sentiment or SentimentClient(
            base_url=config.prediction_base_url,
            endpoint=self.options.prediction_endpoint,
            include_timestamps=self.options.include_timestamps,
            timeout=config.request_timeout,
            attempts=config.request_attempts,
        )
        self.visualizer = visualizer or VisualizationClient(
            base_url=config.effective_visualization_url,
            timeout=config.request_timeout,
            attempts=config.request_attempts,
        )

    def run(self, url: str) -> Report:
        report = Report(url=url or "")

        video_id = extract_video_id(url)
        if not video_id:
            logger.info(f"Not a YouTube watch URL: {url!r}")
            report.message(Messages.INVALID_URL, level="warning")
            return report.halt()

        report.video_id = video_id
        report.add("video", title="YouTube Video ID", body=video_id)
        report.message(Messages.FETCHING)

        # Stage 1: comments
        fetched = self.youtube.fetch_comments(video_id, cap=self.options.comment_cap)
        if fetched.is_empty:
            if fetched.failed:
                report.error(Messages.FETCH_FAILED.format(error=fetched.error))
            report.message(Messages.NO_COMMENTS)
            return report.halt()
        if fetched.failed:
            report.message(
                Messages.PARTIAL_FETCH.format(error=fetched.error, count=len(fetched.comments)),
                level="warning",
            )

        comments = fetched.comments
        report.comments = comments
        report.message(Messages.ANALYZING.format(count=len(comments)))

        # Stage 2: predictions
        predicted = self.sentiment.predict(comments)
        if not predicted.ok:
            report.error(Messages.PREDICTION_FAILED.format(error=predicted.error))
            return report.halt()
        report.predictions = predicted.predictions

        # Stage 3: metrics
        metrics = compute_metrics(comments, predicted.predictions, strict=self.options.strict_sentiment_bucketing)
        report.metrics = metrics
        report.add("metrics", title="Comment Analysis Summary", data=metrics)

        # Stage 4: visualizations, skipped silently on failure
        results = self.visualizer.fetch_all(
            metrics, [c.text for c in comments], wait=self.options.wait_for_visualizations
        )
        report.visualizations = results
        for kind in VisualizationConstants.ENDPOINTS:
            result = results.get(kind)
            if result is not None and result.ok:
                report.add("visualization", title=VisualizationConstants.TITLES[kind], data=result)

        top = predicted.predictions[:self.options.top_comments]
        report.add("comments", title=f"Top {len(top)} Comments", data=top)

        logger.info(
            f"Analyzed {metrics.total_comments} comments for {video_id}: "
            f"score {metrics.normalized_sentiment_score}/10"
        )
        return report


def analyze_url(url: str, options: Optional[PipelineOptions] = None, config: Optional[Settings] = None) -> Report:
    """Run the full pipeline with clients built from settings."""
    return AnalysisPipeline(options=options, config=config).run(url)
