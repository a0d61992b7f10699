"""Basic usage examples for CommentLens."""

from commentlens import AnalysisPipeline, YouTubeCommentService, SentimentClient
from commentlens.core.config import PipelineOptions
from commentlens.core.metrics import compute_metrics
from commentlens.core.urls import extract_video_id

VIDEO_URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


def example_full_analysis():
    """Example: full pipeline with the default settings."""
    print(f"🔍 Analyzing {VIDEO_URL}")
    
    options = PipelineOptions(comment_cap=200)
    report = AnalysisPipeline(options=options).run(VIDEO_URL)
    
    for text in report.messages():
        print(f"  {text}")
    
    if report.metrics:
        m = report.metrics
        print(f"📊 {m.total_comments} comments from {m.unique_commenters} commenters")
        print(f"⭐ Sentiment score: {m.normalized_sentiment_score:.2f}/10")
        print(f"🖼️ Rendered: {[k for k, v in report.visualizations.items() if v.ok]}")


def example_step_by_step():
    """Example: call each stage yourself."""
    video_id = extract_video_id(VIDEO_URL)
    
    fetched = YouTubeCommentService().fetch_comments(video_id, cap=200)
    if fetched.failed:
        print(f"⚠️ Fetch stopped early: {fetched.error}")
    if fetched.is_empty:
        print("No comments found for this video.")
        return
    
    predicted = SentimentClient(endpoint="/predict_with_timestamps", include_timestamps=True).predict(fetched.comments)
    if not predicted.ok:
        print(f"❌ {predicted.error}")
        return
    
    metrics = compute_metrics(fetched.comments, predicted.predictions)
    print(f"Distribution: {metrics.sentiment_counts}")


if __name__ == "__main__":
    example_full_analysis()
    example_step_by_step()
