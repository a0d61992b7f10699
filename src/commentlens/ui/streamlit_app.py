"""Streamlit UI for CommentLens."""

import streamlit as st
import logging

from commentlens.core.config import PipelineOptions, settings
from commentlens.core.constants import YouTubeConstants
from commentlens.core.models import Report
from commentlens.pipeline import AnalysisPipeline
from commentlens.utils.text import excerpt

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def render_report(report: Report):
    """Draw every section of a report, in order."""
    for section in report.sections:
        if section.kind == "video":
            st.subheader(section.title)
            st.code(section.body)
        elif section.kind == "error":
            st.error(section.body)
        elif section.kind == "message":
            if section.level == "warning":
                st.warning(section.body)
            else:
                st.write(section.body)
        elif section.kind == "metrics":
            m = section.data
            st.subheader(section.title)
            col1, col2, col3, col4 = st.columns(4)
            col1.metric("Total Comments", m.total_comments)
            col2.metric("Unique Commenters", m.unique_commenters)
            col3.metric("Avg Comment Length", f"{m.avg_word_length:.2f} words")
            col4.metric("Avg Sentiment Score", f"{m.normalized_sentiment_score:.2f}/10")
        elif section.kind == "visualization":
            st.subheader(section.title)
            st.image(section.data.image)
        elif section.kind == "comments":
            st.subheader(section.title)
            for i, prediction in enumerate(section.data, 1):
                st.markdown(f"{i}. {excerpt(prediction.comment)}")
                st.caption(f"Sentiment: {prediction.sentiment}")


# Page configuration
st.set_page_config(page_title="CommentLens", page_icon="💬", layout="centered")

st.title("💬 CommentLens")
st.write("Sentiment overview of a YouTube video's comments.")

# A browser extension can open this page with ?url=<active tab URL>
initial_url = st.query_params.get("url", "")

with st.sidebar:
    st.header("⚙️ Options")
    comment_cap = st.slider("Comment cap",
                            YouTubeConstants.MIN_COMMENT_CAP,
                            YouTubeConstants.MAX_COMMENT_CAP,
                            min(max(settings.comment_cap, YouTubeConstants.MIN_COMMENT_CAP),
                                YouTubeConstants.MAX_COMMENT_CAP),
                            step=100)
    include_timestamps = st.checkbox("Send timestamps to the prediction service",
                                     value=settings.include_timestamps)
    strict = st.checkbox("Strict sentiment bucketing", value=settings.strict_sentiment_bucketing,
                         help="Drop sentiment values other than -1, 0 and 1")

url = st.text_input("YouTube video URL", value=initial_url,
                    placeholder="https://www.youtube.com/watch?v=...")

if url:
    options = PipelineOptions.from_settings(settings)
    options.comment_cap = comment_cap
    options.include_timestamps = include_timestamps
    options.strict_sentiment_bucketing = strict

    with st.spinner("Analyzing comments..."):
        report = AnalysisPipeline(options=options).run(url)
    logger.info(f"Rendered report for {report.video_id or url} with {len(report.sections)} sections")
    render_report(report)
