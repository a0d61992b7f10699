"""Command-line interface for CommentLens."""

import argparse
import logging
import subprocess
import sys
from pathlib import Path

from .core.config import PipelineOptions, settings
from .core.constants import FileConstants
from .core.models import Report
from .core.urls import extract_video_id
from .pipeline import AnalysisPipeline, sentiment_label
from .services.youtube_client import YouTubeCommentService
from .utils.data_prep import export_to_json, load_report, prepare_export, save_images
from .utils.text import excerpt

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def render_text(report: Report) -> str:
    """Render a report for the terminal."""
    lines = []
    for section in report.sections:
        if section.kind == "video":
            lines.append(f"{section.title}: {section.body}")
        elif section.kind in ("message", "error"):
            prefix = {"error": "ERROR: ", "warning": "WARNING: "}.get(section.level, "")
            lines.append(prefix + section.body)
        elif section.kind == "metrics":
            m = section.data
            lines.append("")
            lines.append(section.title)
            lines.append(f"  Total Comments:      {m.total_comments}")
            lines.append(f"  Unique Commenters:   {m.unique_commenters}")
            lines.append(f"  Avg Comment Length:  {m.avg_word_length:.2f} words")
            lines.append(f"  Avg Sentiment Score: {m.normalized_sentiment_score:.2f}/10")
            counts = ", ".join(f"{sentiment_label(int(k))}: {v}" for k, v in m.sentiment_counts.items())
            lines.append(f"  Distribution:        {counts}")
        elif section.kind == "visualization":
            lines.append(f"[{section.title}: image rendered]")
        elif section.kind == "comments":
            lines.append("")
            lines.append(section.title)
            for i, prediction in enumerate(section.data, 1):
                lines.append(f"  {i}. {excerpt(prediction.comment)}")
                lines.append(f"     Sentiment: {prediction.sentiment}")
    return "\n".join(lines)


def cmd_analyze(args):
    """Analyze command."""
    options = PipelineOptions.from_settings(settings)
    if args.cap:
        options.comment_cap = args.cap
    if args.endpoint:
        options.prediction_endpoint = args.endpoint
    if args.timestamps:
        options.include_timestamps = True
    if args.lenient:
        options.strict_sentiment_bucketing = False
    if args.top is not None:
        options.top_comments = args.top

    pipeline = AnalysisPipeline(options=options)
    report = pipeline.run(args.url)
    print(render_text(report))

    if args.images and report.visualizations:
        for path in save_images(report, args.images):
            print(f"Saved {path}")

    # Export to JSON
    if args.out:
        export_to_json(prepare_export(report), args.out)
        print(f"Results exported to {args.out}")

    return report


def cmd_comments(args):
    """Fetch-only command."""
    video_id = extract_video_id(args.url)
    if not video_id:
        print("Not a YouTube watch URL")
        return

    result = YouTubeCommentService().fetch_comments(video_id, cap=args.cap or settings.comment_cap)
    print(f"Fetched {len(result.comments)} comments for {video_id}")
    if result.failed:
        print(f"Fetch stopped on error: {result.error}")

    for i, comment in enumerate(result.comments[:args.show], 1):
        print(f"  {i}. [{comment.timestamp}] {comment.author_id}: {excerpt(comment.text, 100)}")


def cmd_export(args):
    """Re-render a report saved with `analyze --out`."""
    import json

    try:
        with open(args.input_file, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        print(f"Input file {args.input_file} not found")
        return
    except json.JSONDecodeError as e:
        print(f"Invalid JSON in input file: {e}")
        return

    if args.pretty:
        print(json.dumps(data, indent=2, ensure_ascii=False))
        return

    text = render_text(load_report(data))
    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(text + "\n")
        print(f"Report written to {args.output}")
    else:
        print(text)


def launch_ui():
    """Run the Streamlit app in a subprocess."""
    app_path = Path(__file__).parent / "ui" / "streamlit_app.py"

    if not app_path.exists():
        print(f"Streamlit app not found at {app_path}")
        return

    print("Launching CommentLens UI...")
    try:
        subprocess.run([
            sys.executable, "-m", "streamlit", "run", str(app_path)
        ], check=True)
    except subprocess.CalledProcessError as e:
        print(f"Failed to launch UI: {e}")
    except KeyboardInterrupt:
        print("\nUI stopped by user")


def cmd_ui(args):
    """UI command."""
    launch_ui()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="CommentLens - YouTube comment sentiment overview")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Run the full analysis for a video URL')
    analyze_parser.add_argument('url', help='YouTube watch-page URL')
    analyze_parser.add_argument('--cap', type=int, help='Maximum number of comments to fetch')
    analyze_parser.add_argument('--endpoint', help='Prediction endpoint path (e.g. /predict_with_timestamps)')
    analyze_parser.add_argument('--timestamps', action='store_true', help='Send timestamps with each comment')
    analyze_parser.add_argument('--lenient', action='store_true', help='Keep unrecognized sentiment values')
    analyze_parser.add_argument('--top', type=int, help='Number of comments to list')
    analyze_parser.add_argument('--out', help='Output JSON file')
    analyze_parser.add_argument('--images', help='Directory to save rendered images into')

    # Comments command
    comments_parser = subparsers.add_parser('comments', help='Fetch comments only')
    comments_parser.add_argument('url', help='YouTube watch-page URL')
    comments_parser.add_argument('--cap', type=int, help='Maximum number of comments to fetch')
    comments_parser.add_argument('--show', type=int, default=10, help='Number of comments to print')

    # Export command
    export_parser = subparsers.add_parser('export', help='Render a saved analysis report')
    export_parser.add_argument('--in', dest='input_file', required=True, help='Input JSON file')
    export_parser.add_argument('--out', dest='output', help='Write the rendered text to a file')
    export_parser.add_argument('--pretty', action='store_true', help='Print the raw JSON instead')

    # UI command
    subparsers.add_parser('ui', help='Launch web UI')

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging()

    try:
        if args.command == 'analyze':
            cmd_analyze(args)
        elif args.command == 'comments':
            cmd_comments(args)
        elif args.command == 'export':
            cmd_export(args)
        elif args.command == 'ui':
            cmd_ui(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
    except Exception as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
