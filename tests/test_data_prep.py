"""Tests for report export and terminal rendering."""

import json

from commentlens.cli import build_parser, main, render_text
from commentlens.core.metrics import compute_metrics
from commentlens.core.models import Report, VisualizationResult
from commentlens.core.constants import UIConstants
from commentlens.utils.data_prep import export_to_json, load_report, prepare_export, save_images
from commentlens.utils.text import excerpt


def _report(comments, predictions):
    report = Report(url="https://www.youtube.com/watch?v=dQw4w9WgXcQ", video_id="dQw4w9WgXcQ")
    report.add("video", title="YouTube Video ID", body="dQw4w9WgXcQ")
    report.comments = comments
    report.predictions = predictions
    report.metrics = compute_metrics(comments, predictions)
    report.add("metrics", title="Comment Analysis Summary", data=report.metrics)
    chart = VisualizationResult(kind="chart", image=b"png-bytes")
    report.visualizations = {"chart": chart, "trend": VisualizationResult(kind="trend", error="HTTP 500")}
    report.add("visualization", title="Sentiment Analysis Results", data=chart)
    report.add("comments", title="Top 4 Comments", data=predictions)
    return report


def test_prepare_export(comments, predictions):
    data = prepare_export(_report(comments, predictions))
    
    assert data["video_id"] == "dQw4w9WgXcQ"
    assert data["metrics"]["normalized_sentiment_score"] == 6.25
    assert data["metrics"]["sentiment_counts"] == {"1": 2, "0": 1, "-1": 1}
    assert len(data["predictions"]) == 4
    assert data["visualizations"]["chart"] == {"rendered": True, "error": None}
    assert data["visualizations"]["trend"]["rendered"] is False
    assert data["sections"][2]["visualization"] == "chart"


def test_export_to_json_stamps_timestamp(tmp_path, comments, predictions):
    out = tmp_path / "report.json"
    export_to_json(prepare_export(_report(comments, predictions)), str(out))
    
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["metadata"]["export_timestamp"]
    assert data["predictions"][0]["comment"] == "Great video, thanks!"


def test_save_images_writes_only_rendered(tmp_path, comments, predictions):
    written = save_images(_report(comments, predictions), str(tmp_path / "images"))
    
    assert [p.name for p in written] == ["dQw4w9WgXcQ_chart.png"]
    assert written[0].read_bytes() == b"png-bytes"


def test_render_text(comments, predictions):
    text = render_text(_report(comments, predictions))
    
    assert "YouTube Video ID: dQw4w9WgXcQ" in text
    assert "Unique Commenters:   3" in text
    assert "6.25/10" in text
    assert "1. Great video, thanks!" in text
    assert "Sentiment: -1" in text


def test_render_invalid_url_report():
    report = Report(url="nope")
    report.message("This is not a valid YouTube URL.", level="warning")
    assert render_text(report) == "WARNING: This is not a valid YouTube URL."


def test_analyze_arguments():
    args = build_parser().parse_args([
        "analyze", "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "--cap", "200", "--endpoint", "/predict_with_timestamps", "--timestamps", "--lenient",
    ])
    assert args.command == "analyze"
    assert args.cap == 200
    assert args.endpoint == "/predict_with_timestamps"
    assert args.timestamps and args.lenient


def test_load_report_rebuilds_exported_report(comments, predictions):
    original = _report(comments, predictions)
    original.sections[-1].data = predictions[:2]
    
    restored = load_report(json.loads(json.dumps(prepare_export(original))))
    
    assert restored.video_id == "dQw4w9WgXcQ"
    assert restored.metrics == original.metrics
    assert restored.predictions == predictions
    assert [s.kind for s in restored.sections] == [s.kind for s in original.sections]
    assert restored.sections[-1].data == predictions[:2]
    assert render_text(restored) == render_text(original)


def test_export_command_renders_saved_report(tmp_path, capsys, comments, predictions):
    saved = tmp_path / "report.json"
    export_to_json(prepare_export(_report(comments, predictions)), str(saved))
    
    main(["export", "--in", str(saved)])
    
    out = capsys.readouterr().out
    assert "YouTube Video ID: dQw4w9WgXcQ" in out
    assert "6.25/10" in out
    assert "[Sentiment Analysis Results: image rendered]" in out


def test_export_command_writes_text_file(tmp_path, comments, predictions):
    saved = tmp_path / "report.json"
    rendered = tmp_path / "report.txt"
    export_to_json(prepare_export(_report(comments, predictions)), str(saved))
    
    main(["export", "--in", str(saved), "--out", str(rendered)])
    
    assert "Unique Commenters:   3" in rendered.read_text(encoding="utf-8")


def test_excerpt_uses_preview_limit():
    long_text = "word " * 200
    preview = excerpt(long_text)
    
    assert len(preview) == UIConstants.MAX_COMMENT_PREVIEW
    assert preview.endswith("…")
    assert excerpt("line one\nline two") == "line one line two"
    assert excerpt(None) == ""
