"""Data preparation for export."""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Dict, Any, List

from ..core.constants import FileConstants
from ..core.models import Metrics, Prediction, Report, SentimentPoint, VisualizationResult


def prepare_export(report: Report) -> Dict[str, Any]:
    """Prepare a report for JSON export."""
    
    sections = []
    for section in report.sections:
        entry = {"kind": section.kind, "title": section.title, "body": section.body, "level": section.level}
        if section.kind == "visualization":
            entry["visualization"] = section.data.kind
        elif section.kind == "comments":
            entry["count"] = len(section.data)
        sections.append(entry)
    
    metrics = asdict(report.metrics) if report.metrics else None
    
    export_data = {
        "url": report.url,
        "video_id": report.video_id,
        "halted": report.halted,
        "metrics": metrics,
        "predictions": [asdict(p) for p in report.predictions],
        "visualizations": {
            kind: {"rendered": result.ok, "error": result.error}
            for kind, result in report.visualizations.items()
        },
        "sections": sections,
        "metadata": {
            "export_timestamp": None,  # Will be set by caller
            "version": FileConstants.EXPORT_VERSION,
        }
    }
    
    return export_data


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    import datetime
    
    # Add timestamp
    data.setdefault("metadata", {})["export_timestamp"] = datetime.datetime.now().isoformat()
    
    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def save_images(report: Report, directory: str) -> List[Path]:
    """Write every rendered visualization to ``directory``."""
    out_dir = Path(directory)
    out_dir.mkdir(parents=True, exist_ok=True)
    
    written = []
    for kind, result in report.visualizations.items():
        if not result.ok:
            continue
        suffix = ".jpg" if "jpeg" in result.content_type else ".png"
        path = out_dir / f"{report.video_id}_{kind}{suffix}"
        path.write_bytes(result.image)
        written.append(path)
    return written


def load_report(data: Dict[str, Any]) -> Report:
    """Rebuild a Report from ``prepare_export`` output.

    Images are not exported, so visualization sections come back without
    image bytes.
    """
    report = Report(url=data.get("url", ""), video_id=data.get("video_id"), halted=data.get("halted", False))
    report.predictions = [Prediction(**p) for p in data.get("predictions", [])]
    
    metrics = data.get("metrics")
    if metrics:
        points = [SentimentPoint(**p) for p in metrics.get("sentiment_points", [])]
        report.metrics = Metrics(**{**metrics, "sentiment_points": points})
    
    for entry in data.get("sections", []):
        kind = entry.get("kind", "message")
        payload = None
        if kind == "metrics":
            payload = report.metrics
        elif kind == "visualization":
            payload = VisualizationResult(kind=entry.get("visualization", ""))
        elif kind == "comments":
            payload = report.predictions[:entry.get("count", len(report.predictions))]
        report.add(kind, title=entry.get("title", ""), body=entry.get("body", ""),
                   level=entry.get("level", "info"), data=payload)
    return report
