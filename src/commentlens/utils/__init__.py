"""Utility modules for CommentLens."""

from .data_prep import export_to_json, load_report, prepare_export, save_images
from .text import excerpt

__all__ = [
    "excerpt",
    "export_to_json",
    "load_report",
    "prepare_export",
    "save_images",
]
