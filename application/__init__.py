"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure,
implementing the classification workflow and its console rendering.
"""

from application.classification import classify_phrase, run_classification
from application.report import log_timing_summary, render_json_report, render_text_report

__all__ = [
    # Main workflows
    "run_classification",
    "classify_phrase",
    # Rendering
    "render_text_report",
    "render_json_report",
    "log_timing_summary",
]
