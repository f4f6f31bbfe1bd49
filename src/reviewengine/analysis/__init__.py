"""Heuristic analysis: issue model, pattern analyzer, scoring, and reports."""

from __future__ import annotations

from reviewengine.analysis.models import FileResult, Issue, IssueKind, Review, Severity
from reviewengine.analysis.patterns import analyze_content
from reviewengine.analysis.report import render_report, render_review_summary
from reviewengine.analysis.scoring import score_file

__all__ = [
    "FileResult",
    "Issue",
    "IssueKind",
    "Review",
    "Severity",
    "analyze_content",
    "render_report",
    "render_review_summary",
    "score_file",
]
