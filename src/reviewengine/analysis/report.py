"""Markdown report rendering for file results and whole reviews."""

from __future__ import annotations

from reviewengine.analysis.models import FileResult, Review, Severity
from reviewengine.config.engine import EngineConfig

_FOOTER = "*Report generated automatically by reviewengine*"

_STANDING_RECOMMENDATIONS = (
    "Add adequate documentation",
    "Implement unit tests",
)

_REVIEW_RECOMMENDATIONS = (
    "Prioritize fixing resource leaks",
    "Improve technical documentation",
    "Implement unit tests",
    "Review method complexity",
)


def complexity_label(score: int, threshold: int = 15) -> str:
    """Three-band label: Good (<=10), Medium (<= threshold), High."""
    if score <= 10:
        return "Good"
    if score <= threshold:
        return "Medium"
    return "High"


def _header(result: FileResult) -> list[str]:
    return [
        f"# Review report - {result.file_name}",
        "",
        "## Summary",
        "",
        f"- **File:** `{result.path}`",
        f"- **Class:** {result.class_name or 'N/A'}",
        f"- **Language:** {result.language}",
        f"- **Lines:** {result.line_count}",
        f"- **Score:** {result.score:.1f}/100",
        "",
    ]


def _checkout_section(result: FileResult) -> list[str]:
    lines = [
        "## Resource checkouts",
        "",
        f"- **Checkouts:** {result.checkout_count}",
        f"- **Releases:** {result.return_count}",
        f"- **Balanced:** {'yes' if result.balanced else 'no'}",
    ]
    if result.imbalance_percent > 0:
        lines.append(f"- **Imbalance:** {result.imbalance_percent:.1f}%")
    lines.append("")
    return lines


def _complexity_section(result: FileResult, config: EngineConfig) -> list[str]:
    label = complexity_label(result.complexity_score, config.complexity_threshold)
    return [
        "## Complexity",
        "",
        f"- **Cyclomatic complexity (estimate):** {result.complexity_score} ({label})",
        "",
    ]


def _issues_section(result: FileResult) -> list[str]:
    lines = ["## Issues", ""]
    if not result.issues:
        lines += ["No issues found.", ""]
        return lines

    for issue in result.issues:
        lines.append(f"### [{issue.severity.value}] {issue.title}")
        lines.append("")
        lines.append(f"- **Kind:** {issue.kind.label}")
        if issue.line_number is not None:
            lines.append(f"- **Line:** {issue.line_number}")
        if issue.code_snippet:
            lines.append(f"- **Code:** `{issue.code_snippet}`")
        lines.append(f"- **Description:** {issue.description}")
        if issue.suggestion:
            lines.append(f"- **Suggestion:** {issue.suggestion}")
        lines.append("")
    return lines


def _recommendations_section(result: FileResult, config: EngineConfig) -> list[str]:
    lines = ["## Recommendations", ""]
    if not result.balanced:
        lines.append("- **CRITICAL:** Fix the resource leaks identified above")
    if result.complexity_score > config.complexity_threshold:
        lines.append("- Refactor methods with high complexity")
    if result.score < config.min_score:
        lines.append("- Improve the overall code quality")
    lines += [f"- {item}" for item in _STANDING_RECOMMENDATIONS]
    lines.append("")
    return lines


def _ai_section(result: FileResult) -> list[str]:
    if result.ai_narrative is None:
        return []
    lines = ["---", "", "## AI Analysis", ""]
    if result.ai_confidence is not None:
        lines += [f"*Confidence: {result.ai_confidence:.0%}*", ""]
    lines += [result.ai_narrative.rstrip(), ""]
    return lines


def render_report(result: FileResult, config: EngineConfig | None = None) -> str:
    """Render a scored FileResult as a markdown report.

    Sections always appear in the same order; the AI section is appended only
    when a narrative is attached.
    """
    config = config or EngineConfig()
    lines: list[str] = []
    lines += _header(result)
    lines += _checkout_section(result)
    lines += _complexity_section(result, config)
    lines += _issues_section(result)
    lines += _recommendations_section(result, config)
    lines += _ai_section(result)
    lines += ["---", _FOOTER]
    return "\n".join(lines) + "\n"


def render_review_summary(review: Review) -> str:
    """Executive summary for a review, derived purely from its file results."""
    counts = review.issue_counts
    lines = [
        "# Executive summary",
        "",
        "## Overview",
        "",
        f"- **Repository:** {review.repository}",
        f"- **Commit:** {review.commit_sha}",
        f"- **Author:** {review.author}",
        f"- **Files analyzed:** {len(review.files)}",
        f"- **Average score:** {review.score:.1f}/100",
        "",
        "## Quality indicators",
        "",
        f"- **Critical issues:** {counts[Severity.CRITICAL]}",
        f"- **Errors:** {counts[Severity.ERROR]}",
        f"- **Warnings:** {counts[Severity.WARNING]}",
        f"- **Total issues:** {review.total_issues}",
        "",
    ]
    if review.files:
        lines += ["## Files", ""]
        for result in review.files:
            worst = result.overall_severity
            tag = worst.value if worst is not None else "CLEAN"
            lines.append(f"- `{result.path}`: {result.score:.1f} ({tag})")
        lines.append("")
    lines += ["## Recommendations", ""]
    lines += [f"- {item}" for item in _REVIEW_RECOMMENDATIONS]
    lines += ["", "---", _FOOTER]
    return "\n".join(lines) + "\n"
