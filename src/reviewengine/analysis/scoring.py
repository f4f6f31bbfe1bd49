"""Issue synthesis and score computation for analyzed files."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from reviewengine.analysis.models import FileResult, Issue, IssueKind, Severity
from reviewengine.analysis.patterns import find_first_checkout
from reviewengine.config.engine import EngineConfig

MAX_IMBALANCE_PENALTY = 50.0
IMBALANCE_PENALTY_PER_CALL = 10.0
COMPLEXITY_PENALTY_BASE = 10
MAX_COMPLEXITY_PENALTY = 30.0
COMPLEXITY_PENALTY_PER_POINT = 2.0

_ISSUE_PENALTIES: dict[Severity, float] = {
    Severity.CRITICAL: 20.0,
    Severity.ERROR: 10.0,
}


def _leak_issue(result: FileResult, content: str, config: EngineConfig) -> Issue:
    difference = result.imbalance
    severity = (
        Severity.CRITICAL if difference > config.critical_imbalance else Severity.ERROR
    )
    first = find_first_checkout(content, config)
    return Issue(
        kind=IssueKind.RESOURCE_LEAK,
        severity=severity,
        title="Unbalanced resource checkouts",
        description=(
            f"Unbalanced checkouts detected: {result.checkout_count} checkout vs "
            f"{result.return_count} release call-sites (difference: {difference}). "
            "This can leak pooled connections."
        ),
        line_number=first[0] if first else None,
        code_snippet=first[1] if first else None,
        suggestion=(
            "ensure every checkout has a matching release, preferably in a "
            "guaranteed-cleanup block"
        ),
    )


def synthesize_issues(
    result: FileResult, content: str | None, config: EngineConfig
) -> tuple[Issue, ...]:
    """Apply the fixed rule set, in order, to a populated FileResult.

    Naming-convention violations are detected upstream but produce no issue.
    """
    text = content or ""
    issues: list[Issue] = []

    if not result.balanced:
        issues.append(_leak_issue(result, text, config))

    if result.complexity_score > config.complexity_threshold:
        issues.append(
            Issue(
                kind=IssueKind.COMPLEXITY,
                severity=Severity.WARNING,
                title="High cyclomatic complexity",
                description=(
                    f"Estimated complexity {result.complexity_score} exceeds the "
                    f"recommended limit of {config.complexity_threshold}."
                ),
                suggestion="split into smaller, focused units",
            )
        )

    if result.architecture_violation:
        issues.append(
            Issue(
                kind=IssueKind.ARCHITECTURE,
                severity=Severity.ERROR,
                title="Architectural pattern violation",
                description=(
                    "Package declaration does not follow the "
                    f"{config.root_namespace}.* namespace."
                ),
                suggestion=(
                    f"move the class under {config.root_namespace}"
                    ".<product>.<module>.<layer>"
                ),
            )
        )

    if result.security_flag:
        issues.append(
            Issue(
                kind=IssueKind.SECURITY,
                severity=Severity.ERROR,
                title="Possible security vulnerability",
                description=(
                    "String concatenation next to a SQL keyword, or a log "
                    "statement referencing a sensitive field."
                ),
                suggestion=(
                    "use parameterized statements and never log credentials "
                    "or document ids"
                ),
            )
        )

    return tuple(issues)


def compute_score(result: FileResult, issues: Iterable[Issue]) -> float:
    """Score in [0, 100], rounded to two decimals.

    A resource-leak issue carries no severity penalty of its own; the
    imbalance penalty already charges for it.
    """
    score = 100.0

    if not result.balanced:
        score -= min(MAX_IMBALANCE_PENALTY, result.imbalance * IMBALANCE_PENALTY_PER_CALL)

    if result.complexity_score > COMPLEXITY_PENALTY_BASE:
        score -= min(
            MAX_COMPLEXITY_PENALTY,
            (result.complexity_score - COMPLEXITY_PENALTY_BASE)
            * COMPLEXITY_PENALTY_PER_POINT,
        )

    for issue in issues:
        if issue.kind is IssueKind.RESOURCE_LEAK:
            continue
        score -= _ISSUE_PENALTIES.get(issue.severity, 0.0)

    return round(min(100.0, max(0.0, score)), 2)


def score_file(
    result: FileResult, content: str | None, config: EngineConfig | None = None
) -> FileResult:
    """Return *result* completed with its issue list and score."""
    config = config or EngineConfig()
    issues = synthesize_issues(result, content, config)
    return replace(result, issues=issues, score=compute_score(result, issues))
