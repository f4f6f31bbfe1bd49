"""Analysis result models — issues, per-file results, and review aggregates."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import StrEnum
from uuid import uuid4


class Severity(StrEnum):
    """Issue severity, ordered INFO < WARNING < ERROR < CRITICAL."""

    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank >= other.rank


_SEVERITY_RANK: dict[Severity, int] = {
    Severity.INFO: 1,
    Severity.WARNING: 2,
    Severity.ERROR: 3,
    Severity.CRITICAL: 4,
}


class IssueKind(StrEnum):
    """Taxonomy of heuristic findings."""

    RESOURCE_LEAK = "resource-leak"
    COMPLEXITY = "complexity"
    ARCHITECTURE = "architecture"
    SECURITY = "security"
    NAMING_CONVENTION = "naming-convention"
    CODE_QUALITY = "code-quality"
    PERFORMANCE = "performance"
    DOCUMENTATION = "documentation"
    EXCEPTION_HANDLING = "exception-handling"
    DEAD_CODE = "dead-code"
    DUPLICATE_CODE = "duplicate-code"

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``Resource Leak``."""
        return self.value.replace("-", " ").title()


@dataclass(frozen=True)
class Issue:
    """A single finding. Immutable once created."""

    kind: IssueKind
    severity: Severity
    title: str
    description: str
    line_number: int | None = None
    suggestion: str | None = None
    auto_fixable: bool = False
    code_snippet: str | None = None

    @property
    def position(self) -> str:
        """``line N`` or ``N/A`` when the issue is file-wide."""
        if self.line_number is None:
            return "N/A"
        return f"line {self.line_number}"

    @property
    def summary(self) -> str:
        """One-line summary: ``ERROR: Title (line 12)``."""
        text = f"{self.severity.value}: {self.title}"
        if self.line_number is not None:
            text += f" (line {self.line_number})"
        return text

    @property
    def is_critical_leak(self) -> bool:
        return (
            self.severity == Severity.CRITICAL
            and self.kind == IssueKind.RESOURCE_LEAK
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "kind": self.kind.value,
            "severity": self.severity.value,
            "title": self.title,
            "description": self.description,
            "line_number": self.line_number,
            "suggestion": self.suggestion,
            "auto_fixable": self.auto_fixable,
            "code_snippet": self.code_snippet,
        }


@dataclass(frozen=True)
class FileResult:
    """Heuristic metrics, issues and score for one analyzed file.

    Produced unscored by the pattern analyzer (``issues`` empty, ``score``
    100.0) and completed by the scoring step. AI enrichment returns a copy
    with ``ai_narrative``/``ai_confidence`` set; nothing else changes.
    """

    path: str
    language: str
    line_count: int = 0
    class_name: str | None = None
    checkout_count: int = 0
    return_count: int = 0
    complexity_score: int = 1
    architecture_violation: bool = False
    security_flag: bool = False
    naming_violation: bool = False
    issues: tuple[Issue, ...] = ()
    score: float = 100.0
    ai_narrative: str | None = None
    ai_confidence: float | None = None
    review_id: str | None = None

    @property
    def balanced(self) -> bool:
        return self.checkout_count == self.return_count

    @property
    def imbalance(self) -> int:
        return abs(self.checkout_count - self.return_count)

    @property
    def imbalance_percent(self) -> float:
        total = self.checkout_count + self.return_count
        if total == 0:
            return 0.0
        return self.imbalance / total * 100

    @property
    def file_name(self) -> str:
        return self.path.replace("\\", "/").rsplit("/", 1)[-1]

    @property
    def overall_severity(self) -> Severity | None:
        """Highest severity among the issues, ``None`` for a clean file."""
        if not self.issues:
            return None
        return max(issue.severity for issue in self.issues)

    def issue_count(self, severity: Severity) -> int:
        return sum(1 for issue in self.issues if issue.severity == severity)

    def with_ai(self, narrative: str, confidence: float | None) -> FileResult:
        """Return a copy carrying the AI narrative; heuristic fields untouched."""
        return replace(self, ai_narrative=narrative, ai_confidence=confidence)

    def to_dict(self) -> dict[str, object]:
        """Serialize for JSON output."""
        return {
            "path": self.path,
            "class_name": self.class_name,
            "language": self.language,
            "line_count": self.line_count,
            "checkout_count": self.checkout_count,
            "return_count": self.return_count,
            "balanced": self.balanced,
            "imbalance_percent": round(self.imbalance_percent, 2),
            "complexity_score": self.complexity_score,
            "architecture_violation": self.architecture_violation,
            "security_flag": self.security_flag,
            "naming_violation": self.naming_violation,
            "issues": [issue.to_dict() for issue in self.issues],
            "score": self.score,
            "ai_narrative": self.ai_narrative,
            "ai_confidence": self.ai_confidence,
        }


@dataclass
class Review:
    """One commit's review: owns an ordered collection of FileResults.

    ``score`` and ``issue_counts`` are always recomputed from ``files``.
    """

    commit_sha: str
    repository: str
    author: str
    title: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=datetime.now)
    files: list[FileResult] = field(default_factory=list)

    def add_file(self, result: FileResult) -> FileResult:
        """Attach *result*, stamping it with this review's id."""
        owned = replace(result, review_id=self.id)
        self.files.append(owned)
        return owned

    @property
    def score(self) -> float:
        """Mean of file scores; 0.0 for an empty review."""
        if not self.files:
            return 0.0
        return sum(f.score for f in self.files) / len(self.files)

    @property
    def issue_counts(self) -> dict[Severity, int]:
        return {
            severity: sum(f.issue_count(severity) for f in self.files)
            for severity in Severity
        }

    @property
    def total_issues(self) -> int:
        return sum(len(f.issues) for f in self.files)

    @property
    def total_lines(self) -> int:
        return sum(f.line_count for f in self.files)

    def to_dict(self) -> dict[str, object]:
        """Serialize for JSON output."""
        return {
            "id": self.id,
            "commit_sha": self.commit_sha,
            "repository": self.repository,
            "author": self.author,
            "title": self.title,
            "created_at": self.created_at.isoformat(),
            "score": round(self.score, 2),
            "issue_counts": {k.value: v for k, v in self.issue_counts.items()},
            "files": [f.to_dict() for f in self.files],
        }
