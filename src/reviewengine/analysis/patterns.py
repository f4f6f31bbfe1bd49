"""Pattern analyzer — single-pass regex heuristics over raw file text.

Every check scans the whole text, comments and string literals included.
There is no tokenizer and no parser: a checkout inside a comment counts the
same as a real one. Checks run independently and never short-circuit.
"""

from __future__ import annotations

import re
from pathlib import PurePosixPath

from reviewengine.analysis.models import FileResult
from reviewengine.config.engine import EngineConfig

CLASS_NAME_RE = re.compile(r"class\s+(\w+)")
PACKAGE_RE = re.compile(r"package\s+([\w.]+);")

# Word-bounded on both sides, operators included: ``a&&b`` counts,
# ``a && b`` does not.
_COMPLEXITY_TOKENS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(p)
    for p in (
        r"\bif\b",
        r"\belse\b",
        r"\bfor\b",
        r"\bwhile\b",
        r"\bswitch\b",
        r"\bcatch\b",
        r"\b&&\b",
        r"\b\|\|\b",
    )
)

SQL_CONCAT_RE = re.compile(r"(SELECT|INSERT|UPDATE|DELETE).*\+.*['\"]", re.IGNORECASE)
SENSITIVE_LOG_RE = re.compile(
    r"log\.(debug|info|warn|error).*(?:senha|password|token|cpf|cnpj)",
    re.IGNORECASE,
)

_LANGUAGES: dict[str, str] = {
    "java": "java",
    "js": "javascript",
    "jsx": "javascript",
    "ts": "typescript",
    "tsx": "typescript",
    "py": "python",
    "cs": "csharp",
}


def count_matches(content: str, pattern: re.Pattern[str] | str) -> int:
    """Number of non-overlapping matches of *pattern* in *content*."""
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    return sum(1 for _ in compiled.finditer(content))


def detect_language(path: str) -> str:
    suffix = PurePosixPath(path.replace("\\", "/")).suffix
    if not suffix:
        return "unknown"
    ext = suffix[1:].lower()
    return _LANGUAGES.get(ext, ext)


def extract_class_name(content: str) -> str | None:
    match = CLASS_NAME_RE.search(content)
    return match.group(1) if match else None


def extract_package(content: str) -> str | None:
    match = PACKAGE_RE.search(content)
    return match.group(1) if match else None


def count_lines(content: str) -> int:
    """Line count ignoring trailing blank lines; 0 for blank text."""
    if not content.strip():
        return 0
    return len(content.rstrip("\n").split("\n"))


def count_checkouts(content: str, config: EngineConfig) -> int:
    return count_matches(content, config.checkout_pattern)


def count_releases(content: str, config: EngineConfig) -> int:
    return count_matches(content, config.release_pattern)


def estimate_complexity(content: str) -> int:
    """1 + occurrences of the branching and logical-operator tokens."""
    return 1 + sum(count_matches(content, p) for p in _COMPLEXITY_TOKENS)


def find_first_checkout(content: str, config: EngineConfig) -> tuple[int, str] | None:
    """Return ``(line_number, stripped_line)`` of the first checkout call-site.

    Scans line by line, so a call split across lines is not attributed.
    """
    pattern = re.compile(config.checkout_pattern)
    for index, line in enumerate(content.split("\n"), start=1):
        if pattern.search(line):
            return index, line.strip()
    return None


def has_architecture_violation(content: str, config: EngineConfig) -> bool:
    package = extract_package(content)
    return package is not None and not package.startswith(config.root_namespace)


def has_naming_violation(
    path: str, class_name: str | None, config: EngineConfig
) -> bool:
    """True when *path* implies a layer whose suffix *class_name* lacks."""
    if class_name is None:
        return False
    return any(
        fragment in path and not class_name.endswith(suffix)
        for fragment, suffix in config.layer_suffixes.items()
    )


def has_security_smell(content: str) -> bool:
    return bool(SQL_CONCAT_RE.search(content) or SENSITIVE_LOG_RE.search(content))


def analyze_content(
    path: str, content: str | None, config: EngineConfig | None = None
) -> FileResult:
    """Run every heuristic over *content* and return an unscored FileResult.

    ``None`` or blank content produces a zero-metric result rather than an
    error.
    """
    config = config or EngineConfig()
    language = detect_language(path)
    text = content or ""

    if not text.strip():
        return FileResult(path=path, language=language)

    class_name = extract_class_name(text)
    return FileResult(
        path=path,
        language=language,
        line_count=count_lines(text),
        class_name=class_name,
        checkout_count=count_checkouts(text, config),
        return_count=count_releases(text, config),
        complexity_score=estimate_complexity(text),
        architecture_violation=has_architecture_violation(text, config),
        security_flag=has_security_smell(text),
        naming_violation=has_naming_violation(path, class_name, config),
    )
