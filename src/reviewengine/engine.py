"""ReviewEngine — the entry point callers use to analyze, enrich, and report."""

from __future__ import annotations

from collections.abc import Iterable

from reviewengine.ai.orchestrator import AiOrchestrator
from reviewengine.analysis.models import FileResult, Review
from reviewengine.analysis.patterns import analyze_content
from reviewengine.analysis.report import render_report, render_review_summary
from reviewengine.analysis.scoring import score_file
from reviewengine.config.engine import EngineConfig
from reviewengine.config.manager import load_config
from reviewengine.config.settings import Settings
from reviewengine.logging import get_logger
from reviewengine.providers.models import ProviderDescriptor

_log = get_logger("reviewengine.engine")


class ReviewEngine:
    """Heuristic analysis, scoring, optional AI enrichment, and rendering.

    Holds no per-request state; one instance can serve concurrent reviews.
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        orchestrator: AiOrchestrator | None = None,
    ) -> None:
        self._config = config or EngineConfig()
        self._orchestrator = orchestrator or AiOrchestrator({}, self._config)

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def orchestrator(self) -> AiOrchestrator:
        return self._orchestrator

    def analyze_file(self, path: str, content: str | None) -> FileResult:
        """Heuristics, issue synthesis, and score for one file. No AI."""
        raw = analyze_content(path, content, self._config)
        result = score_file(raw, content, self._config)
        _log.debug(
            "Analyzed %s: score=%.2f issues=%d", path, result.score, len(result.issues)
        )
        return result

    async def enrich_with_ai(
        self,
        result: FileResult,
        code: str,
        file_path: str | None = None,
        model: str | None = None,
    ) -> FileResult:
        """Return a copy of *result* carrying the AI narrative and confidence.

        Raises UnsupportedModelError for an unknown model id; every other
        failure degrades to the templated narrative.
        """
        outcome = await self._orchestrator.analyze(code, file_path or result.path, model)
        return result.with_ai(outcome.narrative, outcome.confidence)

    def render_report(self, result: FileResult) -> str:
        return render_report(result, self._config)

    def analyze_review(
        self,
        files: Iterable[tuple[str, str | None]],
        *,
        commit_sha: str,
        repository: str,
        author: str,
        title: str | None = None,
    ) -> Review:
        """Analyze every ``(path, content)`` pair into a new Review."""
        review = Review(
            commit_sha=commit_sha, repository=repository, author=author, title=title
        )
        for path, content in files:
            review.add_file(self.analyze_file(path, content))
        _log.info(
            "Review %s of %s: %d files, score %.2f",
            commit_sha,
            repository,
            len(review.files),
            review.score,
        )
        return review

    def render_review_summary(self, review: Review) -> str:
        return render_review_summary(review)

    def list_available_models(self) -> list[str]:
        return self._orchestrator.available_models()

    def get_model_info(self, model_id: str) -> ProviderDescriptor | None:
        return self._orchestrator.get_model_info(model_id)

    async def check_providers_healthy(self) -> bool:
        return await self._orchestrator.check_health()

    async def close(self) -> None:
        await self._orchestrator.close()


def build_engine(settings: Settings | None = None, cwd: str = ".") -> ReviewEngine:
    """Construct the engine from env settings and the merged TOML config."""
    settings = settings or Settings()
    config = EngineConfig.from_sources(settings, load_config(cwd))
    return ReviewEngine(config, AiOrchestrator.from_settings(settings, config))
