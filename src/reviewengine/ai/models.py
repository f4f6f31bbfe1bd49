"""Result model for AI enrichment requests."""

from __future__ import annotations

from pydantic import BaseModel

from reviewengine.providers.models import ProviderKind


class AiAnalysisResult(BaseModel):
    """Outcome of one orchestrated AI request.

    ``fallback`` results are templated, carry no confidence, and still report
    ``success=True``.
    """

    success: bool
    narrative: str
    confidence: float | None = None
    model: str | None = None
    provider: ProviderKind | None = None
    fallback: bool = False
