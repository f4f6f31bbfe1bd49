"""AI orchestration: prompt templates, provider dispatch, and fallbacks."""

from __future__ import annotations

from reviewengine.ai.models import AiAnalysisResult
from reviewengine.ai.orchestrator import AiOrchestrator

__all__ = ["AiAnalysisResult", "AiOrchestrator"]
