"""
Analysis Runner

Orchestrates one analysis request:
1. Accepts an AdmissionProfile
2. Tries the optional AI advisor
3. Falls back to the deterministic engine on any advisor failure

This is a pure orchestration layer - NO scoring, NO persistence.
"""

import logging
from typing import Optional, TYPE_CHECKING

from .contracts import AdmissionProfile, AnalysisResult
from .engine import AdmissionEngine
from .constants import FALLBACK_NOTE

if TYPE_CHECKING:
    from admission.ai.advisor import AIAdvisor

logger = logging.getLogger(__name__)


def run_analysis(
    profile: AdmissionProfile,
    engine: Optional[AdmissionEngine] = None,
    advisor: Optional["AIAdvisor"] = None
) -> AnalysisResult:
    """
    Produce an AnalysisResult for a profile.

    The advisor is only consulted when it is enabled. Every advisor failure
    (disabled, timeout, non-2xx, malformed payload) yields the deterministic
    result flagged as fallback mode; this function never raises for a valid
    profile.

    Args:
        profile: Validated form submission
        engine: Deterministic engine; a default one is built if omitted
        advisor: Optional hosted-LLM advisor

    Returns:
        AnalysisResult
    """
    engine = engine or AdmissionEngine()
    normalized = profile.normalized()

    if advisor is not None and advisor.enabled:
        result = advisor.get_analysis(normalized)
        if result is not None:
            return result
        logger.warning("AI advisor unavailable, using deterministic analysis")
    else:
        logger.info("AI advisor disabled - using deterministic analysis")

    return engine.analyze(normalized, fallback_note=FALLBACK_NOTE)
