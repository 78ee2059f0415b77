"""
Output Assembler

Transforms the engine's intermediate data into the final AnalysisResult
contract.
"""

from typing import List, Optional

from .contracts import (
    ProfileFeatures,
    CategoryGrades,
    AdmissionEstimate,
    AnalysisResult,
)
from .constants import ENGINE_VERSION
from .narrative import compose_narrative, compose_assessment_sections


def assemble_output(
    features: ProfileFeatures,
    grades: CategoryGrades,
    estimates: List[AdmissionEstimate],
    improvement_plan: List[str],
    fallback_note: Optional[str] = None
) -> AnalysisResult:
    """
    Assemble the final AnalysisResult.

    Args:
        features: Extracted feature bag
        grades: Category and overall grades
        estimates: Per-college estimates in input order
        improvement_plan: Ordered, already truncated plan
        fallback_note: Set when this result stands in for the AI advisor

    Returns:
        Complete AnalysisResult
    """
    return AnalysisResult(
        overall_assessment=compose_narrative(features, grades),
        overall_grade=grades.overall.value,
        assessment_sections=compose_assessment_sections(features, grades),
        college_chances=estimates,
        improvement_plan=improvement_plan,
        is_fallback_mode=fallback_note is not None,
        fallback_note=fallback_note,
        engine_version=ENGINE_VERSION,
    )
