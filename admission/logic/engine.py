"""
Admission Engine

Main orchestrator that combines all scoring components into a single pipeline.
This is the primary entry point for analysing an admission profile.
"""

import logging
import time
from datetime import datetime
from typing import Optional

from .contracts import AdmissionProfile, AnalysisResult, AdmissionEstimate
from .features import extract_features
from .graders import grade_profile
from .chances import estimate_all, estimate_college
from .tiers import classify_tier
from .improvement_plan import generate_improvement_plan
from .output_assembler import assemble_output
from .constants import ENGINE_VERSION

logger = logging.getLogger(__name__)


class AdmissionEngine:
    """
    Deterministic admission engine.

    Pipeline flow:
    1. Feature Extraction - Derive signals from raw form data
    2. Category Grading - Academic / Extracurricular / Awards letters
    3. Overall Grade - Weighted combination of the three letters
    4. Chance Estimation - Tier, residency and fit per college
    5. Improvement Plan - Ordered rule checklist
    6. Output Assembly - Narrative, sections and final AnalysisResult

    The engine holds no per-request state; one instance can serve
    every request.
    """

    def __init__(self, current_year: Optional[int] = None):
        """
        Initialize the admission engine.

        Args:
            current_year: Year used for award recency. If None, the wall-clock
                year is read on every call.
        """
        self.current_year = current_year
        self.version = ENGINE_VERSION

    def _year(self) -> int:
        return self.current_year if self.current_year is not None else datetime.now().year

    def analyze(
        self,
        profile: AdmissionProfile,
        fallback_note: Optional[str] = None
    ) -> AnalysisResult:
        """
        Analyze one admission profile.

        Args:
            profile: Validated form submission
            fallback_note: Note attached when this result replaces an AI analysis

        Returns:
            AnalysisResult
        """
        start_time = time.perf_counter()

        colleges = profile.filled_colleges()

        # Step 1: Features
        features = extract_features(profile, self._year())

        # Step 2 & 3: Grades
        grades = grade_profile(features)

        # Step 4: Per-college estimates
        estimates = estimate_all(colleges, features, grades)

        # Step 5: Improvement plan
        plan = generate_improvement_plan(
            features,
            [classify_tier(name) for name in colleges],
        )

        # Step 6: Assemble
        result = assemble_output(features, grades, estimates, plan, fallback_note)

        processing_time = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"Analyzed profile: overall={grades.overall.value} colleges={len(colleges)} "
            f"plan_items={len(plan)} in {processing_time:.2f}ms"
        )
        return result

    def analyze_from_dict(self, profile_data: dict, **kwargs) -> AnalysisResult:
        """
        Analyze a profile given as a dictionary.

        Convenience method for API integration.
        """
        profile = AdmissionProfile(**profile_data)
        return self.analyze(profile, **kwargs)

    def estimate_college(
        self,
        profile: AdmissionProfile,
        college: str
    ) -> AdmissionEstimate:
        """
        Estimate the chance at a single college.

        Useful for checking one school without rebuilding the full analysis.
        """
        features = extract_features(profile, self._year())
        grades = grade_profile(features)
        return estimate_college(college.strip(), features, grades)


# Convenience function for simple usage
def analyze_admission(
    profile: AdmissionProfile,
    current_year: Optional[int] = None
) -> AnalysisResult:
    """
    Convenience function to analyze a profile.

    Args:
        profile: Admission profile
        current_year: Optional injected year for recency checks

    Returns:
        AnalysisResult
    """
    engine = AdmissionEngine(current_year)
    return engine.analyze(profile)
