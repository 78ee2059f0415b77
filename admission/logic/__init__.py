"""
Admission Logic Module

Provides the deterministic scoring engine for college admission analysis.
"""

from .contracts import (
    AdmissionProfile,
    AcademicInfo,
    Activity,
    Honor,
    CourseRigor,
    HonorLevel,
    Residency,
    ProfileFeatures,
    CategoryGrades,
    AdmissionEstimate,
    AssessmentSection,
    AnalysisResult,
)
from .engine import AdmissionEngine, analyze_admission
from .runner import run_analysis
from .constants import LetterGrade, CollegeTier, ChanceLabel

__all__ = [
    # Main engine
    "AdmissionEngine",
    "analyze_admission",
    "run_analysis",

    # Contracts
    "AdmissionProfile",
    "AcademicInfo",
    "Activity",
    "Honor",
    "CourseRigor",
    "HonorLevel",
    "Residency",
    "ProfileFeatures",
    "CategoryGrades",
    "AdmissionEstimate",
    "AssessmentSection",
    "AnalysisResult",

    # Enums
    "LetterGrade",
    "CollegeTier",
    "ChanceLabel",
]
