"""
Data Contracts for the Admission Engine

Defines Pydantic models for AdmissionProfile (input) and AnalysisResult (output).
These contracts are the API boundary for the admission engine.
"""

from typing import List, Optional
from pydantic import BaseModel, Field
from enum import Enum

from .constants import LetterGrade, CollegeTier, ChanceLabel, ENGINE_VERSION


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class CourseRigor(str, Enum):
    """Self-reported rigor of the student's course load."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very_high"


class HonorLevel(str, Enum):
    SCHOOL = "school"
    DISTRICT = "district"
    STATE = "state"
    NATIONAL = "national"
    INTERNATIONAL = "international"


class Residency(str, Enum):
    IN_STATE = "in-state"
    OUT_OF_STATE = "out-of-state"
    INTERNATIONAL = "international"


class AcademicInfo(BaseModel):
    """
    Academic record as submitted by the form.
    Numeric-looking fields arrive as strings and are parsed defensively.
    """
    gpa: str = ""
    weighted_gpa: str = ""
    sat: str = ""
    act: str = ""
    ap_courses: str = ""
    course_rigor: CourseRigor = CourseRigor.MEDIUM

    class Config:
        use_enum_values = True
        validate_default = True


class Activity(BaseModel):
    """Single extracurricular activity."""
    activity: str = ""
    role: str = ""
    years_involved: str = ""
    hours_per_week: str = ""
    description: str = ""


class Honor(BaseModel):
    """Single honor or award."""
    title: str = ""
    level: HonorLevel = HonorLevel.SCHOOL
    year: str = ""

    class Config:
        use_enum_values = True
        validate_default = True


class AdmissionProfile(BaseModel):
    """
    Input contract for the admission engine.
    Represents one form submission.
    """
    academics: AcademicInfo = Field(default_factory=AcademicInfo)
    extracurriculars: List[Activity] = Field(default_factory=list)
    honors_awards: List[Honor] = Field(default_factory=list)
    colleges: List[str] = Field(default_factory=list)
    major: str = ""
    residency: Optional[Residency] = None

    class Config:
        use_enum_values = True

    def filled_activities(self) -> List[Activity]:
        return [a for a in self.extracurriculars if a.activity.strip()]

    def filled_honors(self) -> List[Honor]:
        return [h for h in self.honors_awards if h.title.strip()]

    def filled_colleges(self) -> List[str]:
        return [c.strip() for c in self.colleges if c.strip()]

    def normalized(self) -> "AdmissionProfile":
        """
        Copy of the profile with empty entries removed.

        Each list keeps a single blank placeholder when every entry is empty,
        so the form can be re-rendered from the stored copy.
        """
        activities = self.filled_activities() or self.extracurriculars[:1]
        honors = self.filled_honors() or self.honors_awards[:1]
        colleges = self.filled_colleges() or self.colleges[:1]
        return self.model_copy(update={
            "extracurriculars": activities,
            "honors_awards": honors,
            "colleges": colleges,
        })


# =============================================================================
# INTERMEDIATE DATA STRUCTURES
# =============================================================================

class ProfileFeatures(BaseModel):
    """
    Flat feature bag derived from an AdmissionProfile.
    Consumed by the graders, the chance calculator, the plan generator and
    the narrative composer.
    """
    gpa: float = 0.0
    weighted_gpa: float = 0.0
    sat: int = 0
    act: int = 0
    ap_courses: int = 0
    course_rigor: str = CourseRigor.MEDIUM.value

    major: str = ""
    residency: Optional[str] = None

    activity_count: int = 0
    award_count: int = 0

    has_leadership_roles: bool = False
    has_long_term_commitment: bool = False
    has_significant_time_commitment: bool = False
    has_major_related_activities: bool = False

    has_national_awards: bool = False
    has_state_awards: bool = False
    has_recent_awards: bool = False
    has_major_related_awards: bool = False


class CategoryGrades(BaseModel):
    """Points and letter grades for each category plus the overall grade."""
    academic_points: float = 0.0
    extracurricular_points: float = 0.0
    awards_points: float = 0.0

    academic: LetterGrade = LetterGrade.D
    extracurricular: LetterGrade = LetterGrade.D
    awards: LetterGrade = LetterGrade.D
    overall: LetterGrade = LetterGrade.D


class CollegeProfile(BaseModel):
    """Classification of a single college name."""
    name: str
    tier: CollegeTier = CollegeTier.TIER4
    is_public: bool = False
    special_fit: Optional[str] = None  # stem/liberal_arts/business


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class AdmissionEstimate(BaseModel):
    """Admission estimate for one college."""
    name: str
    chance: str  # e.g. "Medium (62%)"
    label: ChanceLabel = ChanceLabel.LOW
    percentage: int = Field(default=1, ge=1, le=95)
    color: str
    college_tier: Optional[str] = None
    tier_color: Optional[str] = None
    feedback: str = ""


class AssessmentSection(BaseModel):
    """Per-category narrative section."""
    title: str
    grade: Optional[str] = None
    content: str
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)


class AnalysisResult(BaseModel):
    """
    Output contract for the admission engine.
    """
    overall_assessment: str
    overall_grade: Optional[str] = None
    assessment_sections: List[AssessmentSection] = Field(default_factory=list)
    college_chances: List[AdmissionEstimate] = Field(default_factory=list)
    improvement_plan: List[str] = Field(default_factory=list)

    # Set when the deterministic engine stands in for the hosted AI advisor
    is_fallback_mode: bool = False
    fallback_note: Optional[str] = None

    engine_version: str = ENGINE_VERSION
