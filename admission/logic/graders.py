"""
Category Graders

Scores the Academic, Extracurricular and Awards categories independently,
maps each point total to a letter grade, and combines the three letters into
an overall grade.
All logic is deterministic - step functions over authored thresholds.
"""

from typing import List, Sequence, Tuple, TypeVar

from .contracts import ProfileFeatures, CategoryGrades
from .constants import (
    LetterGrade,
    GPA_POINTS,
    SAT_POINTS,
    ACT_POINTS,
    NO_TEST_SCORE_PENALTY,
    AP_COURSE_POINTS,
    COURSE_RIGOR_POINTS,
    RIGOR_GAP_RATE,
    RIGOR_GAP_MAX,
    ACADEMIC_GRADE_THRESHOLDS,
    ACTIVITY_COUNT_POINTS,
    LEADERSHIP_BONUS,
    LONG_TERM_BONUS,
    SIGNIFICANT_TIME_BONUS,
    MAJOR_RELATED_ACTIVITY_BONUS,
    EXTRACURRICULAR_GRADE_THRESHOLDS,
    AWARD_COUNT_POINTS,
    NATIONAL_AWARD_BONUS,
    STATE_AWARD_BONUS,
    RECENT_AWARD_BONUS,
    MAJOR_RELATED_AWARD_BONUS,
    AWARDS_GRADE_THRESHOLDS,
    GRADE_NUMERIC_VALUE,
    CATEGORY_WEIGHTS,
    OVERALL_GRADE_THRESHOLDS,
)

T = TypeVar("T", int, float)


def step_value(value: T, table: Sequence[Tuple[T, float]], default: float = 0.0) -> float:
    """Return the points of the first band whose minimum ``value`` reaches."""
    for minimum, points in table:
        if value >= minimum:
            return points
    return default


def points_to_grade(
    points: float,
    thresholds: List[Tuple[float, LetterGrade]]
) -> LetterGrade:
    """Map a point total to a letter; anything below the last band is a D."""
    for minimum, grade in thresholds:
        if points >= minimum:
            return grade
    return LetterGrade.D


def _gpa_band_floor(gpa: float) -> float:
    for minimum, _ in GPA_POINTS:
        if gpa >= minimum:
            return minimum
    return 0.0


def standardized_test_points(sat: int, act: int) -> float:
    """
    Better of the converted SAT and ACT scores.
    Reporting neither costs a point instead of contributing zero.
    """
    if sat <= 0 and act <= 0:
        return NO_TEST_SCORE_PENALTY
    return max(step_value(sat, SAT_POINTS), step_value(act, ACT_POINTS))


def rigor_gap_bonus(gpa: float, weighted_gpa: float) -> float:
    """
    Bonus for the spread between weighted and unweighted GPA.

    Measured from the floor of the student's unweighted GPA band, so that
    raising the unweighted GPA within a band never lowers the bonus.
    """
    if weighted_gpa <= 0:
        return 0.0
    gap = weighted_gpa - _gpa_band_floor(gpa)
    if gap <= 0:
        return 0.0
    return min(RIGOR_GAP_MAX, gap * RIGOR_GAP_RATE)


def score_academic(features: ProfileFeatures) -> float:
    """Academic points: GPA, best test, AP load, course rigor, rigor gap (max 10.5)."""
    points = step_value(features.gpa, GPA_POINTS)
    points += standardized_test_points(features.sat, features.act)
    points += step_value(features.ap_courses, AP_COURSE_POINTS)
    points += COURSE_RIGOR_POINTS.get(features.course_rigor, 0.0)
    points += rigor_gap_bonus(features.gpa, features.weighted_gpa)
    return points


def score_extracurricular(features: ProfileFeatures) -> float:
    """Extracurricular points: activity count plus flat bonuses (max 11)."""
    points = step_value(features.activity_count, ACTIVITY_COUNT_POINTS)
    if features.has_leadership_roles:
        points += LEADERSHIP_BONUS
    if features.has_long_term_commitment:
        points += LONG_TERM_BONUS
    if features.has_significant_time_commitment:
        points += SIGNIFICANT_TIME_BONUS
    if features.has_major_related_activities:
        points += MAJOR_RELATED_ACTIVITY_BONUS
    return points


def score_awards(features: ProfileFeatures) -> float:
    """Awards points: award count plus flat bonuses (max 11)."""
    points = step_value(features.award_count, AWARD_COUNT_POINTS)
    if features.has_national_awards:
        points += NATIONAL_AWARD_BONUS
    if features.has_state_awards:
        points += STATE_AWARD_BONUS
    if features.has_recent_awards:
        points += RECENT_AWARD_BONUS
    if features.has_major_related_awards:
        points += MAJOR_RELATED_AWARD_BONUS
    return points


def combine_grades(
    academic: LetterGrade,
    extracurricular: LetterGrade,
    awards: LetterGrade
) -> LetterGrade:
    """
    Weighted average (50/30/20) of the category grades' numeric values,
    re-quantized to the nearest letter.
    """
    weighted = (
        GRADE_NUMERIC_VALUE[academic] * CATEGORY_WEIGHTS["academic"] +
        GRADE_NUMERIC_VALUE[extracurricular] * CATEGORY_WEIGHTS["extracurricular"] +
        GRADE_NUMERIC_VALUE[awards] * CATEGORY_WEIGHTS["awards"]
    )
    return points_to_grade(round(weighted, 6), OVERALL_GRADE_THRESHOLDS)


def grade_profile(features: ProfileFeatures) -> CategoryGrades:
    """
    Grade all three categories and the overall profile.

    Args:
        features: Extracted feature bag

    Returns:
        CategoryGrades with point totals and letters
    """
    academic_points = round(score_academic(features), 6)
    extracurricular_points = score_extracurricular(features)
    awards_points = score_awards(features)

    academic = points_to_grade(academic_points, ACADEMIC_GRADE_THRESHOLDS)
    extracurricular = points_to_grade(extracurricular_points, EXTRACURRICULAR_GRADE_THRESHOLDS)
    awards = points_to_grade(awards_points, AWARDS_GRADE_THRESHOLDS)

    return CategoryGrades(
        academic_points=academic_points,
        extracurricular_points=extracurricular_points,
        awards_points=awards_points,
        academic=academic,
        extracurricular=extracurricular,
        awards=awards,
        overall=combine_grades(academic, extracurricular, awards),
    )
