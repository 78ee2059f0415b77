"""
Improvement Plan Generator

Rule-based checklist builder. Rules are evaluated top to bottom and each may
append one tagged item; the plan is cut to the first
MAX_IMPROVEMENT_PLAN_ITEMS items without reordering.
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from .contracts import ProfileFeatures
from .constants import (
    CollegeTier,
    MAX_IMPROVEMENT_PLAN_ITEMS,
    PLAN_TARGET_GPA,
    PLAN_TARGET_SAT,
    PLAN_TARGET_ACT,
    PLAN_TARGET_AP_COURSES,
    PLAN_MIN_ACTIVITIES,
    PLAN_MIN_AWARDS,
    REACH_TIERS,
    SAFETY_TIERS,
    MAJOR_SPECIFIC_ADVICE,
)

logger = logging.getLogger(__name__)

PlanRule = Callable[[ProfileFeatures], Optional[str]]


def _major_or_field(features: ProfileFeatures) -> str:
    return features.major or "your intended field"


# =============================================================================
# RULES (ordered)
# =============================================================================

def _rule_gpa(f: ProfileFeatures) -> Optional[str]:
    if f.gpa < PLAN_TARGET_GPA:
        return (
            f"ACADEMIC: Focus on raising your unweighted GPA (currently {f.gpa:.2f}) "
            f"toward {PLAN_TARGET_GPA:g} or higher; an upward grade trend matters to admissions readers."
        )
    return None


def _rule_test_scores(f: ProfileFeatures) -> Optional[str]:
    if f.sat == 0 and f.act == 0:
        return (
            "ACADEMIC: Take the SAT or ACT; submitting a strong score helps at "
            "test-optional schools and is required at others."
        )
    if f.sat < PLAN_TARGET_SAT and f.act < PLAN_TARGET_ACT:
        return (
            f"ACADEMIC: Prepare for a retake of the SAT or ACT with a target of "
            f"{PLAN_TARGET_SAT}+ SAT or {PLAN_TARGET_ACT}+ ACT."
        )
    return None


def _rule_course_load(f: ProfileFeatures) -> Optional[str]:
    if f.ap_courses < PLAN_TARGET_AP_COURSES:
        return (
            f"ACADEMIC: Take more rigorous courses, especially AP/IB classes related to "
            f"{_major_or_field(f)} (aim for at least {PLAN_TARGET_AP_COURSES})."
        )
    if f.course_rigor in ("low", "medium"):
        return "ACADEMIC: Challenge yourself with the most rigorous course load your school offers."
    return None


def _rule_leadership(f: ProfileFeatures) -> Optional[str]:
    if not f.has_leadership_roles:
        return (
            "EXTRACURRICULAR: Seek a leadership position (president, captain, founder, editor) "
            "in an activity you care about to demonstrate initiative."
        )
    return None


def _rule_commitment(f: ProfileFeatures) -> Optional[str]:
    if not f.has_long_term_commitment:
        return (
            "EXTRACURRICULAR: Stay with your strongest activities for three or more years; "
            "long-term commitment reads as genuine interest."
        )
    return None


def _rule_activity_count(f: ProfileFeatures) -> Optional[str]:
    if f.activity_count < PLAN_MIN_ACTIVITIES:
        return (
            f"EXTRACURRICULAR: Participate in more extracurricular activities "
            f"(at least {PLAN_MIN_ACTIVITIES}), ideally ones related to {_major_or_field(f)}."
        )
    return None


def _rule_major_activities(f: ProfileFeatures) -> Optional[str]:
    if not f.has_major_related_activities:
        return (
            f"EXTRACURRICULAR: Add an activity or project that connects directly to "
            f"{_major_or_field(f)} to show sustained interest in the field."
        )
    return None


def _rule_awards(f: ProfileFeatures) -> Optional[str]:
    if f.award_count < PLAN_MIN_AWARDS:
        return (
            "HONORS: Enter academic competitions, contests or scholarship programs "
            "to earn recognition for your work."
        )
    if not f.has_national_awards:
        return "HONORS: Compete at the state and national level to earn broader recognition."
    return None


def _rule_major_awards(f: ProfileFeatures) -> Optional[str]:
    if f.award_count and not f.has_major_related_awards:
        return f"HONORS: Pursue competitions or honors specific to {_major_or_field(f)}."
    return None


PLAN_RULES: List[PlanRule] = [
    _rule_gpa,
    _rule_test_scores,
    _rule_course_load,
    _rule_leadership,
    _rule_commitment,
    _rule_activity_count,
    _rule_major_activities,
    _rule_awards,
    _rule_major_awards,
]

APPLICATION_ITEMS: Tuple[str, ...] = (
    "APPLICATION: Develop a compelling personal statement that shows your passion for your intended major.",
    "APPLICATION: Obtain strong recommendation letters from teachers who know you and your work well.",
)


def college_selection_item(tiers: Sequence[CollegeTier]) -> str:
    """Balance advice for the college list."""
    has_reach = any(t in REACH_TIERS for t in tiers)
    has_safety = any(t in SAFETY_TIERS for t in tiers)
    if not tiers:
        return "COLLEGE SELECTION: Build a balanced list of reach, target and safety schools."
    if has_reach and not has_safety:
        return (
            "COLLEGE SELECTION: Your list is weighted toward highly selective schools; "
            "add several target and safety schools with higher acceptance rates."
        )
    if has_safety and not has_reach:
        return (
            "COLLEGE SELECTION: Consider adding one or two reach schools; "
            "your profile may be stronger than your current list assumes."
        )
    return "COLLEGE SELECTION: Keep a balanced list of reach, target and safety schools."


def major_specific_item(major: str) -> Optional[str]:
    """First MAJOR_SPECIFIC_ADVICE entry whose keywords match the major."""
    major = major.lower()
    if not major:
        return None
    for keywords, advice in MAJOR_SPECIFIC_ADVICE:
        if any(keyword in major for keyword in keywords):
            return advice
    return None


def generate_improvement_plan(
    features: ProfileFeatures,
    college_tiers: Sequence[CollegeTier] = ()
) -> List[str]:
    """
    Build the ordered improvement plan.

    Args:
        features: Student feature bag
        college_tiers: Tiers of the student's target colleges, in input order

    Returns:
        At most MAX_IMPROVEMENT_PLAN_ITEMS tagged strings
    """
    plan: List[str] = []
    for rule in PLAN_RULES:
        item = rule(features)
        if item:
            plan.append(item)

    plan.extend(APPLICATION_ITEMS)
    plan.append(college_selection_item(college_tiers))

    major_item = major_specific_item(features.major)
    if major_item:
        plan.append(major_item)

    if len(plan) > MAX_IMPROVEMENT_PLAN_ITEMS:
        logger.debug(f"Truncating improvement plan from {len(plan)} to {MAX_IMPROVEMENT_PLAN_ITEMS} items")
    return plan[:MAX_IMPROVEMENT_PLAN_ITEMS]
