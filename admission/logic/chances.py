"""
Admission Chance Calculator

Deterministic additive model: tier base rate + residency adjustment +
category grade bonuses + special-fit bonus, clamped to [1, 95] and classified
into Low/Medium/High.
"""

from typing import List

from .contracts import (
    ProfileFeatures,
    CategoryGrades,
    CollegeProfile,
    AdmissionEstimate,
)
from .constants import (
    ChanceLabel,
    CollegeTier,
    TIER_BASE_PERCENTAGE,
    IN_STATE_PUBLIC_BONUS,
    OUT_OF_STATE_PUBLIC_PENALTY,
    OUT_OF_STATE_PENALTY_TIERS,
    ACADEMIC_CHANCE_BONUS,
    EXTRACURRICULAR_CHANCE_BONUS,
    AWARDS_CHANCE_BONUS,
    SPECIAL_FIT_BONUS,
    MIN_CHANCE_PERCENTAGE,
    MAX_CHANCE_PERCENTAGE,
    HIGH_CHANCE_THRESHOLD,
    MEDIUM_CHANCE_THRESHOLD,
    CHANCE_COLORS,
    CHANCE_FEEDBACK_TEMPLATES,
    TIER_COLORS,
)
from .tiers import classify_college


def residency_adjustment(college: CollegeProfile, residency) -> int:
    if not college.is_public:
        return 0
    if residency == "in-state":
        return IN_STATE_PUBLIC_BONUS
    if residency == "out-of-state" and college.tier in OUT_OF_STATE_PENALTY_TIERS:
        return OUT_OF_STATE_PUBLIC_PENALTY
    return 0


def calculate_percentage(
    college: CollegeProfile,
    features: ProfileFeatures,
    grades: CategoryGrades
) -> int:
    """
    Sum every term of the additive model and clamp to [1, 95].

    Args:
        college: Classified college
        features: Student feature bag
        grades: Category grades

    Returns:
        Integer admission percentage
    """
    percentage = TIER_BASE_PERCENTAGE[college.tier]
    percentage += residency_adjustment(college, features.residency)
    percentage += ACADEMIC_CHANCE_BONUS[grades.academic]
    percentage += EXTRACURRICULAR_CHANCE_BONUS[grades.extracurricular]
    percentage += AWARDS_CHANCE_BONUS[grades.awards]
    if college.special_fit:
        percentage += SPECIAL_FIT_BONUS

    return max(MIN_CHANCE_PERCENTAGE, min(MAX_CHANCE_PERCENTAGE, percentage))


def classify_chance(percentage: int) -> ChanceLabel:
    if percentage >= HIGH_CHANCE_THRESHOLD:
        return ChanceLabel.HIGH
    if percentage >= MEDIUM_CHANCE_THRESHOLD:
        return ChanceLabel.MEDIUM
    return ChanceLabel.LOW


def chance_color(chance: str) -> str:
    """
    Color tag for a free-text chance string such as "High (85%)".
    Used to recompute colors on AI advisor output instead of trusting it.
    """
    text = (chance or "").lower()
    if "high" in text:
        return CHANCE_COLORS[ChanceLabel.HIGH]
    if "medium" in text:
        return CHANCE_COLORS[ChanceLabel.MEDIUM]
    return CHANCE_COLORS[ChanceLabel.LOW]


def chance_feedback(college_name: str, tier: CollegeTier, percentage: int) -> str:
    for minimum, template in CHANCE_FEEDBACK_TEMPLATES[tier]:
        if percentage >= minimum:
            return template.format(college=college_name)
    # Templates always end with a 0 band
    return CHANCE_FEEDBACK_TEMPLATES[tier][-1][1].format(college=college_name)


def estimate_college(
    college_name: str,
    features: ProfileFeatures,
    grades: CategoryGrades
) -> AdmissionEstimate:
    """Build the AdmissionEstimate for a single college."""
    college = classify_college(college_name, features)
    percentage = calculate_percentage(college, features, grades)
    label = classify_chance(percentage)

    return AdmissionEstimate(
        name=college_name,
        chance=f"{label.value} ({percentage}%)",
        label=label,
        percentage=percentage,
        color=CHANCE_COLORS[label],
        college_tier=college.tier.value,
        tier_color=TIER_COLORS[college.tier],
        feedback=chance_feedback(college_name, college.tier, percentage),
    )


def estimate_all(
    colleges: List[str],
    features: ProfileFeatures,
    grades: CategoryGrades
) -> List[AdmissionEstimate]:
    """Estimates in the same order as the input colleges."""
    return [estimate_college(name, features, grades) for name in colleges]
