"""
College Tier Classifier

Classifies a free-text college name into a selectivity tier, flags public
universities, and detects special-fit affinities (STEM, liberal arts,
business school) between a college and the student's major.
"""

from typing import Callable, List, Optional, Tuple

from .contracts import ProfileFeatures, CollegeProfile
from .constants import (
    CollegeTier,
    TIER_LISTS,
    DEFAULT_TIER,
    PUBLIC_UNIVERSITY_MARKERS,
    STEM_FOCUSED_COLLEGES,
    STEM_MAJOR_KEYWORDS,
    LIBERAL_ARTS_COLLEGES,
    LIBERAL_ARTS_MAJOR_KEYWORDS,
    BUSINESS_SCHOOL_COLLEGES,
    BUSINESS_MAJOR_KEYWORDS,
    STEM_FIT_MIN_GPA,
    STEM_FIT_MIN_SAT,
    STEM_FIT_MIN_ACT,
    LIBERAL_ARTS_FIT_MIN_GPA,
    LIBERAL_ARTS_FIT_MIN_ACTIVITIES,
    BUSINESS_FIT_MIN_GPA,
)


def _padded(name: str) -> str:
    return f" {name.strip().lower()} "


def _matches_any(padded_name: str, patterns) -> bool:
    return any(pattern in padded_name for pattern in patterns)


def classify_tier(college: str) -> CollegeTier:
    """
    Assign a selectivity tier by substring match against the static lists.
    First matching tier wins (ivy-plus -> tier1 -> tier2 -> tier3); unmatched
    names default to tier4.
    """
    name = _padded(college)
    for tier, names in TIER_LISTS:
        if _matches_any(name, names):
            return tier
    return DEFAULT_TIER


def is_public_university(college: str) -> bool:
    return _matches_any(_padded(college), PUBLIC_UNIVERSITY_MARKERS)


# =============================================================================
# SPECIAL FIT RULES
# =============================================================================

def _stem_excellence(features: ProfileFeatures) -> bool:
    return (
        features.gpa >= STEM_FIT_MIN_GPA or
        features.sat >= STEM_FIT_MIN_SAT or
        features.act >= STEM_FIT_MIN_ACT
    )


def _liberal_arts_excellence(features: ProfileFeatures) -> bool:
    return (
        features.gpa >= LIBERAL_ARTS_FIT_MIN_GPA and
        (features.has_leadership_roles or features.activity_count >= LIBERAL_ARTS_FIT_MIN_ACTIVITIES)
    )


def _business_excellence(features: ProfileFeatures) -> bool:
    return features.gpa >= BUSINESS_FIT_MIN_GPA and features.has_leadership_roles


# Ordered (fit name, college names, major keywords, excellence gate); first match wins
SPECIAL_FIT_RULES: List[Tuple[str, Tuple[str, ...], Tuple[str, ...], Callable[[ProfileFeatures], bool]]] = [
    ("stem", STEM_FOCUSED_COLLEGES, STEM_MAJOR_KEYWORDS, _stem_excellence),
    ("liberal_arts", LIBERAL_ARTS_COLLEGES, LIBERAL_ARTS_MAJOR_KEYWORDS, _liberal_arts_excellence),
    ("business", BUSINESS_SCHOOL_COLLEGES, BUSINESS_MAJOR_KEYWORDS, _business_excellence),
]


def detect_special_fit(college: str, features: ProfileFeatures) -> Optional[str]:
    """
    Return the name of the first special-fit rule whose college list, major
    keywords and excellence gate all match, or None.
    """
    name = _padded(college)
    major = features.major.lower()
    if not major:
        return None

    for fit, colleges, major_keywords, gate in SPECIAL_FIT_RULES:
        if not _matches_any(name, colleges):
            continue
        if not any(keyword in major for keyword in major_keywords):
            continue
        if gate(features):
            return fit
    return None


def classify_college(college: str, features: ProfileFeatures) -> CollegeProfile:
    """Tier, public flag and special fit for one college."""
    return CollegeProfile(
        name=college,
        tier=classify_tier(college),
        is_public=is_public_university(college),
        special_fit=detect_special_fit(college, features),
    )
