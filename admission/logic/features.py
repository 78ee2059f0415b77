"""
Feature Extractor

Derives the flat feature bag (ProfileFeatures) from raw form data.
Numeric fields arrive as strings and never raise: unparsable values fall back
to documented defaults.
"""

import re
from datetime import datetime
from enum import Enum
from typing import Iterable, Optional

from .contracts import AdmissionProfile, Activity, Honor, ProfileFeatures
from .constants import (
    DEFAULT_GPA,
    LONG_TERM_YEARS,
    SIGNIFICANT_HOURS_PER_WEEK,
    RECENT_AWARD_WINDOW_YEARS,
    LEADERSHIP_KEYWORDS,
    NATIONAL_LEVELS,
    STATE_LEVELS,
    MAJOR_KEYWORD_MAP,
)

_FLOAT_PREFIX = re.compile(r"^\s*[-+]?(\d+(\.\d*)?|\.\d+)")
_INT_PREFIX = re.compile(r"^\s*[-+]?\d+")


def parse_float(value: Optional[str], default: float = 0.0) -> float:
    """
    Parse the leading number of a string ("3.9 unweighted" -> 3.9).
    Returns ``default`` for missing, unparsable or zero values.
    """
    match = _FLOAT_PREFIX.match(value or "")
    if not match:
        return default
    return float(match.group(0)) or default


def parse_int(value: Optional[str], default: int = 0) -> int:
    """Parse the leading integer of a string ("1500+" -> 1500)."""
    match = _INT_PREFIX.match(value or "")
    if not match:
        return default
    return int(match.group(0)) or default


def _text(value) -> str:
    if isinstance(value, Enum):
        value = value.value
    return (value or "").lower()


def is_major_related(text: str, major: str) -> bool:
    """
    Check whether free text relates to the student's intended major.

    True when the text contains the major itself, or when the major matches
    an entry of MAJOR_KEYWORD_MAP and the text contains one of its keywords.
    """
    major = major.strip().lower()
    if not major:
        return False

    text = text.lower()
    if major in text:
        return True

    for major_key, keywords in MAJOR_KEYWORD_MAP:
        if major_key in major and any(k in text for k in keywords):
            return True
    return False


def _activity_text(activity: Activity) -> str:
    return f"{activity.activity} {activity.description}"


def has_leadership_role(activities: Iterable[Activity]) -> bool:
    return any(
        keyword in _text(a.role)
        for a in activities
        for keyword in LEADERSHIP_KEYWORDS
    )


def extract_features(
    profile: AdmissionProfile,
    current_year: Optional[int] = None
) -> ProfileFeatures:
    """
    Build the feature bag for a profile.

    Args:
        profile: Validated form submission
        current_year: Year used for award recency; defaults to the current year

    Returns:
        ProfileFeatures
    """
    if current_year is None:
        current_year = datetime.now().year

    academics = profile.academics
    activities = profile.filled_activities()
    honors = profile.filled_honors()
    major = profile.major.strip()

    recent_cutoff = current_year - RECENT_AWARD_WINDOW_YEARS

    return ProfileFeatures(
        gpa=parse_float(academics.gpa, DEFAULT_GPA),
        weighted_gpa=parse_float(academics.weighted_gpa),
        sat=parse_int(academics.sat),
        act=parse_int(academics.act),
        ap_courses=parse_int(academics.ap_courses),
        course_rigor=_text(academics.course_rigor) or "medium",

        major=major,
        residency=_text(profile.residency) or None,

        activity_count=len(activities),
        award_count=len(honors),

        has_leadership_roles=has_leadership_role(activities),
        has_long_term_commitment=any(
            parse_float(a.years_involved) >= LONG_TERM_YEARS for a in activities
        ),
        has_significant_time_commitment=any(
            parse_float(a.hours_per_week) >= SIGNIFICANT_HOURS_PER_WEEK for a in activities
        ),
        has_major_related_activities=any(
            is_major_related(_activity_text(a), major) for a in activities
        ),

        has_national_awards=any(_text(h.level) in NATIONAL_LEVELS for h in honors),
        has_state_awards=any(_text(h.level) in STATE_LEVELS for h in honors),
        has_recent_awards=any(
            parse_int(h.year) >= recent_cutoff for h in honors if parse_int(h.year)
        ),
        has_major_related_awards=any(
            is_major_related(h.title, major) for h in honors
        ),
    )
