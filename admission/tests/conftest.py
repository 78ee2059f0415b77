"""
Shared fixtures for the admission engine tests.
"""

import pytest

from admission.logic import AdmissionProfile, AdmissionEngine

CURRENT_YEAR = 2026


def _strong_profile_data() -> dict:
    """Top-of-scale computer science applicant."""
    return {
        "academics": {
            "gpa": "4.0",
            "weighted_gpa": "4.6",
            "sat": "1550",
            "act": "",
            "ap_courses": "10",
            "course_rigor": "very_high",
        },
        "extracurriculars": [
            {
                "activity": "Coding Club",
                "role": "President",
                "years_involved": "4",
                "hours_per_week": "12",
                "description": "Taught weekly programming workshops",
            },
        ],
        "honors_awards": [
            {"title": "National Merit Scholar", "level": "national", "year": "2025"},
        ],
        "colleges": ["Harvard", "State University"],
        "major": "Computer Science",
        "residency": "out-of-state",
    }


@pytest.fixture
def strong_data() -> dict:
    return _strong_profile_data()


@pytest.fixture
def strong_profile(strong_data) -> AdmissionProfile:
    return AdmissionProfile(**strong_data)


@pytest.fixture
def empty_profile() -> AdmissionProfile:
    return AdmissionProfile()


@pytest.fixture
def engine() -> AdmissionEngine:
    return AdmissionEngine(current_year=CURRENT_YEAR)
