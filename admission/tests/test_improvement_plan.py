"""
Tests for the improvement plan generator.
"""

from admission.logic import CollegeTier, ProfileFeatures
from admission.logic.features import extract_features
from admission.logic.improvement_plan import (
    generate_improvement_plan,
    college_selection_item,
    major_specific_item,
    APPLICATION_ITEMS,
)

CURRENT_YEAR = 2026


def _tags(plan):
    return [item.split(":", 1)[0] for item in plan]


def test_strong_profile_plan(strong_profile):
    features = extract_features(strong_profile, CURRENT_YEAR)
    plan = generate_improvement_plan(features, [CollegeTier.IVY_PLUS, CollegeTier.TIER4])

    assert _tags(plan) == [
        "EXTRACURRICULAR",
        "HONORS",
        "HONORS",
        "APPLICATION",
        "APPLICATION",
        "COLLEGE SELECTION",
        "MAJOR-SPECIFIC",
    ]
    assert plan[5].startswith("COLLEGE SELECTION: Keep a balanced list")
    assert "GitHub" in plan[6]


def test_empty_profile_plan_is_truncated(empty_profile):
    features = extract_features(empty_profile, CURRENT_YEAR)
    plan = generate_improvement_plan(features)

    assert len(plan) == 10
    assert _tags(plan) == ["ACADEMIC"] * 3 + ["EXTRACURRICULAR"] * 4 + ["HONORS"] + ["APPLICATION"] * 2
    # Truncation keeps rule order
    assert plan[-2:] == list(APPLICATION_ITEMS)


def test_plan_covers_each_weak_category(empty_profile):
    plan = generate_improvement_plan(extract_features(empty_profile, CURRENT_YEAR))
    tags = set(_tags(plan))
    assert {"ACADEMIC", "EXTRACURRICULAR", "HONORS"} <= tags


def test_plan_never_exceeds_ten_items():
    features = ProfileFeatures(gpa=2.0, sat=900, major="Computer Science", award_count=3)
    plan = generate_improvement_plan(features, [CollegeTier.IVY_PLUS])
    assert len(plan) <= 10


def test_low_test_score_asks_for_retake():
    plan = generate_improvement_plan(ProfileFeatures(gpa=3.9, sat=1250, ap_courses=6, course_rigor="high"))
    assert any("retake" in item for item in plan)

    plan = generate_improvement_plan(ProfileFeatures(gpa=3.9, act=32, ap_courses=6, course_rigor="high"))
    assert not any("retake" in item for item in plan)


def test_college_selection_balance():
    assert "target and safety" in college_selection_item([CollegeTier.IVY_PLUS, CollegeTier.TIER1])
    assert "reach schools" in college_selection_item([CollegeTier.TIER4])
    assert "Keep a balanced" in college_selection_item([CollegeTier.TIER1, CollegeTier.TIER3])
    assert "Build a balanced" in college_selection_item([])


def test_major_specific_item():
    assert "robotics" in major_specific_item("Mechanical Engineering")
    assert "lab" in major_specific_item("Biology")
    assert "DECA" in major_specific_item("Business Administration")
    assert major_specific_item("") is None
    assert major_specific_item("Undecided") is None
