"""
Test the chance calculator with the sample profiles.
"""

from admission.logic import (
    AdmissionProfile,
    CategoryGrades,
    ChanceLabel,
    CollegeTier,
    LetterGrade,
    ProfileFeatures,
)
from admission.logic.contracts import CollegeProfile
from admission.logic.features import extract_features
from admission.logic.graders import grade_profile
from admission.logic.chances import (
    calculate_percentage,
    classify_chance,
    chance_color,
    chance_feedback,
    estimate_college,
    estimate_all,
    residency_adjustment,
)

CURRENT_YEAR = 2026

ALL_GRADES = list(LetterGrade)


def _strong(profile: AdmissionProfile):
    features = extract_features(profile, CURRENT_YEAR)
    return features, grade_profile(features)


def test_harvard_estimate_for_strong_profile(strong_profile):
    features, grades = _strong(strong_profile)
    estimate = estimate_college("Harvard", features, grades)

    # 1 (ivy-plus) + 12 (A+) + 7 (A+) + 1 (B+)
    assert estimate.percentage == 21
    assert estimate.chance == "Low (21%)"
    assert estimate.label == ChanceLabel.LOW
    assert estimate.color == "red-500"
    assert estimate.college_tier == "ivy-plus"
    assert estimate.tier_color == "purple-600"
    assert "Harvard" in estimate.feedback


def test_state_university_estimate_for_strong_profile(strong_profile):
    features, grades = _strong(strong_profile)
    estimate = estimate_college("State University", features, grades)

    # Out-of-state penalty does not apply at tier4
    assert estimate.percentage == 60
    assert estimate.chance == "Medium (60%)"
    assert estimate.color == "yellow-500"
    assert estimate.college_tier == "tier4"
    assert estimate.tier_color == "gray-500"


def test_in_state_bonus_for_public_university(strong_data):
    strong_data["residency"] = "in-state"
    features, grades = _strong(AdmissionProfile(**strong_data))
    estimate = estimate_college("State University", features, grades)

    assert estimate.percentage == 75
    assert estimate.label == ChanceLabel.MEDIUM


def test_residency_adjustment():
    public_tier1 = CollegeProfile(name="University of Michigan", tier=CollegeTier.TIER1, is_public=True)
    private_tier1 = CollegeProfile(name="Northwestern", tier=CollegeTier.TIER1, is_public=False)
    public_tier3 = CollegeProfile(name="Penn State", tier=CollegeTier.TIER3, is_public=True)

    assert residency_adjustment(public_tier1, "in-state") == 15
    assert residency_adjustment(public_tier1, "out-of-state") == -5
    assert residency_adjustment(public_tier1, None) == 0
    assert residency_adjustment(private_tier1, "in-state") == 0
    assert residency_adjustment(public_tier3, "out-of-state") == 0


def test_special_fit_adds_bonus():
    features = ProfileFeatures(gpa=4.0, major="Computer Science")
    plain = CollegeProfile(name="MIT", tier=CollegeTier.IVY_PLUS)
    fit = CollegeProfile(name="MIT", tier=CollegeTier.IVY_PLUS, special_fit="stem")

    grades = CategoryGrades(
        academic=LetterGrade.A_PLUS,
        extracurricular=LetterGrade.A_PLUS,
        awards=LetterGrade.A_PLUS,
    )
    assert calculate_percentage(fit, features, grades) == calculate_percentage(plain, features, grades) + 5


def test_percentage_is_clamped():
    weakest = CategoryGrades(
        academic=LetterGrade.D,
        extracurricular=LetterGrade.D,
        awards=LetterGrade.D,
    )
    ivy = CollegeProfile(name="Harvard", tier=CollegeTier.IVY_PLUS)
    assert calculate_percentage(ivy, ProfileFeatures(), weakest) == 1

    for tier in CollegeTier:
        for academic in ALL_GRADES:
            for extracurricular in ALL_GRADES:
                grades = CategoryGrades(
                    academic=academic,
                    extracurricular=extracurricular,
                    awards=academic,
                )
                college = CollegeProfile(name="x", tier=tier, is_public=True, special_fit="stem")
                percentage = calculate_percentage(college, ProfileFeatures(residency="in-state"), grades)
                assert 1 <= percentage <= 95


def test_label_thresholds():
    assert classify_chance(95) == ChanceLabel.HIGH
    assert classify_chance(80) == ChanceLabel.HIGH
    assert classify_chance(79) == ChanceLabel.MEDIUM
    assert classify_chance(55) == ChanceLabel.MEDIUM
    assert classify_chance(54) == ChanceLabel.LOW
    assert classify_chance(1) == ChanceLabel.LOW


def test_label_and_color_agree_with_percentage(strong_profile, empty_profile):
    for profile in (strong_profile, empty_profile):
        features, grades = _strong(profile)
        for estimate in estimate_all(["Harvard", "Boston University", "Penn State", "Local College"], features, grades):
            assert estimate.label == classify_chance(estimate.percentage)
            assert estimate.chance == f"{estimate.label.value} ({estimate.percentage}%)"
            assert estimate.color == chance_color(estimate.chance)


def test_chance_color_from_text():
    assert chance_color("High (85%)") == "green-500"
    assert chance_color("medium (60%)") == "yellow-500"
    assert chance_color("Low (5%)") == "red-500"
    assert chance_color("") == "red-500"


def test_feedback_bands():
    high = chance_feedback("Harvard", CollegeTier.IVY_PLUS, 20)
    mid = chance_feedback("Harvard", CollegeTier.IVY_PLUS, 10)
    low = chance_feedback("Harvard", CollegeTier.IVY_PLUS, 1)

    assert len({high, mid, low}) == 3
    assert all("Harvard" in text for text in (high, mid, low))
    assert "safety school" in chance_feedback("Local College", CollegeTier.TIER4, 85)


def test_estimates_preserve_input_order(strong_profile):
    features, grades = _strong(strong_profile)
    names = ["State University", "Yale", "Boston College"]
    assert [e.name for e in estimate_all(names, features, grades)] == names
