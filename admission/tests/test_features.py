"""
Tests for feature extraction and defensive numeric parsing.
"""

from admission.logic import AdmissionProfile, Activity, Honor
from admission.logic.features import parse_float, parse_int, is_major_related, extract_features

CURRENT_YEAR = 2026


def test_parse_float_reads_leading_number():
    assert parse_float("3.85") == 3.85
    assert parse_float("3.9 unweighted") == 3.9
    assert parse_float(" 4") == 4.0


def test_parse_float_falls_back_to_default():
    assert parse_float("", 3.0) == 3.0
    assert parse_float("n/a", 3.0) == 3.0
    assert parse_float(None, 3.0) == 3.0
    # A zero GPA is treated as missing
    assert parse_float("0", 3.0) == 3.0


def test_parse_int_reads_leading_integer():
    assert parse_int("1500+") == 1500
    assert parse_int("4.6") == 4
    assert parse_int("abc") == 0
    assert parse_int("") == 0


def test_strong_profile_features(strong_profile):
    features = extract_features(strong_profile, CURRENT_YEAR)

    assert features.gpa == 4.0
    assert features.weighted_gpa == 4.6
    assert features.sat == 1550
    assert features.act == 0
    assert features.ap_courses == 10
    assert features.course_rigor == "very_high"
    assert features.residency == "out-of-state"

    assert features.activity_count == 1
    assert features.has_leadership_roles
    assert features.has_long_term_commitment
    assert features.has_significant_time_commitment
    assert features.has_major_related_activities

    assert features.award_count == 1
    assert features.has_national_awards
    assert not features.has_state_awards
    assert features.has_recent_awards
    assert not features.has_major_related_awards


def test_empty_profile_defaults(empty_profile):
    features = extract_features(empty_profile, CURRENT_YEAR)

    assert features.gpa == 3.0
    assert features.sat == 0
    assert features.act == 0
    assert features.course_rigor == "medium"
    assert features.activity_count == 0
    assert features.award_count == 0
    assert not features.has_leadership_roles
    assert not features.has_major_related_activities


def test_leadership_keywords_are_case_insensitive():
    for role in ["Team CAPTAIN", "Co-Founder", "Editor-in-Chief", "Committee Chair", "Stage Manager"]:
        profile = AdmissionProfile(extracurriculars=[Activity(activity="Club", role=role)])
        assert extract_features(profile, CURRENT_YEAR).has_leadership_roles, role

    profile = AdmissionProfile(extracurriculars=[Activity(activity="Club", role="Member")])
    assert not extract_features(profile, CURRENT_YEAR).has_leadership_roles


def test_commitment_thresholds():
    profile = AdmissionProfile(extracurriculars=[
        Activity(activity="Band", years_involved="2", hours_per_week="9"),
    ])
    features = extract_features(profile, CURRENT_YEAR)
    assert not features.has_long_term_commitment
    assert not features.has_significant_time_commitment

    profile = AdmissionProfile(extracurriculars=[
        Activity(activity="Band", years_involved="3", hours_per_week="10"),
    ])
    features = extract_features(profile, CURRENT_YEAR)
    assert features.has_long_term_commitment
    assert features.has_significant_time_commitment


def test_empty_entries_are_not_counted():
    profile = AdmissionProfile(
        extracurriculars=[Activity(activity="  ", role="President", years_involved="4")],
        honors_awards=[Honor(title="", level="national")],
    )
    features = extract_features(profile, CURRENT_YEAR)

    assert features.activity_count == 0
    assert features.award_count == 0
    assert not features.has_leadership_roles
    assert not features.has_national_awards


def test_major_keyword_mapping():
    assert is_major_related("Robotics Team", "Mechanical Engineering")
    assert is_major_related("Hospital research internship", "Biology")
    assert is_major_related("School store - marketing lead", "Business Administration")
    assert is_major_related("Portfolio review", "Studio Art")
    assert is_major_related("Computer Science Olympiad", "Computer Science")
    assert not is_major_related("Varsity Soccer", "Computer Science")
    assert not is_major_related("Varsity Soccer", "")


def test_award_levels_and_recency():
    profile = AdmissionProfile(honors_awards=[
        Honor(title="All-State Orchestra", level="state", year="2023"),
        Honor(title="Honor Roll", level="school", year="2024"),
    ])
    features = extract_features(profile, CURRENT_YEAR)

    assert features.has_state_awards
    assert not features.has_national_awards
    assert features.has_recent_awards

    profile = AdmissionProfile(honors_awards=[
        Honor(title="Science Fair", level="district", year="2020"),
        Honor(title="Spelling Bee", level="school"),
    ])
    assert not extract_features(profile, CURRENT_YEAR).has_recent_awards


def test_normalized_keeps_single_placeholder():
    profile = AdmissionProfile(
        extracurriculars=[Activity(), Activity()],
        honors_awards=[Honor(title="AP Scholar"), Honor()],
        colleges=["", " Yale ", ""],
    )
    normalized = profile.normalized()

    assert len(normalized.extracurriculars) == 1
    assert normalized.extracurriculars[0].activity == ""
    assert [h.title for h in normalized.honors_awards] == ["AP Scholar"]
    assert normalized.colleges == ["Yale"]


def test_normalized_keeps_college_placeholder():
    profile = AdmissionProfile(colleges=["", "  "])
    normalized = profile.normalized()

    assert normalized.colleges == [""]
    assert normalized.filled_colleges() == []
