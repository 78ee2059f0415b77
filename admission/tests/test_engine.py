"""
Test the admission engine end to end.
"""

from admission.logic import (
    AdmissionEngine,
    AdmissionProfile,
    LetterGrade,
    analyze_admission,
)
from admission.logic.constants import ENGINE_VERSION


def test_strong_profile_analysis(engine, strong_profile):
    result = engine.analyze(strong_profile)

    assert result.overall_grade == LetterGrade.A.value
    assert result.is_fallback_mode is False
    assert result.fallback_note is None
    assert result.engine_version == ENGINE_VERSION

    chances = {c.name: c for c in result.college_chances}
    assert chances["Harvard"].chance == "Low (21%)"
    assert chances["State University"].chance == "Medium (60%)"

    assert len(result.improvement_plan) == 7
    assert len(result.assessment_sections) == 3


def test_empty_profile_never_raises(engine, empty_profile):
    result = engine.analyze(empty_profile)

    assert result.overall_grade == LetterGrade.D.value
    assert result.college_chances == []
    assert len(result.improvement_plan) == 10
    assert result.overall_assessment


def test_garbage_numbers_are_tolerated(engine):
    profile = AdmissionProfile(
        academics={"gpa": "four", "sat": "lots", "act": "-", "ap_courses": "many"},
        extracurriculars=[{"activity": "Chess", "years_involved": "a while", "hours_per_week": "?"}],
        honors_awards=[{"title": "Medal", "year": "last year"}],
        colleges=["Unknown College"],
        major="Undecided",
    )
    result = engine.analyze(profile)

    assert len(result.college_chances) == 1
    assert 1 <= result.college_chances[0].percentage <= 95


def test_analysis_is_idempotent(engine, strong_profile):
    first = engine.analyze(strong_profile)
    second = engine.analyze(strong_profile)
    assert first.model_dump() == second.model_dump()


def test_college_order_and_blank_names(engine, strong_data):
    strong_data["colleges"] = ["  Yale  ", "", "Penn State", "Harvard"]
    result = engine.analyze_from_dict(strong_data)

    assert [c.name for c in result.college_chances] == ["Yale", "Penn State", "Harvard"]


def test_fallback_note_marks_result(engine, strong_profile):
    result = engine.analyze(strong_profile, fallback_note="simulated")
    assert result.is_fallback_mode is True
    assert result.fallback_note == "simulated"


def test_estimate_single_college(engine, strong_profile):
    estimate = engine.estimate_college(strong_profile, " Harvard ")
    assert estimate.name == "Harvard"
    assert estimate.percentage == 21


def test_analyze_admission_helper(strong_profile):
    result = analyze_admission(strong_profile, current_year=2026)
    assert result.model_dump() == AdmissionEngine(current_year=2026).analyze(strong_profile).model_dump()
