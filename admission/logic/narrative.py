"""
Narrative Assessment Composer

Template-driven paragraphs citing each category's letter grade and a small
set of features. Fully determined by the feature bag and the grades.
"""

from typing import List

from .contracts import ProfileFeatures, CategoryGrades, AssessmentSection
from .constants import LetterGrade


def grade_band(grade: LetterGrade) -> str:
    """'A', 'B' or 'other' - the phrasing bands used by every template."""
    letter = grade.value[0]
    return letter if letter in ("A", "B") else "other"


def _or_not_provided(value) -> str:
    return str(value) if value else "Not provided"


def _major_phrase(features: ProfileFeatures) -> str:
    return features.major or "your intended major"


# =============================================================================
# PARAGRAPHS
# =============================================================================

def overall_paragraph(features: ProfileFeatures, grades: CategoryGrades) -> str:
    band = grade_band(grades.overall)
    opening = f"Your overall application profile earns a grade of {grades.overall.value}."
    if band == "A":
        body = (
            " You are a highly competitive applicant whose academics, activities and "
            "recognition reinforce each other. At the most selective institutions, "
            "distinguishing essays will matter as much as credentials."
        )
    elif band == "B":
        body = (
            " You have a solid foundation with clear strengths. Targeted improvements "
            "in your weaker categories would make you competitive at more selective schools."
        )
    else:
        body = (
            " Your profile has strengths to build on, but several areas need attention "
            "before you apply to selective schools. Include a range of selectivity levels on your list."
        )
    return opening + body


def academic_paragraph(features: ProfileFeatures, grades: CategoryGrades) -> str:
    citation = (
        f"GPA: {features.gpa:.2f}, SAT: {_or_not_provided(features.sat)}, "
        f"ACT: {_or_not_provided(features.act)}, AP/IB courses: {features.ap_courses}"
    )
    opening = f"Academically you earn a {grades.academic.value} ({citation})."
    band = grade_band(grades.academic)
    if band == "A":
        body = " Your record shows you can handle a demanding college curriculum."
    elif band == "B":
        body = " Your record is solid; stronger test scores or a more rigorous course load would lift it further."
    else:
        body = " Improving your grades and test scores is the most important step you can take."
    return opening + body


def extracurricular_paragraph(features: ProfileFeatures, grades: CategoryGrades) -> str:
    opening = (
        f"Your extracurricular profile earns a {grades.extracurricular.value} "
        f"across {features.activity_count} activities."
    )
    details: List[str] = []
    if features.has_leadership_roles:
        details.append(" Your leadership roles show initiative and the trust of your peers.")
    else:
        details.append(" Taking on a leadership role would strengthen this part of your application.")
    if features.has_long_term_commitment:
        details.append(" Your multi-year commitment demonstrates genuine dedication.")
    return opening + "".join(details)


def awards_paragraph(features: ProfileFeatures, grades: CategoryGrades) -> str:
    opening = (
        f"Your honors and awards earn a {grades.awards.value} "
        f"with {features.award_count} recognitions."
    )
    if features.has_national_awards:
        body = " National-level recognition sets you apart from most applicants."
    elif features.has_state_awards:
        body = " State-level recognition is a good sign; national competitions are the next step."
    else:
        body = " Competing beyond your school would give admissions readers more evidence of excellence."
    return opening + body


def major_paragraph(features: ProfileFeatures, grades: CategoryGrades) -> str:
    major = _major_phrase(features)
    if features.has_major_related_activities and features.has_major_related_awards:
        return f"Your activities and awards align closely with {major}, which makes your application story coherent."
    if features.has_major_related_activities or features.has_major_related_awards:
        return f"Part of your profile connects to {major}; make that connection explicit in your essays."
    return f"Little of your current profile connects to {major}. Adding related activities would make your interest credible."


NARRATIVE_PARAGRAPHS = [
    overall_paragraph,
    academic_paragraph,
    extracurricular_paragraph,
    awards_paragraph,
    major_paragraph,
]


def compose_narrative(features: ProfileFeatures, grades: CategoryGrades) -> str:
    """Multi-paragraph overall assessment."""
    return "\n\n".join(paragraph(features, grades) for paragraph in NARRATIVE_PARAGRAPHS)


# =============================================================================
# ASSESSMENT SECTIONS
# =============================================================================

def _academic_section(features: ProfileFeatures, grades: CategoryGrades) -> AssessmentSection:
    strengths, weaknesses = [], []
    if features.gpa >= 3.7:
        strengths.append(f"Strong unweighted GPA of {features.gpa:.2f}")
    else:
        weaknesses.append(f"Unweighted GPA of {features.gpa:.2f} is below the 3.7 range")
    if features.sat >= 1400 or features.act >= 31:
        strengths.append("Competitive standardized test score")
    elif features.sat == 0 and features.act == 0:
        weaknesses.append("No standardized test score reported")
    else:
        weaknesses.append("Standardized test score below selective-school ranges")
    if features.ap_courses >= 5:
        strengths.append(f"{features.ap_courses} AP/IB courses")
    else:
        weaknesses.append("Limited AP/IB coursework")
    if features.course_rigor in ("high", "very_high"):
        strengths.append("Rigorous course load")
    return AssessmentSection(
        title="Academic Profile",
        grade=grades.academic.value,
        content=academic_paragraph(features, grades),
        strengths=strengths,
        weaknesses=weaknesses,
    )


def _extracurricular_section(features: ProfileFeatures, grades: CategoryGrades) -> AssessmentSection:
    checks = [
        (features.has_leadership_roles, "Leadership roles", "No leadership roles"),
        (features.has_long_term_commitment, "Long-term commitment (3+ years)", "No long-term commitment"),
        (features.has_significant_time_commitment, "Significant weekly time commitment",
         "Limited weekly time commitment"),
        (features.has_major_related_activities, "Activities related to your major",
         "No activities related to your major"),
    ]
    return AssessmentSection(
        title="Extracurricular Activities",
        grade=grades.extracurricular.value,
        content=extracurricular_paragraph(features, grades),
        strengths=[good for ok, good, _ in checks if ok],
        weaknesses=[bad for ok, _, bad in checks if not ok],
    )


def _awards_section(features: ProfileFeatures, grades: CategoryGrades) -> AssessmentSection:
    checks = [
        (features.has_national_awards, "National or international recognition", "No national-level awards"),
        (features.has_recent_awards, "Recent awards", "No recent awards"),
        (features.has_major_related_awards, "Awards related to your major", "No awards related to your major"),
    ]
    strengths = [good for ok, good, _ in checks if ok]
    if features.has_state_awards:
        strengths.append("State or regional recognition")
    return AssessmentSection(
        title="Honors & Awards",
        grade=grades.awards.value,
        content=awards_paragraph(features, grades),
        strengths=strengths,
        weaknesses=[bad for ok, _, bad in checks if not ok],
    )


def compose_assessment_sections(
    features: ProfileFeatures,
    grades: CategoryGrades
) -> List[AssessmentSection]:
    return [
        _academic_section(features, grades),
        _extracurricular_section(features, grades),
        _awards_section(features, grades),
    ]
