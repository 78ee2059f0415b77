from typing import List

from admission.logic.contracts import AdmissionProfile, Activity, Honor
from .advisor_rules import ADVISOR_RULES, SYSTEM_ROLE_DEFINITION, JSON_OUTPUT_FORMAT_INSTRUCTION

NOT_PROVIDED = "Not provided"


def build_system_prompt() -> str:
    """Constructs the static system prompt."""
    rules_str = "\n".join([f"- {rule}" for rule in ADVISOR_RULES])

    return f"""{SYSTEM_ROLE_DEFINITION}

RULES (NON-NEGOTIABLE):
{rules_str}

OUTPUT FORMAT:
{JSON_OUTPUT_FORMAT_INSTRUCTION}
"""


def _format_activities(activities: List[Activity]) -> str:
    if not activities:
        return "None listed"
    lines = []
    for index, ec in enumerate(activities, 1):
        lines.append(
            f"{index}. {ec.activity} - {ec.role or 'Role not specified'} "
            f"({ec.years_involved or '?'} years, {ec.hours_per_week or '?'} hrs/week)\n"
            f"     {ec.description or 'No description provided'}"
        )
    return "\n".join(lines)


def _format_honors(honors: List[Honor]) -> str:
    if not honors:
        return "None listed"
    return "\n".join(
        f"{index}. {award.title} ({award.level} level, Year: {award.year or 'Not specified'})"
        for index, award in enumerate(honors, 1)
    )


def build_user_prompt(profile: AdmissionProfile) -> str:
    """
    Constructs the user prompt by concatenating every profile field into a
    fixed template.
    """
    academics = profile.academics

    user_content = f"""
Please analyze this student's profile for college admissions and provide feedback in JSON format:

ACADEMIC INFORMATION:
- Unweighted GPA: {academics.gpa or NOT_PROVIDED}
- Weighted GPA: {academics.weighted_gpa or NOT_PROVIDED}
- SAT Score: {academics.sat or NOT_PROVIDED}
- ACT Score: {academics.act or NOT_PROVIDED}
- AP/IB Courses: {academics.ap_courses or NOT_PROVIDED}
- Course Rigor: {academics.course_rigor}

EXTRACURRICULAR ACTIVITIES:
{_format_activities(profile.filled_activities())}

HONORS & AWARDS:
{_format_honors(profile.filled_honors())}

COLLEGES OF INTEREST:
{", ".join(profile.filled_colleges())}

INTENDED MAJOR:
{profile.major}

RESIDENCY:
{profile.residency or NOT_PROVIDED}
"""
    return user_content
