import os
import re
import json
import logging
from typing import Dict, Any, List, Optional

import openai
from dotenv import load_dotenv

from admission.logic.contracts import AdmissionProfile, AdmissionEstimate, AnalysisResult
from admission.logic.chances import chance_color, classify_chance
from admission.logic.tiers import classify_tier
from admission.logic.constants import (
    TIER_COLORS,
    MIN_CHANCE_PERCENTAGE,
    MAX_CHANCE_PERCENTAGE,
    MAX_IMPROVEMENT_PLAN_ITEMS,
)
from .prompt_builder import build_system_prompt, build_user_prompt

# Load env vars (if not already loaded)
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_OVERALL_ASSESSMENT = (
    "Based on your profile, you have strengths and areas for improvement in your college application."
)

_PERCENTAGE = re.compile(r"(\d+(?:\.\d+)?)\s*%")


class MalformedAdvisorResponse(ValueError):
    """The advisor returned JSON that does not fit the AnalysisResult contract."""


def _estimate_from_payload(name: str, entry: Dict[str, Any]) -> AdmissionEstimate:
    raw_chance = str(entry.get("chance") or "")
    match = _PERCENTAGE.search(raw_chance)
    if not match:
        raise MalformedAdvisorResponse(f"No percentage in chance for {name!r}: {raw_chance!r}")

    percentage = int(round(float(match.group(1))))
    percentage = max(MIN_CHANCE_PERCENTAGE, min(MAX_CHANCE_PERCENTAGE, percentage))
    label = classify_chance(percentage)
    # The model's own wording is dropped; label follows the percentage
    chance = f"{label.value} ({percentage}%)"
    tier = classify_tier(name)

    return AdmissionEstimate(
        name=name,
        chance=chance,
        label=label,
        percentage=percentage,
        # Never trust colors from the model
        color=chance_color(chance),
        college_tier=tier.value,
        tier_color=TIER_COLORS[tier],
        feedback=str(entry.get("feedback") or ""),
    )


def parse_advisor_payload(payload: Dict[str, Any], colleges: List[str]) -> AnalysisResult:
    """
    Validate advisor JSON and convert it to an AnalysisResult.

    College chances are re-ordered to match ``colleges``; a missing college,
    a chance without a percentage, or a wrongly typed field is malformed.
    """
    if not isinstance(payload, dict):
        raise MalformedAdvisorResponse("Advisor payload is not a JSON object")

    entries = payload.get("collegeChances")
    if not isinstance(entries, list):
        raise MalformedAdvisorResponse("collegeChances missing or not a list")

    by_name = {
        str(entry.get("name", "")).strip().lower(): entry
        for entry in entries
        if isinstance(entry, dict)
    }

    estimates = []
    for name in colleges:
        entry = by_name.get(name.strip().lower())
        if entry is None:
            raise MalformedAdvisorResponse(f"No chance returned for {name!r}")
        estimates.append(_estimate_from_payload(name, entry))

    plan = payload.get("improvementPlan") or []
    if not isinstance(plan, list):
        raise MalformedAdvisorResponse("improvementPlan is not a list")

    return AnalysisResult(
        overall_assessment=str(payload.get("overallAssessment") or DEFAULT_OVERALL_ASSESSMENT),
        college_chances=estimates,
        improvement_plan=[str(item) for item in plan][:MAX_IMPROVEMENT_PLAN_ITEMS],
        is_fallback_mode=False,
    )


class AIAdvisor:
    """
    Optional hosted-LLM admissions advisor.

    Talks to any OpenAI-compatible chat-completions endpoint (DeepSeek by
    default). Disabled unless ADMISSION_AI_ENABLED=1 and an API key is set.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        enabled: Optional[bool] = None,
        client: Optional[Any] = None,
    ):
        self.api_key = api_key or os.getenv("DEEPSEEK_API_KEY")
        if enabled is None:
            enabled = os.getenv("ADMISSION_AI_ENABLED", "0") == "1"

        self.base_url = os.getenv("ADMISSION_AI_BASE_URL", "https://api.deepseek.com/v1")
        self.model = os.getenv("ADMISSION_AI_MODEL", "deepseek-chat")
        self.timeout = float(os.getenv("ADMISSION_AI_TIMEOUT", "30"))
        self.temperature = 0.7

        self.client = client
        if self.client is None and enabled and self.api_key:
            self.client = openai.OpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
                max_retries=0,
            )

        self.enabled = bool(enabled and self.client is not None)

    def get_analysis(self, profile: AdmissionProfile) -> Optional[AnalysisResult]:
        """
        Requests an analysis from the hosted model.
        Returns None if the advisor is disabled or any error occurs.
        """
        if not self.enabled:
            logger.info("AI advisor disabled. Skipping AI analysis.")
            return None

        system_prompt = build_system_prompt()
        user_prompt = build_user_prompt(profile)

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt}
                ],
                temperature=self.temperature,
                response_format={"type": "json_object"}
            )

            content = response.choices[0].message.content
            if not content:
                logger.warning("AI advisor returned an empty response")
                return None

            return parse_advisor_payload(json.loads(content), profile.filled_colleges())

        except openai.APIStatusError as e:
            logger.warning(f"AI advisor returned status {e.status_code}: {e}")
        except openai.APIError as e:
            logger.warning(f"AI advisor request failed: {e}")
        except (json.JSONDecodeError, MalformedAdvisorResponse) as e:
            logger.warning(f"Error parsing AI advisor response: {e}")
        except Exception as e:
            logger.error(f"Unexpected AI advisor error: {e}")
        return None
