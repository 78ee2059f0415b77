"""
Admission API Routes

Exposes the admission engine via REST API.
Main endpoint: POST /admission/analyze
"""

import logging
from typing import Optional, List, Dict, Any
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from .logic.contracts import AdmissionProfile, AcademicInfo
from .logic.engine import AdmissionEngine
from .logic.runner import run_analysis
from .logic.constants import ENGINE_VERSION
from .storage import AnalysisStore
from .ai.advisor import AIAdvisor

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admission", tags=["admission"])


# =============================================================================
# REQUEST/RESPONSE SCHEMAS
# =============================================================================

class RequiredAcademicInfo(AcademicInfo):
    gpa: str = Field(..., min_length=1, description="GPA is required")


class AdmissionForm(AdmissionProfile):
    """Boundary validation for a submitted form: GPA and major are required."""
    academics: RequiredAcademicInfo
    major: str = Field(..., min_length=1, description="Major is required")


class AnalysisRequestBody(BaseModel):
    """Request body for the analyze endpoint."""
    form_data: Dict[str, Any] = Field(
        ...,
        description="Admission form data",
        json_schema_extra={
            "example": {
                "academics": {"gpa": "3.9", "sat": "1500", "ap_courses": "8", "course_rigor": "high"},
                "extracurriculars": [{"activity": "Robotics Club", "role": "Captain", "years_involved": "3"}],
                "honors_awards": [{"title": "AP Scholar", "level": "national", "year": "2025"}],
                "colleges": ["Stanford University", "University of Michigan"],
                "major": "Computer Science",
                "residency": "out-of-state",
            }
        },
    )
    user_id: Optional[int] = None


def _field_errors(error) -> List[Dict[str, str]]:
    """Flatten pydantic or FastAPI validation errors into {path, message} items."""
    errors = []
    for err in error.errors():
        loc = list(err["loc"])
        # FastAPI prefixes request-body locations with "body"
        if loc and loc[0] == "body":
            loc = loc[1:]
        errors.append({"path": ".".join(str(part) for part in loc), "message": err["msg"]})
    return errors


def _validation_error_response(error) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "message": "Validation error",
            "errors": _field_errors(error),
        },
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies with the same 400 envelope as form errors."""
    logger.info(f"Rejected request to {request.url.path}: {len(exc.errors())} validation errors")
    return _validation_error_response(exc)


# =============================================================================
# DEPENDENCIES
# =============================================================================

def get_store(request: Request) -> AnalysisStore:
    return request.app.state.store


def get_engine(request: Request) -> AdmissionEngine:
    return request.app.state.engine


def get_advisor(request: Request) -> Optional[AIAdvisor]:
    return getattr(request.app.state, "advisor", None)


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("/analyze", summary="Analyze admission chances")
def analyze_admission(
    body: AnalysisRequestBody,
    store: AnalysisStore = Depends(get_store),
    engine: AdmissionEngine = Depends(get_engine),
    advisor: Optional[AIAdvisor] = Depends(get_advisor),
):
    """
    Grade a student profile and estimate admission chances per college.

    **Request Body:**
    - `form_data`: academics, extracurriculars, honors/awards, colleges, major, residency
    - `user_id`: Optional owner of the stored result

    **Response:**
    - Overall narrative and per-category assessment sections
    - One chance estimate per college, in input order
    - Improvement plan (at most 10 items)
    """
    try:
        profile = AdmissionForm(**body.form_data)
    except ValidationError as e:
        return _validation_error_response(e)

    try:
        request_id = store.save_request(profile, user_id=body.user_id)
        result = run_analysis(profile, engine=engine, advisor=advisor)
        store.save_result(request_id, result)

        return {
            "success": True,
            "request_id": request_id,
            "result": result.model_dump(mode="json"),
            "note": result.fallback_note,
        }
    except Exception as e:
        logger.exception(f"Unexpected error analyzing admission profile: {e}")
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "An unexpected error occurred"},
        )


@router.get("/results/{request_id}", summary="Fetch a stored analysis result")
def get_result(request_id: str, store: AnalysisStore = Depends(get_store)):
    result = store.get_result(request_id)
    if result is None:
        raise HTTPException(status_code=404, detail="Analysis result not found")
    return {"success": True, "request_id": request_id, "result": result.model_dump(mode="json")}


@router.get("/users/{user_id}/results", summary="List a user's stored analysis results")
def get_user_results(user_id: int, store: AnalysisStore = Depends(get_store)):
    results = store.get_user_results(user_id)
    return {
        "success": True,
        "count": len(results),
        "results": [r.model_dump(mode="json") for r in results],
    }


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Admission engine health check")
def health_check(advisor: Optional[AIAdvisor] = Depends(get_advisor)):
    """Check if admission engine is operational."""
    return {
        "status": "ok",
        "engine": "admission",
        "version": ENGINE_VERSION,
        "ai_advisor_enabled": bool(advisor and advisor.enabled),
    }
