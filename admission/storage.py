"""
Analysis Store

Persists analysis requests and their results. Constructed once at application
start and injected into request handlers.
"""

import uuid
import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from db import session_scope
from .models import Base, AnalysisRequest
from .models.analysis_request import utcnow
from .logic.contracts import AdmissionProfile, AnalysisResult

logger = logging.getLogger(__name__)


class AnalysisStore:
    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def create_tables(self, engine: Engine) -> None:
        Base.metadata.create_all(bind=engine)

    def save_request(self, profile: AdmissionProfile, user_id: Optional[int] = None) -> str:
        """Store the submitted form and return its new request id."""
        request_id = uuid.uuid4().hex
        with session_scope(self.session_factory) as db:
            db.add(AnalysisRequest(
                request_id=request_id,
                user_id=user_id,
                form_data=profile.model_dump(mode="json"),
            ))
        return request_id

    def save_result(self, request_id: str, result: AnalysisResult) -> None:
        with session_scope(self.session_factory) as db:
            record = _get_by_request_id(db, request_id)
            if record is None:
                raise KeyError(f"Unknown analysis request: {request_id}")
            record.result_data = result.model_dump(mode="json")
            record.overall_grade = result.overall_grade
            record.is_fallback_mode = result.is_fallback_mode
            record.completed_at = utcnow()
        logger.info(f"Stored analysis result {request_id}")

    def get_result(self, request_id: str) -> Optional[AnalysisResult]:
        with session_scope(self.session_factory) as db:
            record = _get_by_request_id(db, request_id)
            if record is None or record.result_data is None:
                return None
            return AnalysisResult(**record.result_data)

    def get_form_data(self, request_id: str) -> Optional[AdmissionProfile]:
        with session_scope(self.session_factory) as db:
            record = _get_by_request_id(db, request_id)
            if record is None:
                return None
            return AdmissionProfile(**record.form_data)

    def get_user_results(self, user_id: int) -> List[AnalysisResult]:
        with session_scope(self.session_factory) as db:
            records = db.execute(
                select(AnalysisRequest)
                .where(AnalysisRequest.user_id == user_id, AnalysisRequest.completed_at.is_not(None))
                .order_by(AnalysisRequest.created_at)
            ).scalars().all()
            return [AnalysisResult(**r.result_data) for r in records]


def _get_by_request_id(db, request_id: str) -> Optional[AnalysisRequest]:
    return db.execute(
        select(AnalysisRequest).where(AnalysisRequest.request_id == request_id)
    ).scalar_one_or_none()
