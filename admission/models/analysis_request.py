from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Boolean, DateTime, JSON

from .base import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AnalysisRequest(Base):
    __tablename__ = "analysis_requests"

    id = Column(Integer, primary_key=True)
    request_id = Column(String(64), unique=True, index=True, nullable=False)
    user_id = Column(Integer, nullable=True)

    # Payloads
    form_data = Column(JSON, nullable=False)
    result_data = Column(JSON, nullable=True)

    # Summary
    overall_grade = Column(String(4))
    is_fallback_mode = Column(Boolean, default=False, nullable=False)

    # Meta
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    completed_at = Column(DateTime(timezone=True), nullable=True)
