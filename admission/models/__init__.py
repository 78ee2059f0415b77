# Export all admission models for easy imports
from .base import Base
from .analysis_request import AnalysisRequest

__all__ = [
    "Base",
    "AnalysisRequest",
]
