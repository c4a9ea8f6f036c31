"""
Pydantic schemas for the ad analyzer API.
"""
from ad_analyzer.schemas.analysis import (
    AnalysisResult,
    AnalyzeAdRequest,
    AnalyzeErrorResponse,
    ImageSignals,
)

__all__ = [
    "AnalysisResult",
    "AnalyzeAdRequest",
    "AnalyzeErrorResponse",
    "ImageSignals",
]
