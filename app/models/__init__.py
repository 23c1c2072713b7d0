"""Pydantic models package."""

from app.models.summary import (
    ApplySummaryRequest,
    ApplySummaryResponse,
    GenerateSummaryResponse,
    InvocationContext,
    SummaryRequest,
)

__all__ = [
    "InvocationContext",
    "SummaryRequest",
    "GenerateSummaryResponse",
    "ApplySummaryRequest",
    "ApplySummaryResponse",
]
