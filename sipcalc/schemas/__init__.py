"""Request and response contracts shared by the engine and the API."""

from sipcalc.schemas.projection import (
    BreakdownSlice,
    ProjectionInputs,
    ProjectionResponse,
    ProjectionResult,
    ProjectionSeriesPoint,
)

__all__ = [
    "BreakdownSlice",
    "ProjectionInputs",
    "ProjectionResponse",
    "ProjectionResult",
    "ProjectionSeriesPoint",
]
