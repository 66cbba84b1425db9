"""Data contracts for SIP projections."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_FROZEN = ConfigDict(
    frozen=True,
    extra="forbid",
    alias_generator=to_camel,
    populate_by_name=True,
    allow_inf_nan=False,
)


class ProjectionInputs(BaseModel):
    """Inputs required to project a systematic investment plan."""

    model_config = _FROZEN

    monthly_contribution: float = Field(
        ...,
        ge=0,
        description="Amount invested every month.",
    )
    years: int = Field(..., ge=0, description="Investment horizon in whole years.")
    annual_rate_percent: float = Field(
        ...,
        ge=-1200,
        description="Nominal annual return expressed as a percentage (e.g. 12 for 12%).",
    )


class ProjectionResult(BaseModel):
    """Aggregate outcome at the end of the horizon."""

    model_config = _FROZEN

    future_value: int
    total_contribution: int
    total_gain: int


class ProjectionSeriesPoint(BaseModel):
    """Single year mark of the growth series."""

    model_config = _FROZEN

    year: int = Field(..., ge=0)
    cumulative_value: int
    cumulative_contribution: int


class BreakdownSlice(BaseModel):
    """One slice of the investment/returns split."""

    model_config = _FROZEN

    name: str
    value: int


class ProjectionResponse(BaseModel):
    """Everything the calculator widget renders for one set of inputs."""

    model_config = _FROZEN

    inputs: ProjectionInputs
    result: ProjectionResult
    series: List[ProjectionSeriesPoint]
    breakdown: List[BreakdownSlice]
