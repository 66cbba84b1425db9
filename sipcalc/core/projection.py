"""SIP projection engine.

Future value of a monthly contribution compounded monthly, annuity-due style:

    FV = P * ((1 + r) ** n - 1) / r * (1 + r)

where ``r`` is the monthly rate and ``n`` the number of elapsed months. The
``(1 + r) ** n - 1`` term is evaluated as ``expm1(n * log1p(r))`` so very small
rates keep their growth. Values stay unrounded inside the engine and are
rounded half-up only when a result model is built.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, List, Mapping, Union

from pydantic import ValidationError

from sipcalc.core.logging import get_logger
from sipcalc.schemas.projection import (
    BreakdownSlice,
    ProjectionInputs,
    ProjectionResponse,
    ProjectionResult,
    ProjectionSeriesPoint,
)

logger = get_logger(__name__)

MONTHS_PER_YEAR = 12

InputsLike = Union[ProjectionInputs, Mapping[str, Any]]


class InvalidProjectionInput(ValueError):
    def __init__(self, errors: List[Any]):
        super().__init__("; ".join(_describe(error) for error in errors))
        self.errors = errors


def _describe(error: Any) -> str:
    if isinstance(error, Mapping):
        location = ".".join(str(part) for part in error.get("loc", ())) or "inputs"
        return f"{location}: {error.get('msg', 'invalid value')}"
    return str(error)


@dataclass(frozen=True)
class FutureValue:
    value: float
    contributed: float


def round_half_up(amount: float) -> int:
    """Round to the nearest integer, ties toward +infinity (JavaScript ``Math.round``)."""
    floored = math.floor(amount)
    # amount - floored is exact, unlike amount + 0.5
    return floored + 1 if amount - floored >= 0.5 else floored


def monthly_rate(annual_rate_percent: float) -> float:
    """Convert a nominal annual percentage into a per-month fraction."""
    return annual_rate_percent / (MONTHS_PER_YEAR * 100)


def coerce_inputs(inputs: InputsLike) -> ProjectionInputs:
    """Validate raw inputs once; already-built models pass straight through."""
    if isinstance(inputs, ProjectionInputs):
        return inputs
    try:
        return ProjectionInputs.model_validate(inputs)
    except ValidationError as exc:
        logger.debug("rejected projection inputs: %s", exc.errors())
        raise InvalidProjectionInput(exc.errors(include_url=False)) from exc


def compute_future_value(inputs: InputsLike, periods_elapsed_months: int) -> FutureValue:
    """Unrounded corpus value and amount contributed after ``periods_elapsed_months``."""
    inputs = coerce_inputs(inputs)
    if (
        isinstance(periods_elapsed_months, bool)
        or not isinstance(periods_elapsed_months, int)
        or periods_elapsed_months < 0
    ):
        raise InvalidProjectionInput(
            [f"periods_elapsed_months must be a non-negative integer, got {periods_elapsed_months!r}"]
        )

    rate = monthly_rate(inputs.annual_rate_percent)
    months = periods_elapsed_months
    try:
        contributed = inputs.monthly_contribution * months
    except OverflowError as exc:
        raise InvalidProjectionInput([f"contributions over {months} months overflow"]) from exc
    if not math.isfinite(contributed):
        raise InvalidProjectionInput([f"contributions over {months} months overflow"])

    # zero rate: the annuity factor divides by zero, growth is nil
    if rate == 0:
        return FutureValue(value=contributed, contributed=contributed)

    try:
        if rate > -1:
            # (1 + r) ** n - 1 without losing r when 1 + r rounds to 1.0
            growth_less_one = math.expm1(months * math.log1p(rate))
        else:
            growth_less_one = (1 + rate) ** months - 1
        value = inputs.monthly_contribution * growth_less_one / rate * (1 + rate)
    except OverflowError as exc:
        raise InvalidProjectionInput([f"projection over {months} months overflows"]) from exc
    if not math.isfinite(value):
        raise InvalidProjectionInput([f"projection over {months} months overflows"])
    return FutureValue(value=value, contributed=contributed)


def project(inputs: InputsLike) -> ProjectionResult:
    """Aggregate result at the end of the full horizon."""
    inputs = coerce_inputs(inputs)
    outcome = compute_future_value(inputs, inputs.years * MONTHS_PER_YEAR)

    future_value = round_half_up(outcome.value)
    total_contribution = round_half_up(outcome.contributed)
    # difference of rounded parts keeps the additive identity exact
    total_gain = future_value - total_contribution

    logger.debug(
        "projected %s months at %s%%: value=%s contributed=%s",
        inputs.years * MONTHS_PER_YEAR,
        inputs.annual_rate_percent,
        future_value,
        total_contribution,
    )
    return ProjectionResult(
        future_value=future_value,
        total_contribution=total_contribution,
        total_gain=total_gain,
    )


class ProjectionSeries(Sequence):
    """
    Year-by-year growth series, ``0..years`` inclusive.

    Points are computed on access, each one directly from the formula for its
    own horizon, so nothing accumulates from one year to the next. Iterating
    again starts from year 0.

    Like ``range``, ``len()`` raises ``OverflowError`` once ``years + 1``
    exceeds ``sys.maxsize``; indexing and iteration still work.
    """

    def __init__(self, inputs: ProjectionInputs):
        self._inputs = inputs

    @property
    def inputs(self) -> ProjectionInputs:
        return self._inputs

    def __len__(self) -> int:
        return self._inputs.years + 1

    def __getitem__(self, index: Union[int, slice]):
        years = range(self._inputs.years + 1)
        if isinstance(index, slice):
            return [self._point(year) for year in years[index]]
        year = years[index]  # raises IndexError when out of range
        return self._point(year)

    def _point(self, year: int) -> ProjectionSeriesPoint:
        outcome = compute_future_value(self._inputs, year * MONTHS_PER_YEAR)
        return ProjectionSeriesPoint(
            year=year,
            cumulative_value=round_half_up(outcome.value),
            cumulative_contribution=round_half_up(outcome.contributed),
        )

    def __repr__(self) -> str:
        return f"ProjectionSeries(years={self._inputs.years})"


def project_series(inputs: InputsLike) -> ProjectionSeries:
    """Lazy growth series with one point per elapsed year."""
    return ProjectionSeries(coerce_inputs(inputs))


def investment_breakdown(result: ProjectionResult) -> List[BreakdownSlice]:
    """Split the final corpus into what was invested and what it earned."""
    return [
        BreakdownSlice(name="Total Investment", value=result.total_contribution),
        BreakdownSlice(name="Total Returns", value=result.total_gain),
    ]


def calculate_sip(inputs: InputsLike) -> ProjectionResponse:
    """Result, series and breakdown for one set of inputs, validated once."""
    inputs = coerce_inputs(inputs)
    result = project(inputs)
    return ProjectionResponse(
        inputs=inputs,
        result=result,
        series=list(project_series(inputs)),
        breakdown=investment_breakdown(result),
    )


__all__ = [
    "MONTHS_PER_YEAR",
    "FutureValue",
    "InvalidProjectionInput",
    "ProjectionSeries",
    "calculate_sip",
    "coerce_inputs",
    "compute_future_value",
    "investment_breakdown",
    "monthly_rate",
    "project",
    "project_series",
    "round_half_up",
]
