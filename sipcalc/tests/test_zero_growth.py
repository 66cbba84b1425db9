from __future__ import annotations

from sipcalc.core.projection import compute_future_value, project, project_series
from sipcalc.schemas.projection import ProjectionInputs


def test_zero_rate_accumulates_contributions_only():
    """
    With a zero return rate the corpus is exactly what was paid in (no growth, no division by zero).
    """
    inputs = ProjectionInputs(monthly_contribution=5000.0, years=10, annual_rate_percent=0.0)

    result = project(inputs)

    assert result.future_value == 600000
    assert result.total_contribution == 600000
    assert result.total_gain == 0


def test_zero_rate_series_tracks_contributions():
    inputs = ProjectionInputs(monthly_contribution=1000.0, years=3, annual_rate_percent=0.0)

    points = list(project_series(inputs))

    assert [point.cumulative_value for point in points] == [0, 12000, 24000, 36000]
    for point in points:
        assert point.cumulative_value == point.cumulative_contribution


def test_negative_zero_rate_takes_the_same_path():
    inputs = ProjectionInputs(monthly_contribution=250.0, years=2, annual_rate_percent=-0.0)

    outcome = compute_future_value(inputs, 24)

    assert outcome.value == outcome.contributed == 6000.0
