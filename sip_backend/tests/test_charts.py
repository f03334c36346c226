from __future__ import annotations

from sip_backend.core.charts import chart_series
from sip_backend.core.sip import SipParams, calculate_sip


def test_series_follow_yearly_rows(default_params):
    result = calculate_sip(default_params)
    series = chart_series(result)

    assert len(series.growth) == len(series.breakdown) == 10
    for point, bar, row in zip(series.growth, series.breakdown, result.yearlyResults):
        assert point.year == bar.year == row.year
        assert point.totalInvestment == row.totalInvestment
        assert point.totalValue == row.totalValue
        assert bar.yearlyInvestment == row.yearlyInvestment
        assert bar.yearlyInterest == row.yearlyInterest


def test_distribution_splits_investment_and_returns(default_params):
    result = calculate_sip(default_params)
    slices = {item.name: item.value for item in chart_series(result).distribution}

    assert slices == {"Investment": result.totalInvestment, "Returns": result.totalInterest}


def test_zero_rate_has_no_returns_slice_value():
    result = calculate_sip(SipParams(monthlyInvestment=500, years=2, expectedReturnRate=0))
    distribution = chart_series(result).distribution

    assert [item.value for item in distribution] == [12000, 0]
