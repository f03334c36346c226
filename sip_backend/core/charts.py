"""Data series for the growth, yearly breakdown and distribution charts."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict

from sip_backend.core.sip import SipResult


class GrowthPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int
    totalInvestment: float
    totalValue: float


class BreakdownPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int
    yearlyInvestment: float
    yearlyInterest: float


class DistributionSlice(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: float


class ChartSeries(BaseModel):
    model_config = ConfigDict(frozen=True)

    growth: List[GrowthPoint]
    breakdown: List[BreakdownPoint]
    distribution: List[DistributionSlice]


def chart_series(result: SipResult) -> ChartSeries:
    """
    Reshape a projection for charting:
      - growth: invested vs. accrued value at each year end (line/area chart)
      - breakdown: each year's contribution vs. return (stacked bars)
      - distribution: total invested vs. total return (pie)
    """
    return ChartSeries(
        growth=[
            GrowthPoint(year=row.year, totalInvestment=row.totalInvestment, totalValue=row.totalValue)
            for row in result.yearlyResults
        ],
        breakdown=[
            BreakdownPoint(
                year=row.year,
                yearlyInvestment=row.yearlyInvestment,
                yearlyInterest=row.yearlyInterest,
            )
            for row in result.yearlyResults
        ],
        distribution=[
            DistributionSlice(name="Investment", value=result.totalInvestment),
            DistributionSlice(name="Returns", value=result.totalInterest),
        ],
    )


__all__ = ["GrowthPoint", "BreakdownPoint", "DistributionSlice", "ChartSeries", "chart_series"]
