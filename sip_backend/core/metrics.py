"""Summary statistics computed on top of a finished SIP projection."""

from __future__ import annotations

import logging
import math
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from sip_backend.core.sip import MONTHS_PER_YEAR, SipResult, monthly_rate

logger = logging.getLogger(__name__)


class MetricError(ValueError):
    """A metric's formula is undefined for the given projection or inputs."""

    def __init__(self, metric: str, reason: str):
        super().__init__(f"cannot compute {metric}: {reason}")
        self.metric = metric
        self.reason = reason


class SipSummary(BaseModel):
    """Headline figures for a projection; a metric is None when it cannot be computed."""

    model_config = ConfigDict(frozen=True)

    totalInvestment: float
    totalInterest: float
    finalValue: float
    growthRate: Optional[float] = None
    wealthGain: Optional[float] = None
    inflationRate: Optional[float] = None
    inflationAdjustedValue: Optional[float] = None
    unavailable: Dict[str, str] = Field(default_factory=dict)


def _finite(metric: str, value: float) -> float:
    if not math.isfinite(value):
        raise MetricError(metric, "result is not a finite number")
    return value


def _value_ratio(metric: str, result: SipResult) -> float:
    if result.totalInvestment <= 0:
        raise MetricError(metric, "total investment is zero")
    ratio = result.finalValue / result.totalInvestment
    if ratio <= 0:
        raise MetricError(metric, "final value is not positive")
    return ratio


def growth_rate(result: SipResult) -> float:
    """
    Annualized growth in percent, CAGR-style: (FV / invested) ** (1 / years) - 1.

    This is only an approximation for a SIP since the money goes in
    month by month rather than as one lump sum at the start.
    """
    years = result.years
    if years <= 0:
        raise MetricError("growthRate", "projection covers no months")
    ratio = _value_ratio("growthRate", result)
    return _finite("growthRate", (ratio ** (1 / years) - 1) * 100)


def wealth_gain(result: SipResult) -> float:
    """Percent gain of the final value over everything invested."""
    ratio = _value_ratio("wealthGain", result)
    return _finite("wealthGain", (ratio - 1) * 100)


def inflation_adjusted_value(result: SipResult, inflation_rate: float) -> float:
    """Final value deflated to today's money at a constant annual inflation percent."""
    if inflation_rate <= -100:
        raise MetricError("inflationAdjustedValue", "inflation rate must be above -100%")
    try:
        deflator = (1 + inflation_rate / 100) ** result.years
    except OverflowError as exc:
        raise MetricError("inflationAdjustedValue", "inflation factor overflows") from exc
    return _finite("inflationAdjustedValue", result.finalValue / deflator)


def suggested_contribution(goal_amount: float, years: int, expected_return_rate: float) -> float:
    """
    Monthly contribution that reaches goal_amount after `years`.

    Inverse of the annuity-due future value:
        PMT = FV / (((1 + r) ** n - 1) / r * (1 + r))
    rounded up to a whole currency unit. With a zero rate the annuity is
    undefined and the goal is simply spread evenly over the months.
    """
    months = int(years * MONTHS_PER_YEAR)
    if months <= 0:
        raise MetricError("suggestedContribution", "horizon must be at least one month")

    rate = monthly_rate(expected_return_rate)
    if rate == 0:
        return goal_amount / months

    try:
        denominator = ((1 + rate) ** months - 1) / rate * (1 + rate)
    except OverflowError as exc:
        raise MetricError("suggestedContribution", "annuity factor overflows") from exc
    if denominator == 0 or not math.isfinite(denominator):
        raise MetricError("suggestedContribution", "annuity factor is degenerate")
    return _finite("suggestedContribution", float(math.ceil(goal_amount / denominator)))


def summarize(result: SipResult, inflation_rate: Optional[float] = None) -> SipSummary:
    """Collect totals and metrics, recording why any metric was left out."""
    values: Dict[str, Optional[float]] = {}
    unavailable: Dict[str, str] = {}

    metrics = {
        "growthRate": lambda: growth_rate(result),
        "wealthGain": lambda: wealth_gain(result),
    }
    if inflation_rate is not None:
        metrics["inflationAdjustedValue"] = lambda: inflation_adjusted_value(result, inflation_rate)

    for name, compute in metrics.items():
        try:
            values[name] = compute()
        except MetricError as exc:
            logger.info("%s", exc)
            values[name] = None
            unavailable[name] = exc.reason

    return SipSummary(
        totalInvestment=result.totalInvestment,
        totalInterest=result.totalInterest,
        finalValue=result.finalValue,
        inflationRate=inflation_rate,
        unavailable=unavailable,
        **values,
    )


__all__ = [
    "MetricError",
    "SipSummary",
    "growth_rate",
    "wealth_gain",
    "inflation_adjusted_value",
    "suggested_contribution",
    "summarize",
]
