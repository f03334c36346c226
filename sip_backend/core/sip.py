from __future__ import annotations

import logging
import math
from typing import List

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


class ProjectionOverflowError(ValueError):
    """A projection whose totals are not finite and cannot be reported."""


class SipParams(BaseModel):
    """Inputs of a systematic investment plan projection.

    No range checks happen here; requests are validated at the API boundary.
    """

    model_config = ConfigDict(frozen=True)

    monthlyInvestment: float
    years: int
    expectedReturnRate: float  # annual percent, 12 means 12%/year


class MonthlyResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    month: int
    investment: float
    interest: float
    totalValue: float


class YearlyResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int
    yearlyInvestment: float
    totalInvestment: float
    yearlyInterest: float
    totalInterest: float
    totalValue: float


class SipResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    totalInvestment: float
    totalInterest: float
    finalValue: float
    monthlyResults: List[MonthlyResult]
    yearlyResults: List[YearlyResult]

    @property
    def years(self) -> float:
        """Horizon in years, derived from the monthly series."""
        return len(self.monthlyResults) / MONTHS_PER_YEAR


def monthly_rate(expected_return_rate: float) -> float:
    """Pro-rate an annual percentage into a monthly decimal rate (not a compounded root)."""
    return expected_return_rate / MONTHS_PER_YEAR / 100


def calculate_sip(params: SipParams) -> SipResult:
    """
    Project a fixed monthly contribution month by month.

    Order of operations (per month):
      1) Add the contribution at the START of the month.
      2) Accrue interest on the balance including that contribution.
      3) Record the month; every 12th month also closes a yearly row.

    Nothing is rounded here; rounding is left to whoever displays the numbers.
    """
    rate = monthly_rate(params.expectedReturnRate)
    total_months = params.years * MONTHS_PER_YEAR
    contribution = float(params.monthlyInvestment)

    total_investment = 0.0
    total_interest = 0.0
    current_value = 0.0

    yearly_investment = 0.0
    yearly_interest = 0.0

    monthly_results: List[MonthlyResult] = []
    yearly_results: List[YearlyResult] = []

    for month in range(1, total_months + 1):
        # exact product, not a running sum
        total_investment = contribution * month
        yearly_investment += contribution

        interest = (current_value + contribution) * rate
        current_value = current_value + contribution + interest

        total_interest += interest
        yearly_interest += interest

        monthly_results.append(
            MonthlyResult(
                month=month,
                investment=contribution,
                interest=interest,
                totalValue=current_value,
            )
        )

        if month % MONTHS_PER_YEAR == 0:
            yearly_results.append(
                YearlyResult(
                    year=month // MONTHS_PER_YEAR,
                    yearlyInvestment=yearly_investment,
                    totalInvestment=total_investment,
                    yearlyInterest=yearly_interest,
                    totalInterest=total_interest,
                    totalValue=current_value,
                )
            )
            yearly_investment = 0.0
            yearly_interest = 0.0

    logger.debug(
        "projected %d months at %.4f%%/month: final value %.2f",
        total_months,
        rate * 100,
        current_value,
    )

    return SipResult(
        totalInvestment=total_investment,
        totalInterest=total_interest,
        finalValue=current_value,
        monthlyResults=monthly_results,
        yearlyResults=yearly_results,
    )


def ensure_finite(result: SipResult) -> SipResult:
    """Return result unchanged, or raise ProjectionOverflowError if any total left the float range."""
    totals = (result.totalInvestment, result.totalInterest, result.finalValue)
    if not all(math.isfinite(value) for value in totals):
        raise ProjectionOverflowError("projection exceeds the representable range")
    return result


__all__ = [
    "MONTHS_PER_YEAR",
    "SipParams",
    "MonthlyResult",
    "YearlyResult",
    "SipResult",
    "monthly_rate",
    "calculate_sip",
    "ProjectionOverflowError",
    "ensure_finite",
]
