"""Data contracts for the SIP calculator endpoints."""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from sip_backend.core.charts import BreakdownPoint, DistributionSlice, GrowthPoint
from sip_backend.core.metrics import SipSummary
from sip_backend.core.sip import MonthlyResult, SipParams, SipResult, YearlyResult
from sip_backend.core.table import TablePage


class SipRequest(BaseModel):
    """Inputs required to project a systematic investment plan."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    monthlyInvestment: float = Field(
        ...,
        ge=0,
        le=1e12,
        description="Contribution made at the start of every month.",
    )
    years: int = Field(..., ge=1, le=100, description="Investment horizon in whole years.")
    expectedReturnRate: float = Field(
        ...,
        ge=-100,
        le=100,
        description="Annual expected return in percent (e.g. 12 for 12%).",
    )
    inflationRate: Optional[float] = Field(
        None,
        gt=-100,
        le=100,
        description="Annual inflation in percent, used for the inflation-adjusted value.",
    )
    requestId: Optional[str] = Field(
        None,
        max_length=64,
        description="Client tag echoed back so the latest of overlapping requests wins.",
    )

    def to_params(self) -> SipParams:
        return SipParams(
            monthlyInvestment=self.monthlyInvestment,
            years=self.years,
            expectedReturnRate=self.expectedReturnRate,
        )


class SuggestionRequest(BaseModel):
    """Goal to reach and the assumptions used to back out a monthly amount."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    goalAmount: float = Field(..., ge=0, le=1e15)
    years: int = Field(..., ge=1, le=100)
    expectedReturnRate: float = Field(..., ge=-100, le=100)


class TableRequest(SipRequest):
    """Projection inputs plus which slice of the breakdown table to return."""

    view: Literal["yearly", "monthly"] = "yearly"
    search: str = Field("", max_length=16)
    page: int = Field(1, ge=1)
    pageSize: Optional[int] = Field(None, ge=1)


class SipResponse(BaseModel):
    """Full month-by-month and year-by-year projection."""

    requestId: Optional[str] = None
    totalInvestment: float
    totalInterest: float
    finalValue: float
    monthlyResults: List[MonthlyResult]
    yearlyResults: List[YearlyResult]

    @classmethod
    def from_result(cls, result: SipResult, request_id: Optional[str] = None) -> "SipResponse":
        return cls(requestId=request_id, **dict(result))


class SummaryResponse(SipSummary):
    requestId: Optional[str] = None


class SuggestionResponse(BaseModel):
    goalAmount: float
    years: int
    expectedReturnRate: float
    suggestedContribution: float


class TableResponse(TablePage):
    requestId: Optional[str] = None


class ChartResponse(BaseModel):
    requestId: Optional[str] = None
    growth: List[GrowthPoint]
    breakdown: List[BreakdownPoint]
    distribution: List[DistributionSlice]


class InputLimit(BaseModel):
    min: float
    max: float
    step: float
    default: float


class LimitsResponse(BaseModel):
    """Bounds, steps and starting values for the calculator form."""

    monthlyInvestment: InputLimit
    years: InputLimit
    expectedReturnRate: InputLimit
