"""Searchable, paginated views over the yearly and monthly breakdown."""

from __future__ import annotations

import math
from typing import List, Literal, Sequence, Union

from pydantic import BaseModel, ConfigDict

from sip_backend.core.sip import MonthlyResult, SipResult, YearlyResult

View = Literal["yearly", "monthly"]
Row = Union[YearlyResult, MonthlyResult]


class TablePage(BaseModel):
    model_config = ConfigDict(frozen=True)

    view: View
    rows: List[Row]
    total: int  # rows matching the search, across all pages
    page: int
    pageSize: int
    pages: int


def _row_number(row: Row) -> int:
    return row.year if isinstance(row, YearlyResult) else row.month


def filter_rows(rows: Sequence[Row], search: str = "") -> List[Row]:
    """Keep rows whose year/month number contains the search term verbatim; empty matches all."""
    return [row for row in rows if search in str(_row_number(row))]


def paginate(rows: Sequence[Row], page: int, page_size: int) -> List[Row]:
    start = (page - 1) * page_size
    return list(rows[start : start + page_size])


def table_page(
    result: SipResult,
    view: View = "yearly",
    search: str = "",
    page: int = 1,
    page_size: int = 12,
) -> TablePage:
    """
    Build one page of the breakdown table.

    Pages are 1-based; asking for a page past the end gives an empty row list
    rather than an error so the client can keep its pager state.
    """
    if page < 1 or page_size < 1:
        raise ValueError("page and page_size must be positive")

    source: Sequence[Row] = result.yearlyResults if view == "yearly" else result.monthlyResults
    matched = filter_rows(source, search)

    return TablePage(
        view=view,
        rows=paginate(matched, page, page_size),
        total=len(matched),
        page=page,
        pageSize=page_size,
        pages=math.ceil(len(matched) / page_size),
    )


__all__ = ["TablePage", "filter_rows", "paginate", "table_page"]
