from __future__ import annotations

import pytest

from sip_backend.core.sip import calculate_sip
from sip_backend.core.table import filter_rows, table_page


def test_yearly_search_matches_year_digits(default_params):
    result = calculate_sip(default_params)
    rows = filter_rows(result.yearlyResults, "1")

    assert [row.year for row in rows] == [1, 10]


def test_monthly_search_matches_month_digits(default_params):
    result = calculate_sip(default_params)
    rows = filter_rows(result.monthlyResults, "12")

    assert [row.month for row in rows] == [12, 112, 120]


def test_search_term_is_matched_verbatim(default_params):
    result = calculate_sip(default_params)

    assert filter_rows(result.monthlyResults, " 12") == []
    assert filter_rows(result.yearlyResults, "1 ") == []


def test_blank_search_keeps_everything(default_params):
    result = calculate_sip(default_params)

    assert len(filter_rows(result.monthlyResults, "")) == 120
    assert filter_rows(result.yearlyResults, "99") == []


def test_monthly_pages(default_params):
    result = calculate_sip(default_params)

    first = table_page(result, view="monthly", page=1, page_size=12)
    assert first.total == 120
    assert first.pages == 10
    assert [row.month for row in first.rows] == list(range(1, 13))

    last = table_page(result, view="monthly", page=10, page_size=12)
    assert [row.month for row in last.rows] == list(range(109, 121))
    assert last.rows[-1].totalValue == result.finalValue


def test_page_past_the_end_is_empty(default_params):
    result = calculate_sip(default_params)
    page = table_page(result, view="yearly", page=3, page_size=5)

    assert page.rows == []
    assert page.total == 10
    assert page.pages == 2


def test_search_then_paginate(default_params):
    result = calculate_sip(default_params)
    page = table_page(result, view="monthly", search="1", page=2, page_size=10)

    matching = [m.month for m in result.monthlyResults if "1" in str(m.month)]
    assert page.total == len(matching)
    assert [row.month for row in page.rows] == matching[10:20]


@pytest.mark.parametrize("page, page_size", [(0, 10), (1, 0)])
def test_rejects_non_positive_paging(default_params, page, page_size):
    with pytest.raises(ValueError):
        table_page(calculate_sip(default_params), page=page, page_size=page_size)
