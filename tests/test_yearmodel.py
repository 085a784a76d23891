from datetime import date

import pytest

from lingmoaddons.yearmodel import YearModel


def test_default_year_is_current():
    assert YearModel().year == date.today().year


@pytest.mark.parametrize("year", [1, 2024, -44])
def test_twelve_months(year):
    assert YearModel(year).row_count() == 12


def test_year_zero_has_no_months():
    model = YearModel(0)
    assert model.row_count() == 0
    assert model.data(0) is None
    assert model.month_names() == []


def test_month_names_match_data():
    model = YearModel(2024)
    names = model.month_names()
    assert names == [model.data(row) for row in range(model.row_count())]
    assert len(set(names)) == 12


@pytest.mark.parametrize("row", [-1, 12, 100])
def test_out_of_range_rows(row):
    assert YearModel(2024).data(row) is None


def test_changing_year_updates_rows():
    model = YearModel(2024)
    model.year = 0
    assert model.row_count() == 0
    model.year = 2025
    assert model.row_count() == 12