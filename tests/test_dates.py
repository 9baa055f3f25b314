# tests/test_dates.py

from __future__ import annotations

import pytest

from gedcom_lineage.dates.normalizer import MONTHS, extract_year, format_gedcom_date


def test_full_date():
    assert format_gedcom_date("1 JAN 1990") == "01/01/1990"


def test_full_date_two_digit_day():
    assert format_gedcom_date("25 DEC 1901") == "25/12/1901"


def test_month_year():
    assert format_gedcom_date("JUN 1948") == "06/1948"


def test_year_only_passes_through():
    assert format_gedcom_date("1990") == "1990"


@pytest.mark.parametrize("raw", ["ABT 1900", "BET 1800 AND 1810", "1 Jan 1990", "1 XYZ 1990", "Unknown"])
def test_unrecognized_values_pass_through(raw):
    assert format_gedcom_date(raw) == raw


def test_value_is_trimmed():
    assert format_gedcom_date("  3 MAR 1920 ") == "03/03/1920"


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_empty_value_is_no_date(raw):
    assert format_gedcom_date(raw) is None


def test_month_table_is_fixed_twelve_entries():
    assert len(MONTHS) == 12
    assert MONTHS["SEP"] == "09"


def test_extract_year():
    assert extract_year("01/01/1990") == 1990
    assert extract_year("06/1948") == 1948
    assert extract_year("ABT 1900") == 1900
    assert extract_year("Unknown") is None
    assert extract_year(None) is None
