import pytest

from app.core.dates import is_date_valid, is_leap


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2000-02-29", True),
        ("1900-02-29", False),
        ("2024-02-29", True),
        ("2023-02-29", False),
        ("2023-02-28", True),
    ],
)
def test_leap_year_february(text, expected):
    assert is_date_valid(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1799-01-01", False),
        ("1799-12-31", False),
        ("1800-01-01", True),
        ("9999-12-31", True),
        ("10000-01-01", False),
    ],
)
def test_year_bounds(text, expected):
    assert is_date_valid(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2021-04-31", False),
        ("2021-04-30", True),
        ("2021-06-31", False),
        ("2021-09-31", False),
        ("2021-11-31", False),
        ("2021-01-31", True),
        ("2021-12-31", True),
        ("2021-01-32", False),
        ("2021-01-00", False),
        ("2021-00-10", False),
        ("2021-13-10", False),
    ],
)
def test_month_and_day_ranges(text, expected):
    assert is_date_valid(text) is expected


@pytest.mark.parametrize(
    "text",
    [
        "",
        "2021-1-1",
        "2021/01/01",
        "20210101xx",
        "2021-01-0a",
        "abcd-01-01",
        "2021-01--1",
        "+021-01-01",
        "2021-01-01 ",
        "２０２１-01-01",
        "-2021-01-1",
    ],
)
def test_malformed_input_is_invalid_not_an_error(text):
    assert is_date_valid(text) is False


def test_non_string_input_is_invalid():
    assert is_date_valid(None) is False
    assert is_date_valid(20000101) is False


def test_same_input_same_answer():
    assert [is_date_valid("2000-02-29") for _ in range(3)] == [True, True, True]


def test_is_leap():
    assert is_leap(2000)
    assert is_leap(2024)
    assert not is_leap(1900)
    assert not is_leap(2023)
