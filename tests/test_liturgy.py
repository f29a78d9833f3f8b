"""Tests for the church year date calculations."""

import datetime

import pytest

import liturgy


def _knuth_easter(year):
  """Gregorian Easter from Knuth's formulation of the Clavius rules."""
  golden = year % 19 + 1
  century = year // 100 + 1
  leap_skip = 3 * century // 4 - 12
  moon_correction = (8 * century + 5) // 25 - 5
  sunday = 5 * year // 4 - leap_skip - 10
  epact = (11 * golden + 20 + moon_correction - leap_skip) % 30
  if (epact == 25 and golden > 11) or epact == 24:
    epact += 1
  full_moon = 44 - epact
  if full_moon < 21:
    full_moon += 30
  day = full_moon + 7 - ((sunday + full_moon) % 7)
  if day > 31:
    return datetime.date(year, 4, day - 31)
  return datetime.date(year, 3, day)


@pytest.mark.parametrize(
    "year, expected",
    [
        (1818, datetime.date(1818, 3, 22)),
        (1943, datetime.date(1943, 4, 25)),
        (2000, datetime.date(2000, 4, 23)),
        (2019, datetime.date(2019, 4, 21)),
        (2024, datetime.date(2024, 3, 31)),
        (2025, datetime.date(2025, 4, 20)),
        (2026, datetime.date(2026, 4, 5)),
        (2038, datetime.date(2038, 4, 25)),
        (2285, datetime.date(2285, 3, 22)),
    ],
)
def test_compute_easter_known_dates(year, expected):
  assert liturgy.compute_easter(year) == expected


def test_compute_easter_matches_independent_algorithm():
  for year in range(1900, 2100):
    assert liturgy.compute_easter(year) == _knuth_easter(year), year


def test_easter_is_a_sunday_between_march_22_and_april_25():
  for year in range(1583, 2500):
    easter = liturgy.compute_easter(year)
    assert easter.weekday() == 6
    assert datetime.date(year, 3, 22) <= easter <= datetime.date(year, 4, 25)


@pytest.mark.parametrize(
    "year, expected",
    [
        (2022, datetime.date(2022, 11, 27)),  # Christmas on a Sunday
        (2023, datetime.date(2023, 12, 3)),
        (2024, datetime.date(2024, 12, 1)),
        (2025, datetime.date(2025, 11, 30)),
        (2026, datetime.date(2026, 11, 29)),
    ],
)
def test_first_sunday_of_advent(year, expected):
  assert liturgy.first_sunday_of_advent(year) == expected


def test_advent_always_starts_on_a_sunday_in_window():
  for year in range(1900, 2100):
    advent = liturgy.first_sunday_of_advent(year)
    assert advent.weekday() == 6
    assert datetime.date(year, 11, 27) <= advent <= datetime.date(year, 12, 3)


def test_church_year_moveable_dates():
  church_year = liturgy.ChurchYear(2026)
  assert church_year.easter_date == datetime.date(2026, 4, 5)
  assert church_year.ash_wednesday == datetime.date(2026, 2, 18)
  assert church_year.pentecost == datetime.date(2026, 5, 24)
  assert church_year.advent_start == datetime.date(2026, 11, 29)
  assert church_year.christmas == datetime.date(2026, 12, 25)
  assert church_year.epiphany == datetime.date(2026, 1, 6)


def test_church_year_windows_are_ordered():
  for year in range(1900, 2100):
    church_year = liturgy.ChurchYear(year)
    assert church_year.ash_wednesday.weekday() == 2
    assert church_year.pentecost.weekday() == 6
    assert church_year.lent[1] == church_year.eastertide[0]
    assert church_year.eastertide[1] < church_year.advent[0]
    assert church_year.advent[1] == church_year.christmas


def test_christmas_window_spans_new_year():
  assert liturgy.christmas_window(2025) == (
      datetime.date(2025, 12, 25),
      datetime.date(2026, 1, 6),
  )


@pytest.mark.parametrize(
    "day, expected",
    [
        (datetime.date(2026, 11, 28), 2026),
        (datetime.date(2026, 11, 29), 2027),
        (datetime.date(2026, 12, 31), 2027),
        (datetime.date(2027, 1, 1), 2027),
        (datetime.datetime(2026, 12, 1, 23, 30), 2027),
    ],
)
def test_get_liturgical_year(day, expected):
  assert liturgy.ChurchYear(day.year).get_liturgical_year(day) == expected


@pytest.mark.parametrize(
    "day, expected",
    [
        (datetime.date(2026, 11, 29), 1),
        (datetime.date(2026, 12, 5), 1),
        (datetime.date(2026, 12, 6), 2),
        (datetime.date(2026, 1, 1), 5),
        (datetime.date(2026, 11, 28), 52),
    ],
)
def test_get_week_of_church_year(day, expected):
  assert liturgy.ChurchYear(day.year).get_week_of_church_year(day) == expected


@pytest.mark.parametrize(
    "day, expected",
    [
        (datetime.date(2026, 1, 1), True),
        (datetime.date(2026, 1, 5), True),
        (datetime.date(2026, 1, 6), False),
        (datetime.date(2026, 12, 24), False),
        (datetime.date(2026, 12, 25), True),
        (datetime.date(2026, 12, 31), True),
    ],
)
def test_is_christmastide(day, expected):
  assert liturgy.ChurchYear(day.year).is_christmastide(day) is expected


@pytest.mark.parametrize("year", [1, 9999])
def test_church_year_at_the_ends_of_the_date_range(year):
  church_year = liturgy.ChurchYear(year)
  assert church_year.christmas == datetime.date(year, 12, 25)
  assert church_year.epiphany == datetime.date(year, 1, 6)
  assert church_year.advent_start.year == year
