"""Calculates and provides key dates for the Western Christian liturgical year.

Easter is computed with the anonymous Gregorian algorithm (Meeus/Jones/
Butcher); everything else is derived from Easter or from Christmas. Results
are exact for any Gregorian year (1583 onwards); earlier years are accepted
but follow the proleptic Gregorian calendar.
"""

import datetime

ASH_WEDNESDAY_OFFSET = datetime.timedelta(days=46)
PENTECOST_OFFSET = datetime.timedelta(days=49)


def compute_easter(year: int) -> datetime.date:
  """Calculates the date of Western Easter for a given year."""
  a = year % 19
  b = year // 100
  c = year % 100
  d = b // 4
  e = b % 4
  f = (b + 8) // 25
  g = (b - f + 1) // 3
  h = (19 * a + b - d - g + 15) % 30
  i = c // 4
  k = c % 4
  l = (32 + 2 * e + 2 * i - h - k) % 7
  m = (a + 11 * h + 22 * l) // 451
  month = (h + l - 7 * m + 114) // 31
  day = ((h + l - 7 * m + 114) % 31) + 1
  return datetime.date(year, month, day)


def first_sunday_of_advent(year: int) -> datetime.date:
  """Advent 1 is the fourth Sunday before Christmas Day.

  If Christmas is itself a Sunday, Advent starts exactly four weeks earlier,
  so the result always falls between Nov 27 and Dec 3.
  """
  christmas = datetime.date(year, 12, 25)
  # Sunday = 0 ... Saturday = 6
  days_after_sunday = (christmas.weekday() + 1) % 7
  days_back = 28 if days_after_sunday == 0 else days_after_sunday + 21
  return christmas - datetime.timedelta(days=days_back)


def ash_wednesday(easter: datetime.date) -> datetime.date:
  return easter - ASH_WEDNESDAY_OFFSET


def pentecost(easter: datetime.date) -> datetime.date:
  return easter + PENTECOST_OFFSET


def christmas_window(year: int) -> tuple[datetime.date, datetime.date]:
  """Christmastide starting in `year`: [Dec 25, Jan 6 of the next year)."""
  return datetime.date(year, 12, 25), datetime.date(year + 1, 1, 6)


class ChurchYear:
  """Key dates of the liturgical calendar falling in one civil year.

  All windows are half-open: the start date is inside, the end date is not.
  Every date held here lies inside `year`, so years 1 and 9999 work too.
  """

  def __init__(self, year: int):
    self.year = year
    self.easter_date = compute_easter(year)
    self.ash_wednesday = ash_wednesday(self.easter_date)
    self.pentecost = pentecost(self.easter_date)
    self.advent_start = first_sunday_of_advent(year)
    self.christmas = datetime.date(year, 12, 25)
    # Epiphany that closes the Christmastide begun the previous December.
    self.epiphany = datetime.date(year, 1, 6)

  def __repr__(self):
    return f"ChurchYear({self.year})"

  @property
  def lent(self) -> tuple[datetime.date, datetime.date]:
    return self.ash_wednesday, self.easter_date

  @property
  def eastertide(self) -> tuple[datetime.date, datetime.date]:
    return self.easter_date, self.pentecost

  @property
  def advent(self) -> tuple[datetime.date, datetime.date]:
    return self.advent_start, self.christmas

  def is_christmastide(self, current_date: datetime.date) -> bool:
    """True from Dec 25 through Jan 5. `current_date` must fall in `year`."""
    return current_date >= self.christmas or current_date < self.epiphany

  def get_liturgical_year(self, current_date: datetime.date) -> int:
    """The liturgical year `current_date` belongs to.

    A liturgical year begins on Advent 1 and is named after the civil year in
    which most of it falls, so the days from Advent 1 to Dec 31 belong to the
    following year.
    """
    if isinstance(current_date, datetime.datetime):
      current_date = current_date.date()
    if current_date >= first_sunday_of_advent(current_date.year):
      return current_date.year + 1
    return current_date.year

  def get_week_of_church_year(self, current_date: datetime.date) -> int:
    """Returns week number 1-53 within church year starting Advent 1."""
    if isinstance(current_date, datetime.datetime):
      current_date = current_date.date()
    adv1_this_year = first_sunday_of_advent(current_date.year)
    if current_date >= adv1_this_year:
      start_of_cy = adv1_this_year
    else:
      start_of_cy = first_sunday_of_advent(current_date.year - 1)

    return ((current_date - start_of_cy).days // 7) + 1
