"""Functions for classifying dates into liturgical seasons and colors."""

import calendar
import datetime
import logging

import liturgy
import models
import utils

logger = logging.getLogger(__name__)

SEASON_COLORS = {
    models.LiturgicalSeason.ADVENT: models.LiturgicalColor.PURPLE,
    models.LiturgicalSeason.LENT: models.LiturgicalColor.PURPLE,
    models.LiturgicalSeason.CHRISTMAS: models.LiturgicalColor.GOLD,
    models.LiturgicalSeason.EASTER: models.LiturgicalColor.GOLD,
    models.LiturgicalSeason.ORDINARY: models.LiturgicalColor.GREEN,
}


def _in_window(day, window):
  start, end = window
  return start <= day < end


def _classify(day: datetime.date) -> models.LiturgicalSeason:
  church_year = liturgy.ChurchYear(day.year)

  # Christmas before Advent: both windows touch Dec 25.
  if church_year.is_christmastide(day):
    return models.LiturgicalSeason.CHRISTMAS
  if _in_window(day, church_year.advent):
    return models.LiturgicalSeason.ADVENT
  if _in_window(day, church_year.lent):
    return models.LiturgicalSeason.LENT
  # Pentecost itself is outside [Easter, Pentecost) and so is Ordinary.
  if _in_window(day, church_year.eastertide):
    return models.LiturgicalSeason.EASTER
  return models.LiturgicalSeason.ORDINARY


def get_liturgical_season(date_value) -> models.LiturgicalSeason:
  """Determines the liturgical season of a date.

  Args:
    date_value: a date, datetime or `YYYY-MM-DD` string.

  Returns:
    Exactly one LiturgicalSeason. Input that is not a usable date is logged
    and classified as Ordinary rather than raising.
  """
  day = utils.coerce_date(date_value)
  if day is None:
    logger.warning("Cannot classify malformed date %r", date_value)
    return models.LiturgicalSeason.ORDINARY
  return _classify(day)


def get_liturgical_color(season) -> models.LiturgicalColor:
  """Maps a season (enum or its name) to its liturgical color."""
  try:
    season = models.LiturgicalSeason(season)
  except ValueError:
    return models.LiturgicalColor.GREEN
  return SEASON_COLORS[season]


def get_season_info(date_value) -> dict:
  """Season, color and place in the church year, for theme consumers.

  `liturgical_year` and `week` (counted from Advent 1) are None when the
  date is malformed.
  """
  season = get_liturgical_season(date_value)
  info = {
      "season": season.value,
      "color": get_liturgical_color(season).value,
      "liturgical_year": None,
      "week": None,
  }
  day = utils.coerce_date(date_value)
  if day is None:
    return info

  church_year = liturgy.ChurchYear(day.year)
  info["liturgical_year"] = church_year.get_liturgical_year(day)
  try:
    info["week"] = church_year.get_week_of_church_year(day)
  except ValueError:
    # Before Advent 1 of year 1 there is no earlier Advent to count from.
    logger.warning("No church year week for %s", day)
  return info


def generate_calendar_data(year, month, lectionary=None, today=None):
  """Generates calendar data for the given month and year.

  Weeks start on Sunday and include the spill days of the neighbouring
  months, each flagged with `is_current_month`.
  """
  cal = calendar.Calendar(firstweekday=6)  # Sunday first
  month_days = cal.monthdatescalendar(year, month)
  if today is None:
    today = utils.get_today()

  calendar_rows = []
  for week in month_days:
    week_data = []
    for day in week:
      season = get_liturgical_season(day)
      week_data.append({
          "day": day.day,
          "date": utils.format_iso_date(day),
          "season": season.value,
          "color": get_liturgical_color(season).value,
          "has_devotion": (
              lectionary.has_entry(day) if lectionary is not None else False
          ),
          "is_today": day == today,
          "is_current_month": day.month == month,
      })
    calendar_rows.append(week_data)

  return calendar_rows
