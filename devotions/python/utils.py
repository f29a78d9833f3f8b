"""Shared utility functions and data paths for devotions."""

import datetime
import json
import logging
import os
from typing import Optional

import settings

SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
DATA_DIR = settings.get_data_dir()
LECTIONARY_JSON_PATH = os.path.join(DATA_DIR, "lectionary.json")
PRAYERS_DIR = os.path.join(DATA_DIR, "prayers")
TRANSLATIONS_DIR = os.path.join(DATA_DIR, "translations")

ISO_DATE_FORMAT = "%Y-%m-%d"

logger = logging.getLogger(__name__)


def load_json(filepath: str, default=None):
  """Loads a JSON file, returning `default` if it is missing or malformed."""
  if not os.path.exists(filepath):
    logger.warning("JSON file not found: %s", filepath)
    return default
  try:
    with open(filepath, mode="r", encoding="utf-8") as f:
      return json.load(f)
  except (OSError, json.JSONDecodeError) as e:
    logger.warning("Could not read JSON file %s: %s", filepath, e)
    return default


def list_language_files(directory: str) -> dict[str, str]:
  """Maps language code -> path for every `<lang>.json` in a directory."""
  if not os.path.isdir(directory):
    logger.warning("Directory not found: %s", directory)
    return {}
  files = {}
  for name in sorted(os.listdir(directory)):
    language, ext = os.path.splitext(name)
    if ext == ".json":
      files[language] = os.path.join(directory, name)
  return files


# Calendar dates
#
# A calendar date is a `datetime.date`. It is only ever built from, and taken
# apart into, its year/month/day components. A `datetime.datetime` is reduced
# with `.date()` in its own frame and is never converted through UTC first.


def parse_iso_date(value: str) -> Optional[datetime.date]:
  """Parses `YYYY-MM-DD` into a date, or returns None if it is not one."""
  if not isinstance(value, str):
    return None
  try:
    return datetime.datetime.strptime(value.strip(), ISO_DATE_FORMAT).date()
  except ValueError:
    return None


def format_iso_date(value: datetime.date) -> str:
  """Formats a date as `YYYY-MM-DD` from its calendar components."""
  if isinstance(value, datetime.datetime):
    value = value.date()
  return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def coerce_date(value) -> Optional[datetime.date]:
  """Accepts a date, datetime or ISO string; returns a date or None."""
  if isinstance(value, datetime.datetime):
    return value.date()
  if isinstance(value, datetime.date):
    return value
  if isinstance(value, str):
    return parse_iso_date(value)
  return None


def to_iso_key(value) -> Optional[str]:
  """Normalises any accepted date input into the canonical ISO key."""
  d = coerce_date(value)
  if d is None:
    return None
  return format_iso_date(d)


def get_today(tz=None) -> datetime.date:
  """Returns the civil date it is right now in `tz` (default: settings)."""
  if tz is None:
    tz = settings.get_timezone()
  return datetime.datetime.now(tz).date()


def get_today_iso(tz=None) -> str:
  return format_iso_date(get_today(tz))


def get_next_day(value: datetime.date) -> datetime.date:
  return value + datetime.timedelta(days=1)


def get_previous_day(value: datetime.date) -> datetime.date:
  return value - datetime.timedelta(days=1)


def is_same_day(first, second) -> bool:
  """True when both inputs name the same calendar day."""
  first_key = to_iso_key(first)
  return first_key is not None and first_key == to_iso_key(second)


def get_date_range(
    start_date: datetime.date, end_date: datetime.date
) -> list[datetime.date]:
  """Every date from start to end, inclusive. Empty if end < start."""
  days = (end_date - start_date).days
  return [start_date + datetime.timedelta(days=i) for i in range(days + 1)]


def get_relative_time_string(
    value: datetime.date, base_date: Optional[datetime.date] = None
) -> str:
  """Describes a date relative to base_date, e.g. "Tomorrow" or "3 days ago"."""
  if base_date is None:
    base_date = get_today()
  diff_in_days = (coerce_date(value) - coerce_date(base_date)).days
  if diff_in_days == 0:
    return "Today"
  if diff_in_days == 1:
    return "Tomorrow"
  if diff_in_days == -1:
    return "Yesterday"
  if diff_in_days > 0:
    return f"In {diff_in_days} days"
  return f"{abs(diff_in_days)} days ago"
