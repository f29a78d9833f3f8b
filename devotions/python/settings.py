"""Reads runtime settings from environment variables."""

import logging
import os

import pytz

SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_DATA_DIR = os.path.join(SCRIPT_DIR, "..", "data")
DEFAULT_TIMEZONE = "America/New_York"
DEFAULT_LANGUAGE = "en"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_PORT = 8080

SUPPORTED_LANGUAGES = [
    "en",
    "tl",
    "et",
    "es",
    "it",
    "fr",
    "de",
    "pl",
    "ru",
    "nl",
    "pt",
    "sv",
    "ro",
]

logger = logging.getLogger(__name__)


def _get_setting(environment_variable, default):
  """Returns an environment variable, or the default when unset or blank."""
  value = os.getenv(environment_variable)
  if value is None or not value.strip():
    return default
  return value.strip()


def get_data_dir():
  """Directory holding the lectionary, prayer and translation files."""
  return _get_setting("DEVOTIONS_DATA_DIR", DEFAULT_DATA_DIR)


def get_timezone_name():
  """Name of the timezone used to decide what "today" is."""
  return _get_setting("DEVOTIONS_TIMEZONE", DEFAULT_TIMEZONE)


def get_timezone():
  """Returns the configured pytz timezone, falling back to Eastern."""
  tz_str = get_timezone_name()
  try:
    return pytz.timezone(tz_str)
  except pytz.UnknownTimeZoneError:
    logger.warning("Unknown timezone %r, using %s", tz_str, DEFAULT_TIMEZONE)
    return pytz.timezone(DEFAULT_TIMEZONE)


def get_default_language():
  """Language used when a caller does not ask for one."""
  return _get_setting("DEVOTIONS_DEFAULT_LANGUAGE", DEFAULT_LANGUAGE)


def get_log_level():
  return _get_setting("DEVOTIONS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def get_port():
  try:
    return int(_get_setting("PORT", DEFAULT_PORT))
  except ValueError:
    return DEFAULT_PORT
