"""Service for looking up the daily lectionary."""

import logging
from typing import Optional

import models
import utils

logger = logging.getLogger(__name__)


class Lectionary:
  """Read-only table of ISO date -> LectionaryEntry."""

  def __init__(self, entries: dict):
    self._entries = {}
    for date_str, data in entries.items():
      key = utils.to_iso_key(date_str)
      if key is None:
        logger.warning("Skipping lectionary entry with bad date %r", date_str)
        continue
      if isinstance(data, models.LectionaryEntry):
        self._entries[key] = data
      elif isinstance(data, dict):
        self._entries[key] = models.LectionaryEntry.from_dict(data)
      else:
        logger.warning("Skipping malformed lectionary entry for %s", key)

  @classmethod
  def from_file(cls, filepath: str = utils.LECTIONARY_JSON_PATH):
    data = utils.load_json(filepath, default={})
    if not isinstance(data, dict):
      logger.warning("Lectionary file %s is not a JSON object", filepath)
      data = {}
    lectionary = cls(data)
    logger.info("Loaded %d lectionary entries", len(lectionary))
    return lectionary

  def __len__(self):
    return len(self._entries)

  def __contains__(self, date_value):
    return self.has_entry(date_value)

  def get(self, date_value) -> Optional[models.LectionaryEntry]:
    """Returns the entry for a date (date, datetime or ISO string)."""
    key = utils.to_iso_key(date_value)
    if key is None:
      return None
    return self._entries.get(key)

  def has_entry(self, date_value) -> bool:
    return self.get(date_value) is not None

  def all_dates(self) -> list[str]:
    """All dates with an entry, as sorted ISO strings."""
    return sorted(self._entries)
