"""Data models for the liturgical calendar and daily devotions."""

import dataclasses
import enum
from typing import Optional


class LiturgicalSeason(str, enum.Enum):
  """Seasons of the church year recognised by the calendar."""

  ADVENT = "Advent"
  CHRISTMAS = "Christmas"
  LENT = "Lent"
  EASTER = "Easter"
  ORDINARY = "Ordinary"


class LiturgicalColor(str, enum.Enum):
  """Liturgical color keywords.

  RED and WHITE belong to feast-day overrides, which the calendar does not
  compute; no season maps to them.
  """

  PURPLE = "purple"
  GOLD = "gold"
  GREEN = "green"
  RED = "red"
  WHITE = "white"


class TimeOfDay(str, enum.Enum):
  MORNING = "morning"
  NOON = "noon"
  EVENING = "evening"
  FAMILY = "family"


class DevotionReadingType(str, enum.Enum):
  FIRST_READING = "first_reading"
  PSALM = "psalm"
  SECOND_READING = "second_reading"
  GOSPEL = "gospel"


@dataclasses.dataclass(frozen=True)
class LectionaryEntry:
  """The four scripture references appointed for one date."""

  first_reading: str = ""
  psalm: str = ""
  second_reading: str = ""
  gospel: str = ""

  @classmethod
  def from_dict(cls, data: dict) -> "LectionaryEntry":
    """Builds an entry from a lectionary JSON record.

    Accepts the camelCase keys used by the data files as well as snake_case.
    Missing or null references become empty strings.
    """

    def _ref(*names):
      for name in names:
        value = data.get(name)
        if value:
          return str(value).strip()
      return ""

    return cls(
        first_reading=_ref("firstReading", "first_reading"),
        psalm=_ref("psalm"),
        second_reading=_ref("secondReading", "second_reading"),
        gospel=_ref("gospel"),
    )

  def is_complete(self) -> bool:
    return all(
        [self.first_reading, self.psalm, self.second_reading, self.gospel]
    )


@dataclasses.dataclass(frozen=True)
class DevotionSection:
  """One displayable unit of an office (a prayer, a reading, a canticle)."""

  key: str
  title: str
  content: str
  reference: Optional[str] = None
  rubric: Optional[str] = None
  response: Optional[str] = None

  def to_dict(self) -> dict:
    data = {"key": self.key, "title": self.title, "content": self.content}
    for name in ("reference", "rubric", "response"):
      value = getattr(self, name)
      if value is not None:
        data[name] = value
    return data


@dataclasses.dataclass(frozen=True)
class DevotionReading:
  label: str
  reference: str
  text: str
  type: DevotionReadingType

  def to_dict(self) -> dict:
    return {
        "label": self.label,
        "reference": self.reference,
        "text": self.text,
        "type": self.type.value,
    }


@dataclasses.dataclass(frozen=True)
class DailyDevotion:
  """A complete office for one date, time of day and language."""

  id: str
  date: str
  time_of_day: str
  title: str
  language: str
  sections: tuple[DevotionSection, ...]
  readings: tuple[DevotionReading, ...]
  liturgical_season: LiturgicalSeason

  def to_dict(self) -> dict:
    return {
        "id": self.id,
        "date": self.date,
        "time_of_day": self.time_of_day,
        "title": self.title,
        "language": self.language,
        "sections": [section.to_dict() for section in self.sections],
        "readings": [reading.to_dict() for reading in self.readings],
        "liturgical_season": self.liturgical_season.value,
    }


@dataclasses.dataclass(frozen=True)
class DevotionDay:
  """All offices for a date. A missing office is None."""

  date: str
  morning: Optional[DailyDevotion] = None
  noon: Optional[DailyDevotion] = None
  evening: Optional[DailyDevotion] = None
  family: Optional[DailyDevotion] = None

  def get(self, time_of_day) -> Optional[DailyDevotion]:
    return getattr(self, TimeOfDay(time_of_day).value)

  def to_dict(self) -> dict:
    data = {"date": self.date}
    for time_of_day in TimeOfDay:
      devotion = getattr(self, time_of_day.value)
      if devotion is not None:
        data[time_of_day.value] = devotion.to_dict()
    return data
