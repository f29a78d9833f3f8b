"""Builds the Daily Office for a date from the lectionary and fixed prayers.

Every office follows the same outline:

  Sign of the Cross, Opening versicles, Confession, Psalm, Gloria Patri,
  First Reading, Canticle, Second Reading, Canticle, Gospel,
  Apostles' Creed, Prayers, Lord's Prayer, Prayer to St. Michael,
  Sign of the Cross.

Only the opening and the two canticles change with the time of day.
"""

import functools
import logging
from typing import Optional

import models
import settings
from devotional_content import liturgical_calendar
from services import lectionary as lectionary_service
from services import localization as localization_service
from services import prayers as prayers_service
import utils

logger = logging.getLogger(__name__)

SIGN_OF_CROSS_TEXT = (
    "✠ In the Name of the Father, and of the Son, and of the Holy"
    " Spirit. Amen."
)
GLORIA_VERSICLE = (
    "Glory be to the Father, and to the Son, and to the Holy Spirit: as it"
    " was in the beginning, is now, and ever shall be, world without end."
    " Amen."
)
FULL_OPENING_TEXT = (
    "O Lord, open thou our lips.\nAnd our mouth shall show forth thy praise."
    "\n\nO God, make speed to save us.\nO Lord, make haste to help us.\n\n"
    + GLORIA_VERSICLE
    + "\n\nPraise the Lord.\nThe Lord's Name be praised."
)
MIDDAY_OPENING_TEXT = (
    "O God, make speed to save us.\nO Lord, make haste to help us.\n\n"
    + GLORIA_VERSICLE
)
FAMILY_OPENING_TEXT = (
    "The Lord Almighty grant us a peaceful night and a perfect end.\nAmen."
    "\n\nOur help is in the Name of the Lord;\nThe maker of heaven and earth."
)
PRAYERS_VERSICLES_TEXT = (
    "O Lord, hear our prayer;\nAnd let our cry come unto thee.\n\nLet us"
    " pray."
)

# Localised strings are (translation key, literal fallback) pairs.
OFFICIANT_BEGINS = (
    "devotions.rubrics.officiantBegins",
    "The Officiant begins:",
)
READING_RUBRIC = (
    "devotions.rubrics.readingFromScripture",
    "A Reading from Holy Scripture",
)

TIME_TITLES = {
    models.TimeOfDay.MORNING: (
        "devotions.timeTitle.morningPrayer",
        "Morning Prayer",
    ),
    models.TimeOfDay.NOON: ("devotions.timeTitle.middayPrayer", "Midday Prayer"),
    models.TimeOfDay.EVENING: (
        "devotions.timeTitle.eveningPrayer",
        "Evening Prayer",
    ),
    models.TimeOfDay.FAMILY: (
        "devotions.timeTitle.familyDevotion",
        "Family Devotion",
    ),
}
GENERIC_TIME_TITLE = ("devotions.timeTitle.prayer", "Prayer")

# time of day -> (section key, content, rubric)
OPENINGS = {
    models.TimeOfDay.MORNING: (
        "morning_opening",
        ("devotions.content.morningOpening", FULL_OPENING_TEXT),
        OFFICIANT_BEGINS,
    ),
    models.TimeOfDay.NOON: (
        "midday_opening",
        ("devotions.content.middayOpening", MIDDAY_OPENING_TEXT),
        OFFICIANT_BEGINS,
    ),
    models.TimeOfDay.EVENING: (
        "evening_opening",
        ("devotions.content.eveningOpening", FULL_OPENING_TEXT),
        OFFICIANT_BEGINS,
    ),
    models.TimeOfDay.FAMILY: (
        "family_opening",
        ("devotions.content.familyOpening", FAMILY_OPENING_TEXT),
        (
            "devotions.rubrics.familyGathers",
            "The family gathers and one member begins:",
        ),
    ),
}

# prayer key -> (section key, title, scripture reference)
CANTICLE_SECTIONS = {
    "benedictus": (
        "canticle_benedictus",
        ("devotions.sections.benedictus", "Canticle: Benedictus"),
        "Luke 1:68-79",
    ),
    "magnificat": (
        "canticle_magnificat",
        ("devotions.sections.magnificat", "Canticle: Magnificat"),
        "Luke 1:46-55",
    ),
    "nunc-dimittis": (
        "canticle_nunc_dimittis",
        ("devotions.sections.nuncDimittis", "Canticle: Nunc Dimittis"),
        "Luke 2:29-32",
    ),
    "gloria-patri": (
        "gloria_patri",
        ("devotions.sections.gloriaPatri", "Gloria Patri"),
        None,
    ),
}

# time of day -> (canticle after the 1st reading, after the 2nd reading)
CANTICLES = {
    models.TimeOfDay.MORNING: ("benedictus", "gloria-patri"),
    models.TimeOfDay.NOON: ("gloria-patri", "gloria-patri"),
    models.TimeOfDay.EVENING: ("magnificat", "nunc-dimittis"),
    models.TimeOfDay.FAMILY: ("nunc-dimittis", "gloria-patri"),
}

READING_LABELS = {
    models.DevotionReadingType.FIRST_READING: (
        "devotions.readings.firstReading",
        "First Reading",
    ),
    models.DevotionReadingType.PSALM: ("devotions.readings.psalm", "Psalm"),
    models.DevotionReadingType.SECOND_READING: (
        "devotions.readings.secondReading",
        "Second Reading",
    ),
    models.DevotionReadingType.GOSPEL: ("devotions.readings.gospel", "Gospel"),
}


def _t(translator, text) -> str:
  """Translates a (key, fallback) pair; never returns the bare key."""
  key, fallback = text
  try:
    result = translator.translate(key)
  except Exception:
    logger.warning("Translation lookup failed for %r", key, exc_info=True)
    return fallback
  if isinstance(result, str) and result and result != key:
    return result
  return fallback


def _parse_time_of_day(time_of_day) -> Optional[models.TimeOfDay]:
  try:
    return models.TimeOfDay(time_of_day)
  except ValueError:
    logger.warning(
        "Unknown time of day %r, using the morning outline", time_of_day
    )
    return None


class DevotionBuilder:
  """Composes offices from a lectionary, prayer texts and translations."""

  def __init__(
      self,
      lectionary: lectionary_service.Lectionary,
      prayer_resolver: prayers_service.PrayerTextResolver,
      localization: localization_service.Localization,
  ):
    self.lectionary = lectionary
    self.prayer_resolver = prayer_resolver
    self.localization = localization

  def has_entry(self, date_value) -> bool:
    return self.lectionary.has_entry(date_value)

  def all_dates(self) -> list[str]:
    return self.lectionary.all_dates()

  def _prayer_section(
      self, section_key, prayer_key, title, translator, language, **extra
  ):
    return models.DevotionSection(
        key=section_key,
        title=_t(translator, title),
        content=self.prayer_resolver.resolve(prayer_key, language),
        **extra,
    )

  def _canticle_section(self, prayer_key, translator, language):
    section_key, title, reference = CANTICLE_SECTIONS[prayer_key]
    return self._prayer_section(
        section_key,
        prayer_key,
        title,
        translator,
        language,
        reference=reference,
    )

  def _sign_of_cross(self, section_key, translator):
    return models.DevotionSection(
        key=section_key,
        title=_t(
            translator,
            ("devotions.sections.signOfCross", "Sign of the Cross"),
        ),
        content=_t(
            translator, ("devotions.content.signOfCross", SIGN_OF_CROSS_TEXT)
        ),
    )

  def _opening(self, time_of_day, translator):
    section_key, content, rubric = OPENINGS[time_of_day]
    return models.DevotionSection(
        key=section_key,
        title=_t(translator, TIME_TITLES[time_of_day]),
        content=_t(translator, content),
        rubric=_t(translator, rubric),
    )

  def _reading_section(self, section_key, label, reference, rubric, translator):
    return models.DevotionSection(
        key=section_key,
        title=_t(translator, label),
        content=reference,
        reference=reference or None,
        rubric=_t(translator, rubric) if rubric else None,
    )

  def _build_readings(self, entry, translator):
    references = [
        (models.DevotionReadingType.FIRST_READING, entry.first_reading),
        (models.DevotionReadingType.PSALM, entry.psalm),
        (models.DevotionReadingType.SECOND_READING, entry.second_reading),
        (models.DevotionReadingType.GOSPEL, entry.gospel),
    ]
    return tuple(
        models.DevotionReading(
            label=_t(translator, READING_LABELS[reading_type]),
            reference=reference,
            text="",
            type=reading_type,
        )
        for reading_type, reference in references
    )

  def build_devotion(
      self, date_value, time_of_day, language: Optional[str] = None
  ) -> Optional[models.DailyDevotion]:
    """Builds one office for a date.

    Args:
      date_value: a date, datetime or `YYYY-MM-DD` string.
      time_of_day: morning, noon, evening or family. Anything else gets the
        morning outline under a generic title.
      language: language code; defaults to the configured language.

    Returns:
      The DailyDevotion, or None when the date is malformed or the
      lectionary has no entry for it.
    """
    if language is None:
      language = settings.get_default_language()
    if not isinstance(language, str):
      logger.warning("Invalid language %r, using English", language)
      language = prayers_service.FALLBACK_LANGUAGE
    date_str = utils.to_iso_key(date_value)
    if date_str is None:
      logger.warning("Cannot build devotion for malformed date %r", date_value)
      return None
    entry = self.lectionary.get(date_str)
    if entry is None:
      return None

    season = liturgical_calendar.get_liturgical_season(date_str)
    translator = self.localization.translator(language)
    known_time = _parse_time_of_day(time_of_day)
    outline_time = known_time or models.TimeOfDay.MORNING
    after_first, after_second = CANTICLES[outline_time]
    gospel_rubric = ("devotions.rubrics.holyGospel", "The Holy Gospel")

    sections = (
        self._sign_of_cross("sign_of_cross", translator),
        self._opening(outline_time, translator),
        self._prayer_section(
            "confession",
            "confession",
            ("devotions.sections.confession", "Confession"),
            translator,
            language,
            rubric=_t(
                translator,
                (
                    "devotions.rubrics.confessionRubric",
                    "The following confession may be said together:",
                ),
            ),
        ),
        self._reading_section(
            "psalm",
            READING_LABELS[models.DevotionReadingType.PSALM],
            entry.psalm,
            None,
            translator,
        ),
        self._canticle_section("gloria-patri", translator, language),
        self._reading_section(
            "reading_1st_label",
            READING_LABELS[models.DevotionReadingType.FIRST_READING],
            entry.first_reading,
            READING_RUBRIC,
            translator,
        ),
        self._canticle_section(after_first, translator, language),
        self._reading_section(
            "reading_2nd_label",
            READING_LABELS[models.DevotionReadingType.SECOND_READING],
            entry.second_reading,
            READING_RUBRIC,
            translator,
        ),
        self._canticle_section(after_second, translator, language),
        self._reading_section(
            "reading_gospel_label",
            READING_LABELS[models.DevotionReadingType.GOSPEL],
            entry.gospel,
            gospel_rubric,
            translator,
        ),
        self._prayer_section(
            "apostles_creed",
            "apostles-creed",
            ("devotions.sections.apostlesCreed", "Apostles' Creed"),
            translator,
            language,
        ),
        models.DevotionSection(
            key="prayers",
            title=_t(translator, ("devotions.sections.prayers", "Prayers")),
            content=_t(
                translator,
                ("devotions.content.prayersVersicles", PRAYERS_VERSICLES_TEXT),
            ),
            rubric=_t(
                translator,
                (
                    "devotions.rubrics.freePrayerIntercessions",
                    "Here may follow free prayer and intercessions.",
                ),
            ),
        ),
        self._prayer_section(
            "lords_prayer",
            "lords-prayer",
            ("devotions.sections.lordsPrayer", "The Lord's Prayer"),
            translator,
            language,
        ),
        self._prayer_section(
            "prayer_st_michael",
            "st-michael-prayer",
            ("devotions.sections.stMichaelPrayer", "Prayer to St. Michael"),
            translator,
            language,
        ),
        self._sign_of_cross("sign_of_cross_closing", translator),
    )

    time_value = (
        known_time.value if known_time is not None else str(time_of_day)
    )
    return models.DailyDevotion(
        id=f"{date_str}-{time_value}",
        date=date_str,
        time_of_day=time_value,
        title=_t(translator, TIME_TITLES.get(known_time, GENERIC_TIME_TITLE)),
        language=language,
        sections=sections,
        readings=self._build_readings(entry, translator),
        liturgical_season=season,
    )

  def build_devotion_day(
      self, date_value, language: Optional[str] = None
  ) -> Optional[models.DevotionDay]:
    """Builds all four offices for a date, or None if it has no entry."""
    date_str = utils.to_iso_key(date_value)
    if date_str is None or not self.lectionary.has_entry(date_str):
      return None
    offices = {
        time_of_day.value: self.build_devotion(date_str, time_of_day, language)
        for time_of_day in models.TimeOfDay
    }
    return models.DevotionDay(date=date_str, **offices)


@functools.lru_cache()
def get_default_builder() -> DevotionBuilder:
  """Builder over the bundled data files, loaded once."""
  library = prayers_service.PrayerLibrary.from_directory()
  return DevotionBuilder(
      lectionary=lectionary_service.Lectionary.from_file(),
      prayer_resolver=prayers_service.PrayerTextResolver(library),
      localization=localization_service.Localization.from_directory(),
  )


def build_devotion(date_value, time_of_day, language=None):
  """Builds one office with the default data. See DevotionBuilder."""
  return get_default_builder().build_devotion(date_value, time_of_day, language)


def build_devotion_day(date_value, language=None):
  """Builds a day's offices with the default data. See DevotionBuilder."""
  return get_default_builder().build_devotion_day(date_value, language)


def has_entry(date_value) -> bool:
  return get_default_builder().has_entry(date_value)


def all_dates() -> list[str]:
  return get_default_builder().all_dates()
