"""Shared fixtures: small in-memory data sets and the Flask test client."""

import pytest

from devotional_content import devotion_builder
import main
from services import lectionary as lectionary_service
from services import localization as localization_service
from services import prayers as prayers_service

SAMPLE_LECTIONARY = {
    "2026-04-05": {
        "firstReading": "Acts 10:34-43",
        "psalm": "Psalm 118:1-2, 14-24",
        "secondReading": "Colossians 3:1-4",
        "gospel": "John 20:1-18",
    },
    "2026-12-25": {
        "firstReading": "Isaiah 62:6-12",
        "psalm": "Psalm 97",
        "secondReading": "Titus 3:4-7",
        "gospel": "Luke 2:1-20",
    },
    "2026-06-01": {
        "firstReading": "Tobit 1:3; 2:1b-8",
        "psalm": "Psalm 112:1-6",
        "secondReading": "",
        "gospel": "Mark 12:1-12",
    },
}

SAMPLE_PRAYERS = {
    "en": {
        "lords-prayer": "Our Father, who art in heaven.",
        "gloria-patri": "Glory be to the Father.",
        "apostles-creed": "I believe in God, the Father Almighty.",
    },
    "tl": {
        "ama-namin": "Ama namin, sumasalangit ka.",
    },
    "es": {
        "lords-prayer": "Padre nuestro que estás en los cielos.",
        "st-michael-prayer": "",
    },
}

SAMPLE_TRANSLATIONS = {
    "en": {
        "devotions": {
            "timeTitle": {"morningPrayer": "Morning Prayer"},
            "sections": {"lordsPrayer": "The Lord's Prayer"},
        }
    },
    "es": {
        "devotions": {
            "timeTitle": {
                "morningPrayer": "Oración de la Mañana",
                "eveningPrayer": "Oración de la Tarde",
            },
            "sections": {"lordsPrayer": "El Padrenuestro"},
            "readings": {"gospel": "Evangelio"},
        }
    },
}


@pytest.fixture
def lectionary():
  return lectionary_service.Lectionary(SAMPLE_LECTIONARY)


@pytest.fixture
def prayer_library():
  return prayers_service.PrayerLibrary.from_texts(SAMPLE_PRAYERS)


@pytest.fixture
def resolver(prayer_library):
  return prayers_service.PrayerTextResolver(prayer_library)


@pytest.fixture
def localization():
  return localization_service.Localization(SAMPLE_TRANSLATIONS)


@pytest.fixture
def builder(lectionary, resolver, localization):
  return devotion_builder.DevotionBuilder(lectionary, resolver, localization)


@pytest.fixture
def client():
  main.app.config["TESTING"] = True
  with main.app.test_client() as test_client:
    yield test_client
