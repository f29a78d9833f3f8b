"""Prayer libraries per language and the prayer text resolver."""

import logging
from typing import Optional

import prayer_mapping
import utils

FALLBACK_LANGUAGE = "en"

# Canonical English texts for the invariant parts of the office. Used only
# when neither the requested language nor English supplies the prayer.
BUILTIN_PRAYERS = {
    "confession": (
        "Almighty God, Father of our Lord Jesus Christ, maker of all things,"
        " judge of all men: We acknowledge and bewail our manifold sins and"
        " wickedness, which we from time to time most grievously have"
        " committed, by thought, word, and deed, against thy divine Majesty,"
        " provoking most justly thy wrath and indignation against us. We do"
        " earnestly repent, and are heartily sorry for these our misdoings;"
        " the remembrance of them is grievous unto us, the burden of them is"
        " intolerable. Have mercy upon us, have mercy upon us, most merciful"
        " Father; for thy Son our Lord Jesus Christ's sake, forgive us all"
        " that is past; and grant that we may ever hereafter serve and please"
        " thee in newness of life, to the honor and glory of thy Name;"
        " through Jesus Christ our Lord. Amen."
    ),
    "gloria-patri": (
        "Glory be to the Father, and to the Son, and to the Holy Spirit: as"
        " it was in the beginning, is now, and ever shall be, world without"
        " end. Amen."
    ),
    "benedictus": (
        "Blessed be the Lord God of Israel, for he hath visited and redeemed"
        " his people; and hath raised up a horn of salvation for us in the"
        " house of his servant David; as he spake by the mouth of his holy"
        " prophets, which have been since the world began: that we should be"
        " saved from our enemies, and from the hand of all that hate us; to"
        " perform the mercy promised to our fathers, and to remember his holy"
        " covenant; the oath which he sware to our father Abraham, that he"
        " would grant unto us, that we being delivered out of the hand of our"
        " enemies might serve him without fear, in holiness and righteousness"
        " before him, all the days of our life. And thou, child, shalt be"
        " called the prophet of the Highest: for thou shalt go before the face"
        " of the Lord to prepare his ways; to give knowledge of salvation unto"
        " his people by the remission of their sins, through the tender mercy"
        " of our God; whereby the dayspring from on high hath visited us, to"
        " give light to them that sit in darkness and in the shadow of death,"
        " to guide our feet into the way of peace."
    ),
    "magnificat": (
        "My soul doth magnify the Lord, and my spirit hath rejoiced in God my"
        " Savior. For he hath regarded the low estate of his handmaiden: for,"
        " behold, from henceforth all generations shall call me blessed. For"
        " he that is mighty hath done to me great things; and holy is his"
        " name. And his mercy is on them that fear him from generation to"
        " generation. He hath shewed strength with his arm; he hath scattered"
        " the proud in the imagination of their hearts. He hath put down the"
        " mighty from their seats, and exalted them of low degree. He hath"
        " filled the hungry with good things; and the rich he hath sent empty"
        " away. He hath helped his servant Israel, in remembrance of his"
        " mercy; as he spake to our fathers, to Abraham, and to his seed for"
        " ever."
    ),
    "nunc-dimittis": (
        "Lord, now lettest thou thy servant depart in peace, according to thy"
        " word: for mine eyes have seen thy salvation, which thou hast"
        " prepared before the face of all people; a light to lighten the"
        " Gentiles, and the glory of thy people Israel."
    ),
    "apostles-creed": (
        "I believe in God, the Father Almighty, maker of heaven and earth;"
        " and in Jesus Christ his only Son our Lord; who was conceived by the"
        " Holy Ghost, born of the Virgin Mary, suffered under Pontius Pilate,"
        " was crucified, dead, and buried. He descended into hell. The third"
        " day he rose again from the dead. He ascended into heaven, and"
        " sitteth on the right hand of God the Father Almighty. From thence he"
        " shall come to judge the quick and the dead. I believe in the Holy"
        " Ghost, the holy catholic Church, the communion of saints, the"
        " forgiveness of sins, the resurrection of the body, and the life"
        " everlasting. Amen."
    ),
    "lords-prayer": (
        "Our Father, who art in heaven, hallowed be thy Name, thy kingdom"
        " come, thy will be done, on earth as it is in heaven. Give us this"
        " day our daily bread. And forgive us our trespasses, as we forgive"
        " those who trespass against us. And lead us not into temptation, but"
        " deliver us from evil. For thine is the kingdom, and the power, and"
        " the glory, for ever and ever. Amen."
    ),
    "st-michael-prayer": (
        "Holy Michael the Archangel, defend us in the day of battle. Be our"
        " safeguard against the wickedness and snares of the devil. May God"
        " rebuke him, we humbly pray; and do thou, O Prince of the heavenly"
        " host, by the power of God, thrust into hell Satan and all the evil"
        " spirits who prowl about the world seeking the ruin of souls. Amen."
    ),
}

logger = logging.getLogger(__name__)


def load_prayer_file(filepath: str) -> list[dict]:
  """Loads the `prayers` list of a language file, skipping bad records."""
  data = utils.load_json(filepath, default={})
  raw_prayers = data.get("prayers") if isinstance(data, dict) else None
  if not isinstance(raw_prayers, list):
    logger.warning("No prayers list in %s", filepath)
    return []
  return [
      p for p in raw_prayers
      if isinstance(p, dict) and isinstance(p.get("id"), str) and p["id"]
  ]


class PrayerLibrary:
  """Prayers per language, indexed by their own ids."""

  def __init__(self, prayers_by_language: dict):
    """Builds the library.

    Args:
      prayers_by_language: language code -> list of prayer records. Each
        record needs an `id` and usually a `content`. Records are looked up
        by their own id first and by equivalent ids after that.
    """
    self._prayers = {}
    for language, records in prayers_by_language.items():
      by_id = {}
      for record in records:
        if record["id"] in by_id:
          logger.warning(
              "Duplicate prayer %r in language %r, keeping the first",
              record["id"],
              language,
          )
          continue
        by_id[record["id"]] = record
      self._prayers[language] = by_id

  @classmethod
  def from_texts(cls, texts_by_language: dict):
    """Builds a library from {language: {prayer id: content}}."""
    return cls({
        language: [
            {"id": prayer_id, "content": content}
            for prayer_id, content in texts.items()
        ]
        for language, texts in texts_by_language.items()
    })

  @classmethod
  def from_directory(cls, directory: str = utils.PRAYERS_DIR):
    prayers_by_language = {
        language: load_prayer_file(path)
        for language, path in utils.list_language_files(directory).items()
    }
    library = cls(prayers_by_language)
    logger.info(
        "Loaded prayers: %s",
        ", ".join(
            f"{lang}: {len(p)}" for lang, p in library._prayers.items()
        ),
    )
    return library

  def languages(self) -> list[str]:
    return sorted(self._prayers)

  def _matching_records(self, prayer_id, language):
    """Records for `prayer_id` in lookup order, without repeats.

    The exact id comes first, then the id `language` maps it to, then every
    other equivalent id.
    """
    if not isinstance(prayer_id, str) or not isinstance(language, str):
      return []
    by_id = self._prayers.get(language, {})
    candidates = [prayer_id, prayer_mapping.localized_id(prayer_id, language)]
    candidates += prayer_mapping.equivalent_ids(prayer_id)
    records = []
    for candidate in dict.fromkeys(candidates):
      if candidate in by_id:
        records.append(by_id[candidate])
    return records

  def get(self, key: str, language: str) -> Optional[str]:
    """The prayer's text in `language`, or None if absent or empty."""
    for record in self._matching_records(key, language):
      content = record.get("content")
      if isinstance(content, str) and content.strip():
        return content
    return None

  def get_prayers(self, language: str) -> list[dict]:
    """Every prayer record for a language, in file order."""
    if not isinstance(language, str):
      return []
    return list(self._prayers.get(language, {}).values())

  def get_prayer_by_id(self, prayer_id: str, language: str) -> Optional[dict]:
    """Finds a prayer by its exact id, its mapped id or any equivalent id.

    `ama-namin` finds the Estonian `meie-isa` record, but a language that
    files both `ama-namin` and `lords-prayer` returns each for its own id.
    """
    records = self._matching_records(prayer_id, language)
    return records[0] if records else None


class PrayerTextResolver:
  """Resolves a prayer key to display text with language fallback.

  Order: requested language, English, the built-in English texts, and
  finally an empty string. Never raises.
  """

  def __init__(self, library: PrayerLibrary, builtins=None):
    self.library = library
    self.builtins = BUILTIN_PRAYERS if builtins is None else builtins

  def resolve(self, key: str, language: str) -> str:
    if not isinstance(key, str):
      logger.warning("Invalid prayer key %r", key)
      return ""
    if not isinstance(language, str):
      logger.warning("Invalid language %r, using English", language)
      language = FALLBACK_LANGUAGE
    text = self.library.get(key, language)
    if text:
      return text

    if language != FALLBACK_LANGUAGE:
      text = self.library.get(key, FALLBACK_LANGUAGE)
      if text:
        logger.debug("Prayer %r missing in %r, using English", key, language)
        return text

    text = self.builtins.get(prayer_mapping.canonical_key(key))
    if text:
      logger.debug("Prayer %r using built-in text", key)
      return text

    logger.warning("No text for prayer %r in any language", key)
    return ""
