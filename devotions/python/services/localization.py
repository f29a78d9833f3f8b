"""Service for looking up translated interface strings."""

import logging

import utils

FALLBACK_LANGUAGE = "en"

logger = logging.getLogger(__name__)


def _lookup(catalog, key):
  """Walks a nested catalog along a dotted key such as "a.b.c"."""
  node = catalog
  for part in key.split("."):
    if not isinstance(node, dict) or part not in node:
      return None
    node = node[part]
  return node if isinstance(node, str) else None


class Translator:
  """Translates keys for one language, falling back to English."""

  def __init__(self, catalogs, language, fallback_language=FALLBACK_LANGUAGE):
    self._catalogs = catalogs
    self.language = language
    self.fallback_language = fallback_language

  def translate(self, key: str) -> str:
    """Returns the translated string, or `key` itself if there is none."""
    for language in (self.language, self.fallback_language):
      value = _lookup(self._catalogs.get(language, {}), key)
      if value:
        return value
    return key


class Localization:
  """Translation catalogs for every available language."""

  def __init__(self, catalogs: dict):
    self._catalogs = catalogs

  @classmethod
  def from_directory(cls, directory: str = utils.TRANSLATIONS_DIR):
    catalogs = {}
    for language, path in utils.list_language_files(directory).items():
      data = utils.load_json(path, default={})
      if isinstance(data, dict):
        catalogs[language] = data
      else:
        logger.warning("Translation file %s is not a JSON object", path)
    return cls(catalogs)

  def languages(self) -> list[str]:
    return sorted(self._catalogs)

  def translator(self, language: str) -> Translator:
    if not isinstance(language, str):
      logger.warning("Invalid language %r, using English", language)
      language = FALLBACK_LANGUAGE
    return Translator(self._catalogs, language)

  def translate(self, key: str, language: str) -> str:
    return self.translator(language).translate(key)
