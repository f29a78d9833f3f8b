"""Tests for translated interface strings."""

from services import localization as localization_service


def test_translate_in_requested_language(localization):
  assert (
      localization.translate("devotions.timeTitle.morningPrayer", "es")
      == "Oración de la Mañana"
  )


def test_falls_back_to_english(localization):
  translator = localization.translator("tl")
  assert translator.translate("devotions.sections.lordsPrayer") == (
      "The Lord's Prayer"
  )


def test_missing_key_returns_key(localization):
  assert (
      localization.translate("devotions.sections.nothing", "es")
      == "devotions.sections.nothing"
  )


def test_non_leaf_key_returns_key(localization):
  assert localization.translate("devotions.timeTitle", "en") == (
      "devotions.timeTitle"
  )


def test_languages(localization):
  assert localization.languages() == ["en", "es"]


def test_bundled_catalogs_load():
  localization = localization_service.Localization.from_directory()
  assert "en" in localization.languages()
  assert (
      localization.translate("devotions.readings.gospel", "es") == "Evangelio"
  )
  assert (
      localization.translate("devotions.readings.psalm", "tl") == "Psalm"
  )


def test_from_directory_skips_non_object_files(tmp_path):
  (tmp_path / "en.json").write_text('{"a": {"b": "c"}}', encoding="utf-8")
  (tmp_path / "es.json").write_text('["not", "a", "catalog"]', encoding="utf-8")
  localization = localization_service.Localization.from_directory(
      str(tmp_path)
  )
  assert localization.languages() == ["en"]
  assert localization.translate("a.b", "es") == "c"


def test_invalid_language_uses_english(localization):
  translator = localization.translator(["es"])
  assert translator.language == "en"
  assert translator.translate("devotions.timeTitle.morningPrayer") == (
      "Morning Prayer"
  )
