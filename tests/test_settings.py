"""Tests for environment-driven settings."""

import os

import settings


def test_defaults(monkeypatch):
  for name in (
      "DEVOTIONS_DATA_DIR",
      "DEVOTIONS_TIMEZONE",
      "DEVOTIONS_DEFAULT_LANGUAGE",
      "DEVOTIONS_LOG_LEVEL",
      "PORT",
  ):
    monkeypatch.delenv(name, raising=False)
  assert os.path.normpath(settings.get_data_dir()) == os.path.normpath(
      settings.DEFAULT_DATA_DIR
  )
  assert settings.get_timezone_name() == "America/New_York"
  assert settings.get_timezone().zone == "America/New_York"
  assert settings.get_default_language() == "en"
  assert settings.get_log_level() == "INFO"
  assert settings.get_port() == 8080


def test_environment_overrides(monkeypatch, tmp_path):
  monkeypatch.setenv("DEVOTIONS_DATA_DIR", str(tmp_path))
  monkeypatch.setenv("DEVOTIONS_TIMEZONE", "Pacific/Auckland")
  monkeypatch.setenv("DEVOTIONS_DEFAULT_LANGUAGE", "tl")
  monkeypatch.setenv("DEVOTIONS_LOG_LEVEL", "debug")
  monkeypatch.setenv("PORT", "5000")
  assert settings.get_data_dir() == str(tmp_path)
  assert settings.get_timezone().zone == "Pacific/Auckland"
  assert settings.get_default_language() == "tl"
  assert settings.get_log_level() == "DEBUG"
  assert settings.get_port() == 5000


def test_blank_and_invalid_values_fall_back(monkeypatch):
  monkeypatch.setenv("DEVOTIONS_DEFAULT_LANGUAGE", "   ")
  monkeypatch.setenv("DEVOTIONS_TIMEZONE", "Mars/Olympus_Mons")
  monkeypatch.setenv("PORT", "eighty")
  assert settings.get_default_language() == "en"
  assert settings.get_timezone().zone == "America/New_York"
  assert settings.get_port() == 8080


def test_supported_languages_include_english():
  assert settings.SUPPORTED_LANGUAGES[0] == "en"
  assert len(settings.SUPPORTED_LANGUAGES) == len(
      set(settings.SUPPORTED_LANGUAGES)
  )
