"""Tests for cross-language prayer id aliases."""

import pytest

import prayer_mapping


@pytest.mark.parametrize(
    "prayer_id, expected",
    [
        ("ama-namin", "lords-prayer"),
        ("meie-isa", "lords-prayer"),
        ("lords-prayer", "lords-prayer"),
        ("au-olgu-isale", "gloria-patri"),
        ("sumasampalataya-ako", "apostles-creed"),
        ("something-else", "something-else"),
    ],
)
def test_canonical_key(prayer_id, expected):
  assert prayer_mapping.canonical_key(prayer_id) == expected


def test_localized_id():
  assert prayer_mapping.localized_id("lords-prayer", "tl") == "ama-namin"
  assert prayer_mapping.localized_id("ama-namin", "et") == "meie-isa"
  assert prayer_mapping.localized_id("meie-isa", "en") == "lords-prayer"
  assert prayer_mapping.localized_id("unmapped", "tl") == "unmapped"


def test_equivalent_ids():
  assert prayer_mapping.equivalent_ids("meie-isa") == [
      "lords-prayer",
      "ama-namin",
      "meie-isa",
  ]
  assert prayer_mapping.equivalent_ids("unmapped") == ["unmapped"]


def test_every_alias_maps_back_to_its_canonical_key():
  for canonical, aliases in prayer_mapping.PRAYER_ALIASES.items():
    for alias in aliases.values():
      assert prayer_mapping.canonical_key(alias) == canonical
      for other in aliases.values():
        assert prayer_mapping.canonical_key(other) == (
            prayer_mapping.canonical_key(alias)
        )


def test_conflicting_aliases_are_rejected():
  with pytest.raises(ValueError):
    prayer_mapping._build_alias_index({
        "lords-prayer": {"tl": "ama-namin"},
        "gloria-patri": {"tl": "ama-namin"},
    })
