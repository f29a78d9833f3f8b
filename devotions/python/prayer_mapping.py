"""Maps equivalent prayer ids between languages.

Each prayer has one canonical key (its English id). Some language libraries
file the same prayer under a native id, e.g. the Lord's Prayer is
`ama-namin` in Tagalog and `meie-isa` in Estonian. Libraries are normalised
to canonical keys when they are loaded, so lookups never compare aliases.
"""

# canonical key -> {language: id used by that language's library}
PRAYER_ALIASES = {
    "lords-prayer": {"tl": "ama-namin", "et": "meie-isa"},
    "gloria-patri": {"tl": "luwalhati-sa-diyos", "et": "au-olgu-isale"},
    "apostles-creed": {
        "tl": "sumasampalataya-ako",
        "et": "apostlite-uskutunnistus",
    },
    "morning-prayer": {"tl": "panalangin-sa-umaga", "et": "hommikupalve"},
    "evening-prayer": {"tl": "panalangin-sa-gabi", "et": "ohtupalve"},
    "prayer-before-meals": {
        "tl": "panalangin-bago-kumain",
        "et": "palve-enne-sooki",
    },
    "prayer-for-peace": {
        "tl": "panalangin-para-sa-kapayapaan",
        "et": "palve-rahu-eest",
    },
    "prayer-for-healing": {
        "tl": "panalangin-para-sa-pagpapagaling",
        "et": "palve-tervise-eest",
    },
    "prayer-of-confession": {
        "tl": "panalangin-ng-pagsisisi",
        "et": "patukahetsuse-palve",
    },
    "prayer-of-thanksgiving": {
        "tl": "panalangin-ng-pasasalamat",
        "et": "tanupalve",
    },
    "prayer-for-family": {
        "tl": "panalangin-para-sa-pamilya",
        "et": "palve-pere-eest",
    },
    "prayer-for-world": {
        "tl": "panalangin-para-sa-mundo",
        "et": "palve-maailma-eest",
    },
    "prayer-for-strength": {
        "tl": "panalangin-para-sa-lakas",
        "et": "palve-jou-eest",
    },
    "prayer-for-guidance": {
        "tl": "panalangin-para-sa-gabay",
        "et": "palve-juhenduse-eest",
    },
}


def _build_alias_index(aliases):
  index = {}
  for canonical, by_language in aliases.items():
    index[canonical] = canonical
    for alias in by_language.values():
      if alias in index and index[alias] != canonical:
        raise ValueError(
            f"Prayer id {alias!r} is mapped to both {index[alias]!r} and"
            f" {canonical!r}"
        )
      index[alias] = canonical
  return index


# alias -> canonical key, including each canonical key mapped to itself
_ALIAS_INDEX = _build_alias_index(PRAYER_ALIASES)


def canonical_key(prayer_id: str) -> str:
  """Returns the canonical key for any id; unknown ids map to themselves."""
  return _ALIAS_INDEX.get(prayer_id, prayer_id)


def localized_id(prayer_id: str, language: str) -> str:
  """The id `language`'s library uses for the prayer `prayer_id` names."""
  key = canonical_key(prayer_id)
  return PRAYER_ALIASES.get(key, {}).get(language, key)


def equivalent_ids(prayer_id: str) -> list[str]:
  """All ids naming the same prayer, canonical key first."""
  key = canonical_key(prayer_id)
  aliases = PRAYER_ALIASES.get(key, {})
  return [key] + [alias for alias in aliases.values() if alias != key]
