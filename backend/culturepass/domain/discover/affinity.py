"""Static mappings from origin countries and community names to content tags.

Lookups are case-insensitive. An unmapped origin country yields no tags (the
homeland section is skipped); an unmapped community falls back to its own name
so every joined community contributes at least one tag.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Tuple

_INDIAN = ("Indian", "Tamil", "Malayalee", "Punjabi", "Bengali", "Gujarati", "Telugu")

ORIGIN_COUNTRY_TAGS: Dict[str, Tuple[str, ...]] = {
	"india": _INDIAN,
	"china": ("Chinese",),
	"philippines": ("Filipino",),
	"vietnam": ("Vietnamese",),
	"lebanon": ("Lebanese",),
	"greece": ("Greek",),
	"italy": ("Italian",),
	"korea": ("Korean",),
	"south korea": ("Korean",),
	"japan": ("Japanese",),
	"sri lanka": ("Sri Lankan", "Tamil"),
	"pakistan": ("Pakistani", "Punjabi"),
	"bangladesh": ("Bengali", "Bangladeshi"),
	"iran": ("Iranian", "Persian"),
	"samoa": ("Samoan", "Pacific Islander"),
	"tonga": ("Tongan", "Pacific Islander"),
	"fiji": ("Fijian", "Pacific Islander"),
	"nepal": ("Nepali",),
	"thailand": ("Thai",),
	"malaysia": ("Malaysian",),
	"indonesia": ("Indonesian",),
	"turkey": ("Turkish",),
	"egypt": ("Egyptian",),
	"ethiopia": ("Ethiopian",),
	"somalia": ("Somali",),
	"south africa": ("South African",),
}

COMMUNITY_NAME_TAGS: Dict[str, Tuple[str, ...]] = {
	"indian diaspora": _INDIAN,
	"chinese diaspora": ("Chinese", "Cantonese", "Mandarin"),
	"filipino diaspora": ("Filipino",),
	"vietnamese diaspora": ("Vietnamese",),
	"lebanese diaspora": ("Lebanese", "Arabic"),
	"greek diaspora": ("Greek",),
	"italian diaspora": ("Italian",),
	"korean diaspora": ("Korean",),
	"japanese diaspora": ("Japanese",),
	"sri lankan diaspora": ("Sri Lankan", "Tamil"),
	"samoan diaspora": ("Samoan", "Pacific Islander"),
	"tongan diaspora": ("Tongan", "Pacific Islander"),
	"pakistani diaspora": ("Pakistani", "Punjabi"),
	"bangladeshi diaspora": ("Bangladeshi", "Bengali"),
	"iranian diaspora": ("Iranian", "Persian"),
	"ethiopian diaspora": ("Ethiopian",),
	"somali diaspora": ("Somali",),
	"south african diaspora": ("South African",),
	"aboriginal australian": ("Aboriginal", "Indigenous", "First Nations"),
	"torres strait islander": ("Torres Strait", "Indigenous"),
	"māori": ("Maori", "Māori", "Indigenous"),
	"first nations (canada)": ("First Nations", "Indigenous"),
	"hindi speakers": ("Hindi", "Indian", "Tamil", "Malayalee", "Punjabi"),
	"mandarin speakers": ("Chinese", "Mandarin"),
	"cantonese speakers": ("Chinese", "Cantonese"),
	"tamil speakers": ("Tamil",),
	"tagalog speakers": ("Filipino",),
	"vietnamese speakers": ("Vietnamese",),
	"arabic speakers": ("Arabic", "Lebanese"),
	"greek speakers": ("Greek",),
	"italian speakers": ("Italian",),
	"korean speakers": ("Korean",),
	"japanese speakers": ("Japanese",),
	"urdu speakers": ("Pakistani", "Urdu"),
	"bengali speakers": ("Bengali", "Bangladeshi"),
	"farsi speakers": ("Iranian", "Persian"),
	"samoan speakers": ("Samoan",),
	"tongan speakers": ("Tongan",),
	"te reo māori speakers": ("Maori", "Māori"),
}


@dataclass(slots=True)
class TagMapping:
	"""Case-insensitive key -> tags table with an optional identity fallback."""

	table: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)
	fallback_to_key: bool = False

	def tags_for(self, key: str) -> List[str]:
		if not key:
			return []
		tags = self.table.get(key.lower())
		if tags is not None:
			return list(tags)
		return [key] if self.fallback_to_key else []


origin_country_tags = TagMapping(ORIGIN_COUNTRY_TAGS)
community_name_tags = TagMapping(COMMUNITY_NAME_TAGS, fallback_to_key=True)


def community_affinity_tags(community_names: Iterable[str]) -> List[str]:
	"""Flattened, lower-cased, de-duplicated tags for the given joined communities."""

	seen: Dict[str, None] = {}
	for name in community_names:
		for tag in community_name_tags.tags_for(name):
			seen.setdefault(tag.lower(), None)
	return list(seen)


def tag_overlaps(value: str, tags: Iterable[str]) -> bool:
	"""True when ``value`` contains, or is contained by, any tag (case-insensitive)."""

	needle = value.lower()
	if not needle:
		return False
	return any(tag and (tag.lower() in needle or needle in tag.lower()) for tag in tags)
