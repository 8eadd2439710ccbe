import pytest

from culturepass.domain.discover import affinity, geo


def test_distance_between_same_point_is_zero():
	assert geo.distance_km(-33.8688, 151.2093, -33.8688, 151.2093) == pytest.approx(0.0)


def test_distance_sydney_to_melbourne():
	sydney = geo.city_coordinates("Sydney", "Australia")
	melbourne = geo.city_coordinates("Melbourne", "Australia")
	assert geo.distance_km(*sydney, *melbourne) == pytest.approx(713.4, abs=2.0)


def test_city_coordinates_lookup_is_case_insensitive():
	assert geo.city_coordinates("SYDNEY", "australia") == (-33.8688, 151.2093)
	assert geo.city_coordinates("Atlantis", "Australia") is None


def test_origin_country_tags_known_and_unknown():
	assert "Malayalee" in affinity.origin_country_tags.tags_for("India")
	assert affinity.origin_country_tags.tags_for("india") == affinity.origin_country_tags.tags_for("India")
	assert affinity.origin_country_tags.tags_for("Narnia") == []
	assert affinity.origin_country_tags.tags_for("") == []


def test_community_name_tags_fall_back_to_name():
	assert affinity.community_name_tags.tags_for("Chinese Diaspora") == ["Chinese", "Cantonese", "Mandarin"]
	assert affinity.community_name_tags.tags_for("Malayalee Community") == ["Malayalee Community"]


def test_community_affinity_tags_are_lowercased_and_unique():
	tags = affinity.community_affinity_tags(["Sri Lankan Diaspora", "Tamil", "Indian Diaspora"])
	assert tags[:2] == ["sri lankan", "tamil"]
	assert tags.count("tamil") == 1
	assert all(tag == tag.lower() for tag in tags)


def test_tag_overlaps_matches_in_both_directions():
	assert affinity.tag_overlaps("Malayalee", ["malayalee community"])
	assert affinity.tag_overlaps("Malayalee Community", ["malayalee"])
	assert not affinity.tag_overlaps("Punjabi", ["malayalee community"])


def test_tag_overlaps_never_matches_empty_value():
	assert not affinity.tag_overlaps("", ["malayalee"])
	assert not affinity.tag_overlaps("Tamil", [""])
