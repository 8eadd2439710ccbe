import logging

import pytest

from culturepass.domain.rollout.service import PHASE_PERCENTAGES, RolloutService, hash_to_percent, resolve_config

USERS = [f"user-{i}" for i in range(200)]


def test_hash_known_values():
	assert hash_to_percent("") == 0
	assert hash_to_percent("a") == 97
	assert hash_to_percent("ab") == 5


def test_hash_wraps_at_32_bits():
	value = "discoverFeedV2:" + "z" * 64
	assert 0 <= hash_to_percent(value) < 100
	assert hash_to_percent(value) == hash_to_percent(value)


def test_phase_percentages():
	assert PHASE_PERCENTAGES == {"internal": 10, "pilot": 25, "half": 50, "full": 100}
	assert resolve_config("Pilot").percentage == 25


def test_unknown_phase_falls_back_to_internal(caplog):
	with caplog.at_level(logging.WARNING, logger="culturepass.domain.rollout.service"):
		config = resolve_config("beta")
	assert config.phase == "internal"
	assert config.percentage == 10
	assert any("rollout.unknown_phase" in record.getMessage() for record in caplog.records)


def test_full_phase_enables_everyone():
	service = RolloutService("full", ["walletPasses"])
	assert all(service.is_enabled("walletPasses", user) for user in USERS)


@pytest.mark.parametrize("lower,higher", [("internal", "pilot"), ("pilot", "half"), ("half", "full")])
def test_raising_phase_only_adds_users(lower, higher):
	small = RolloutService(lower)
	large = RolloutService(higher)
	for user in USERS:
		if small.is_enabled("discoverFeedV2", user):
			assert large.is_enabled("discoverFeedV2", user)


def test_enabled_share_tracks_percentage():
	service = RolloutService("half")
	enabled = sum(service.is_enabled("searchSuggest", user) for user in USERS)
	assert 60 <= enabled <= 140


def test_flags_for_covers_configured_features():
	service = RolloutService("internal", ["discoverFeedV2", "searchSuggest"])
	flags = service.flags_for("u1")
	assert set(flags) == {"discoverFeedV2", "searchSuggest"}
	assert flags == service.flags_for("u1")
	assert flags["discoverFeedV2"] == (hash_to_percent("discoverFeedV2:u1") < 10)
