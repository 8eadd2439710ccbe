from culturepass.domain.search.cache import SearchCache, build_suggest_cache_key


class ManualClock:
	def __init__(self, now: float = 0.0) -> None:
		self.now = now

	def __call__(self) -> float:
		return self.now


def test_entry_expires_after_ttl():
	clock = ManualClock(1000)
	cache = SearchCache(60_000, clock=clock)
	cache.set("k", {"total": 1}, ttl_ms=10)

	clock.now = 1010
	assert cache.get("k") == {"total": 1}

	clock.now = 1011
	assert cache.get("k") is None
	assert len(cache) == 0


def test_default_ttl_applies_when_not_given():
	clock = ManualClock(0)
	cache = SearchCache(500, clock=clock)
	cache.set("k", "v")

	clock.now = 500
	assert cache.get("k") == "v"
	clock.now = 501
	assert cache.get("k") is None


def test_expired_entries_linger_until_read():
	clock = ManualClock(0)
	cache = SearchCache(10, clock=clock)
	cache.set("a", 1)
	cache.set("b", 2)

	clock.now = 100
	assert len(cache) == 2
	cache.get("a")
	assert len(cache) == 1


def test_set_overwrites_and_refreshes_expiry():
	clock = ManualClock(0)
	cache = SearchCache(10, clock=clock)
	cache.set("k", 1)
	clock.now = 8
	cache.set("k", 2)
	clock.now = 15
	assert cache.get("k") == 2


def test_delete_and_flush():
	cache = SearchCache()
	cache.set("a", 1)
	cache.set("b", 2)
	cache.delete("a")
	cache.delete("missing")
	assert cache.get("a") is None
	assert len(cache) == 1

	cache.flush()
	assert len(cache) == 0


def test_suggest_key_normalises_prefix():
	assert build_suggest_cache_key(" Onam ", 8) == build_suggest_cache_key("onam", 8)
	assert build_suggest_cache_key("onam", 8) != build_suggest_cache_key("onam", 5)
