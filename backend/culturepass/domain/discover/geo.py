"""Great-circle distance and the known-city coordinate table."""

from __future__ import annotations

import math
from typing import Dict, Optional, Tuple

EARTH_RADIUS_KM = 6371.0

# (lat, lng) keyed by "city,country", lower-cased
CITY_COORDINATES: Dict[str, Tuple[float, float]] = {
	"sydney,australia": (-33.8688, 151.2093),
	"melbourne,australia": (-37.8136, 144.9631),
	"brisbane,australia": (-27.4698, 153.0251),
	"perth,australia": (-31.9505, 115.8605),
	"adelaide,australia": (-34.9285, 138.6007),
	"canberra,australia": (-35.2809, 149.13),
	"hobart,australia": (-42.8821, 147.3272),
	"darwin,australia": (-12.4634, 130.8456),
	"auckland,new zealand": (-36.8485, 174.7633),
	"wellington,new zealand": (-41.2865, 174.7762),
	"christchurch,new zealand": (-43.5321, 172.6362),
	"dubai,united arab emirates": (25.2048, 55.2708),
	"abu dhabi,united arab emirates": (24.4539, 54.3773),
	"sharjah,united arab emirates": (25.3463, 55.4209),
	"london,united kingdom": (51.5074, -0.1278),
	"manchester,united kingdom": (53.4808, -2.2426),
	"birmingham,united kingdom": (52.4862, -1.8904),
	"toronto,canada": (43.6532, -79.3832),
	"vancouver,canada": (49.2827, -123.1207),
	"montreal,canada": (45.5017, -73.5673),
	"calgary,canada": (51.0447, -114.0719),
}


def distance_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
	"""Return the haversine distance between two points in kilometres."""

	phi1, phi2 = math.radians(lat1), math.radians(lat2)
	dphi = math.radians(lat2 - lat1)
	dlambda = math.radians(lng2 - lng1)
	a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
	return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def city_coordinates(city: str, country: str) -> Optional[Tuple[float, float]]:
	if not city or not country:
		return None
	return CITY_COORDINATES.get(f"{city.lower()},{country.lower()}")
