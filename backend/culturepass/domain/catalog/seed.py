"""Sample content and users backing the in-memory catalog."""

from __future__ import annotations

from typing import Dict, List

from culturepass.domain.catalog.models import (
	Activity,
	Business,
	Community,
	ContentCatalog,
	Event,
	Spotlight,
	UserContext,
)
from culturepass.domain.catalog.repository import MemoryUserDirectory

_ATSI = "Aboriginal & Torres Strait Islander"

SAMPLE_EVENTS = (
	Event(
		id="e1",
		title="Onam Grand Celebration 2026",
		description="Join us for the biggest Onam celebration in Sydney featuring traditional Onasadya, Thiruvathirakali dance performances, boat races, and cultural programs.",
		date="2026-03-15",
		venue="Sydney Olympic Park",
		category="Festivals",
		community_tag="Malayalee",
		city="Sydney",
		country="Australia",
		attending=1456,
		is_featured=True,
		price_label="From $45",
	),
	Event(
		id="e2",
		title="Tamil Pongal Festival",
		description="Celebrate the harvest festival of Pongal with traditional cooking demonstrations, Kolam competitions, folk music, and Bharatanatyam performances.",
		date="2026-03-20",
		venue="Parramatta Park",
		category="Festivals",
		community_tag="Tamil",
		city="Sydney",
		country="Australia",
		attending=3200,
		is_featured=True,
		price_label="Free",
	),
	Event(
		id="e3",
		title="Multicultural Food & Music Night",
		description="An evening celebrating the diversity of our community through food stalls from 20+ cultures, live music performances, and interactive cooking workshops.",
		date="2026-03-22",
		venue="Melbourne Convention Centre",
		category="Food & Cooking",
		community_tag="Multicultural",
		city="Melbourne",
		country="Australia",
		attending=2100,
		is_featured=True,
		price_label="From $25",
	),
	Event(
		id="e4",
		title="Bollywood Dance Workshop",
		description="Learn the latest Bollywood dance moves with professional choreographers. All skill levels welcome.",
		date="2026-03-25",
		venue="Blacktown Arts Centre",
		category="Dance",
		community_tag="Punjabi",
		city="Sydney",
		country="Australia",
		attending=38,
		price_label="$20",
	),
	Event(
		id="e5",
		title="Auckland Diwali Festival",
		description="The biggest Diwali celebration in New Zealand! Fireworks, food stalls, live music, dance performances, and market stalls.",
		date="2026-04-01",
		venue="Aotea Square",
		category="Festivals",
		community_tag="Multicultural",
		city="Auckland",
		country="New Zealand",
		attending=7500,
		is_featured=True,
		price_label="Free",
	),
	Event(
		id="e7",
		title="Youth Business Pitch Night",
		description="Young entrepreneurs from multicultural backgrounds pitch their startup ideas to a panel of experienced mentors and investors.",
		date="2026-04-05",
		venue="WeWork George Street",
		category="Business",
		community_tag="Youth",
		city="Sydney",
		country="Australia",
		attending=110,
		price_label="$10",
	),
	Event(
		id="e8",
		title="Classical Carnatic Music Concert",
		description="An evening of sublime Carnatic music featuring renowned artists from India performing ragas and kritis.",
		date="2026-04-10",
		venue="Sydney Town Hall",
		category="Music",
		community_tag="Tamil",
		city="Sydney",
		country="Australia",
		attending=520,
		price_label="From $55",
	),
	Event(
		id="e9",
		title="Brisbane Holi Festival of Colours",
		description="Celebrate the festival of colours at South Bank with organic colours, Bollywood DJ, food trucks, and dance performances.",
		date="2026-03-29",
		venue="South Bank Parklands",
		category="Festivals",
		community_tag="Multicultural",
		city="Brisbane",
		country="Australia",
		attending=2800,
		is_featured=True,
		price_label="$15",
	),
	Event(
		id="e10",
		title="Perth Desi Night Live",
		description="An evening of live Bollywood and Punjabi music with top DJs, food stalls, and dance floor under the stars.",
		date="2026-04-12",
		venue="Langley Park",
		category="Music",
		community_tag="Punjabi",
		city="Perth",
		country="Australia",
		attending=980,
		is_featured=True,
		price_label="$30",
	),
	Event(
		id="e18",
		title="Abu Dhabi Onam Sadhya",
		description="A grand Onam Sadhya feast with over 25 traditional dishes served on banana leaves, followed by cultural performances.",
		date="2026-04-25",
		venue="ADNEC",
		category="Festivals",
		community_tag="Malayalee",
		city="Abu Dhabi",
		country="United Arab Emirates",
		attending=2400,
		is_featured=True,
		price_label="From AED 220",
	),
	Event(
		id="e22",
		title="London Navratri Garba Night",
		description="Nine nights of Garba and Dandiya Raas with live music and traditional Gujarati food.",
		date="2026-04-15",
		venue="ExCeL London",
		category="Dance",
		community_tag="Gujarati",
		city="London",
		country="United Kingdom",
		attending=4200,
		is_featured=True,
		price_label="From £20",
	),
	Event(
		id="e26",
		title="Brampton Vaisakhi Parade",
		description="Celebrate Vaisakhi with a colourful Nagar Kirtan parade, free langar, bhangra performances, and community stalls.",
		date="2026-04-13",
		venue="Brampton City Hall",
		category="Festivals",
		community_tag="Punjabi",
		city="Brampton",
		country="Canada",
		attending=15000,
		is_featured=True,
		price_label="Free",
	),
	Event(
		id="ei1",
		title="NAIDOC Week Opening Ceremony",
		description="Celebrate the history, culture and achievements of Aboriginal and Torres Strait Islander peoples with a Welcome to Country, smoking ceremony and performances.",
		date="2026-07-05",
		venue="The Domain",
		category="Festivals",
		community_tag=_ATSI,
		city="Sydney",
		country="Australia",
		attending=7500,
		is_featured=True,
		indigenous_tags=("Indigenous-led", "NAIDOC Week", "Cultural Ceremony"),
		price_label="Free",
	),
	Event(
		id="ei2",
		title="Dreamtime Stories Under the Stars",
		description="An evening of traditional storytelling by Aboriginal Elders under the night sky.",
		date="2026-06-20",
		venue="Royal Botanic Gardens",
		category="Arts",
		community_tag=_ATSI,
		city="Melbourne",
		country="Australia",
		attending=240,
		is_featured=True,
		indigenous_tags=("Indigenous-led", "Cultural Ceremony"),
		price_label="$25",
	),
	Event(
		id="ei3",
		title="First Nations Art Exhibition",
		description="Contemporary and traditional works from First Nations artists across Queensland.",
		date="2026-05-10",
		venue="QAGOMA",
		category="Arts",
		community_tag=_ATSI,
		city="Brisbane",
		country="Australia",
		attending=350,
		indigenous_tags=("Indigenous-led", "First Nations Owned"),
		price_label="$15",
	),
	Event(
		id="ei5",
		title="Reconciliation Week Concert",
		description="A free concert featuring First Nations musicians celebrating National Reconciliation Week.",
		date="2026-05-27",
		venue="Sydney Opera House",
		category="Music",
		community_tag=_ATSI,
		city="Sydney",
		country="Australia",
		attending=4200,
		is_featured=True,
		indigenous_tags=("Indigenous-led", "Reconciliation Week"),
		price_label="Free",
	),
)

SAMPLE_COMMUNITIES = (
	Community("c1", "Malayalee Community", "Connecting Kerala diaspora across Australia and New Zealand.", "Cultural", 12500, "Sydney", "Australia"),
	Community("c2", "Tamil Cultural Forum", "Preserving and celebrating Tamil heritage through language, arts, music, and festivals.", "Cultural", 9800, "Sydney", "Australia"),
	Community("c3", "Punjabi Association", "Bhangra, music, food, and festivities bringing Punjabi culture to the Southern Hemisphere.", "Cultural", 7200, "Sydney", "Australia"),
	Community("c4", "Multicultural Victoria", "Celebrating the diversity of Melbourne and Victoria through inclusive community programs.", "Regional", 25000, "Melbourne", "Australia"),
	Community("c5", "Indian Community NZ", "Supporting the Indian diaspora in New Zealand with cultural events and networking.", "Cultural", 15000, "Auckland", "New Zealand"),
	Community("c6", "Bengali Association", "Durga Puja, Rabindra Sangeet, and Bengali cultural celebrations.", "Cultural", 4500, "Sydney", "Australia"),
	Community("c7", "Youth Network", "Empowering young multicultural Australians through mentorship and social events.", "Youth", 8000, "Sydney", "Australia"),
	Community("c8", "Filipino Community", "Bringing Filipino traditions, food, music, and community spirit to Australian shores.", "Cultural", 11000, "Sydney", "Australia"),
	Community("c13", "Abu Dhabi Kerala Samajam", "Malayalee community organisation in Abu Dhabi promoting Kerala culture and festivals.", "Cultural", 18000, "Abu Dhabi", "United Arab Emirates"),
	Community("c16", "Toronto Tamil Community", "Cultural preservation, language programs, and community events for Tamils in Toronto.", "Cultural", 28000, "Toronto", "Canada"),
	Community("ci1", "First Nations Cultural Council", "Supporting Aboriginal and Torres Strait Islander cultural preservation and artistic expression.", "Indigenous", 12500, "Sydney", "Australia", True),
	Community("ci2", "Yolngu Cultural Exchange", "Connecting Yolngu community members with language preservation and traditional arts.", "Indigenous", 3200, "Darwin", "Australia", True),
)

SAMPLE_BUSINESSES = (
	Business("b1", "Spice Route Kitchen", "Authentic South Indian and Kerala cuisine. Catering for events up to 500 guests.", "Restaurants", "Parramatta, NSW", "Sydney", "Australia", 4.8),
	Business("b2", "Ranga Photography", "Specializing in cultural events, weddings, and portraits.", "Photographers", "Sydney CBD, NSW", "Sydney", "Australia", 4.9),
	Business("b3", "Shakti Events & Decor", "Full-service event planning for cultural celebrations, weddings, and corporate events.", "Event Planners", "Melbourne, VIC", "Melbourne", "Australia", 4.7),
	Business("b8", "Auckland Indian Bazaar", "Multi-purpose event and market space in the heart of Auckland.", "Venues", "Auckland, NZ", "Auckland", "New Zealand", 4.5),
	Business("bi1", "Boomalli Aboriginal Artists", "Aboriginal-owned cooperative gallery showcasing contemporary Indigenous art.", "Art Gallery", "Chippendale, Sydney", "Sydney", "Australia", 4.9, True),
	Business("bi2", "Koskela Design", "Indigenous-owned design studio creating furniture and homewares with Aboriginal communities.", "Furniture & Homewares", "Rosebery, Sydney", "Sydney", "Australia", 4.8, True),
	Business("bi3", "Mabu Mabu", "First Nations-owned restaurant celebrating native Australian ingredients and Torres Strait Islander cuisine.", "Restaurant", "Federation Square, Melbourne", "Melbourne", "Australia", 4.7, True),
)

SAMPLE_ACTIVITIES = (
	Activity("a1", "Luna Park Sydney", "Iconic harbourside amusement park with rides and views of the Harbour Bridge.", "Theme Parks", "Milsons Point, NSW", "Sydney", "Australia"),
	Activity("a3", "Pottery & Chai Workshop", "Learn traditional Indian pottery techniques while enjoying authentic chai.", "Workshops", "Newtown, NSW", "Sydney", "Australia"),
	Activity(
		"ai1",
		"Aboriginal Cultural Walking Tour",
		"Guided walk through Sydney exploring Aboriginal rock art, middens, and sacred sites with a Gadigal knowledge keeper.",
		"Cultural Tours",
		"The Rocks, Sydney",
		"Sydney",
		"Australia",
		("Indigenous-led", "First Nations Owned"),
	),
	Activity(
		"ai2",
		"Boomerang & Spear Throwing Workshop",
		"Learn traditional boomerang and spear throwing techniques from Aboriginal elders.",
		"Outdoor Adventure",
		"Kings Park, Perth",
		"Perth",
		"Australia",
		("Indigenous-led",),
	),
)

SAMPLE_SPOTLIGHTS = (
	Spotlight("is1", "artist", "Artist of the Week", "Warrina Designs", "Contemporary Aboriginal textile art blending traditional dot painting with modern fashion design.", "bi1", "business", "Wiradjuri"),
	Spotlight("is2", "business", "Indigenous Business Feature", "Mabu Mabu Restaurant", "Torres Strait Islander cuisine celebrating native Australian ingredients in the heart of Melbourne.", "bi3", "business", "Torres Strait Islander"),
	Spotlight("is3", "event", "Cultural Event", "NAIDOC Week Opening", "Annual celebration honouring the history, culture, and achievements of Aboriginal and Torres Strait Islander peoples.", "ei1", "event", "Multi-Nation"),
	Spotlight("is4", "community", "Community of the Month", "First Nations Cultural Council", "Supporting cultural preservation and artistic expression for Aboriginal communities across Australia.", "ci1", "community", "Multi-Nation"),
)

SAMPLE_USERS = (
	UserContext(
		id="u1",
		display_name="Raman Arc",
		username="ramanarc",
		city="Sydney",
		country="Australia",
		origin_country="India",
		latitude=-33.8688,
		longitude=151.2093,
	),
	UserContext(
		id="u2",
		display_name="Mei Lin",
		username="meilin",
		city="Melbourne",
		country="Australia",
		origin_country="China",
		latitude=-37.8136,
		longitude=144.9631,
		radius_km=25.0,
	),
	UserContext(
		id="u3",
		display_name="Maria Santos",
		username="mariasantos",
		city="Auckland",
		country="New Zealand",
		origin_country="Philippines",
		indigenous_visibility_enabled=False,
	),
)

SAMPLE_MEMBERSHIPS: Dict[str, List[str]] = {
	"u1": ["c1", "c2"],
	"u2": ["c4"],
	"u3": ["c8"],
}


def build_sample_catalog() -> ContentCatalog:
	return ContentCatalog(
		events=SAMPLE_EVENTS,
		communities=SAMPLE_COMMUNITIES,
		businesses=SAMPLE_BUSINESSES,
		activities=SAMPLE_ACTIVITIES,
		spotlights=SAMPLE_SPOTLIGHTS,
	)


def build_sample_directory() -> MemoryUserDirectory:
	return MemoryUserDirectory(
		users=SAMPLE_USERS,
		communities=SAMPLE_COMMUNITIES,
		memberships=SAMPLE_MEMBERSHIPS,
	)
