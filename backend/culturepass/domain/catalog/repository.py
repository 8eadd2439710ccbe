"""User directory collaborators: profile lookups and community membership."""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Protocol, Sequence

import asyncpg

from culturepass.domain.catalog.models import Community, UserContext
from culturepass.infra.postgres import get_pool


class UserDirectory(Protocol):
	async def get_user(self, user_id: str) -> Optional[UserContext]: ...

	async def get_user_communities(self, user_id: str) -> List[Community]: ...

	async def get_all_communities(self) -> List[Community]: ...

	async def list_users(self) -> List[UserContext]: ...

	async def ping(self) -> None: ...


class MemoryUserDirectory:
	"""Directory backed by in-process seed data."""

	def __init__(
		self,
		*,
		users: Iterable[UserContext] = (),
		communities: Iterable[Community] = (),
		memberships: Optional[Mapping[str, Sequence[str]]] = None,
	) -> None:
		self._users: Dict[str, UserContext] = {user.id: user for user in users}
		self._communities: List[Community] = list(communities)
		self._memberships: Dict[str, List[str]] = {
			user_id: list(ids) for user_id, ids in (memberships or {}).items()
		}

	def add_user(self, user: UserContext, community_ids: Sequence[str] = ()) -> None:
		self._users[user.id] = user
		self._memberships[user.id] = list(community_ids)

	async def get_user(self, user_id: str) -> Optional[UserContext]:
		return self._users.get(user_id)

	async def get_user_communities(self, user_id: str) -> List[Community]:
		joined = set(self._memberships.get(user_id, ()))
		return [community for community in self._communities if community.id in joined]

	async def get_all_communities(self) -> List[Community]:
		return list(self._communities)

	async def list_users(self) -> List[UserContext]:
		return list(self._users.values())

	async def ping(self) -> None:
		return None


_USER_COLUMNS = """
	id, COALESCE(display_name, '') AS display_name, username,
	COALESCE(city, '') AS city, COALESCE(country, '') AS country,
	COALESCE(origin_country, '') AS origin_country, latitude, longitude,
	COALESCE(radius_km, 50) AS radius_km,
	COALESCE(indigenous_visibility_enabled, TRUE) AS indigenous_visibility_enabled,
	COALESCE(homeland_content_enabled, TRUE) AS homeland_content_enabled
"""

_COMMUNITY_COLUMNS = """
	c.id, c.name, COALESCE(c.description, '') AS description,
	c.community_type::text AS category, COALESCE(c.member_count, 0) AS member_count,
	COALESCE(c.is_indigenous, FALSE) AS is_indigenous
"""


def _user_from_row(row: asyncpg.Record) -> UserContext:
	return UserContext(
		id=str(row["id"]),
		display_name=row["display_name"],
		username=row["username"],
		city=row["city"],
		country=row["country"],
		origin_country=row["origin_country"],
		latitude=row["latitude"],
		longitude=row["longitude"],
		radius_km=float(row["radius_km"]),
		indigenous_visibility_enabled=bool(row["indigenous_visibility_enabled"]),
		homeland_content_enabled=bool(row["homeland_content_enabled"]),
	)


def _community_from_row(row: asyncpg.Record) -> Community:
	return Community(
		id=str(row["id"]),
		name=row["name"],
		description=row["description"],
		category=row["category"] or "",
		members=int(row["member_count"]),
		is_indigenous=bool(row["is_indigenous"]),
	)


class PostgresUserDirectory:
	"""Directory reading ``users``, ``communities`` and ``user_communities``."""

	def __init__(self, pool: Optional[asyncpg.Pool] = None) -> None:
		self._pool = pool

	async def _get_pool(self) -> asyncpg.Pool:
		if self._pool is None:
			self._pool = await get_pool()
		return self._pool

	async def get_user(self, user_id: str) -> Optional[UserContext]:
		pool = await self._get_pool()
		async with pool.acquire() as conn:
			row = await conn.fetchrow(f"SELECT {_USER_COLUMNS} FROM users WHERE id = $1", user_id)
		if row is None:
			return None
		return _user_from_row(row)

	async def get_user_communities(self, user_id: str) -> List[Community]:
		pool = await self._get_pool()
		async with pool.acquire() as conn:
			rows = await conn.fetch(
				f"""
				SELECT {_COMMUNITY_COLUMNS}
				FROM user_communities uc
				JOIN communities c ON c.id = uc.community_id
				WHERE uc.user_id = $1
				ORDER BY uc.joined_at ASC, c.id ASC
				""",
				user_id,
			)
		return [_community_from_row(row) for row in rows]

	async def get_all_communities(self) -> List[Community]:
		pool = await self._get_pool()
		async with pool.acquire() as conn:
			rows = await conn.fetch(
				f"SELECT {_COMMUNITY_COLUMNS} FROM communities c ORDER BY c.created_at ASC, c.id ASC"
			)
		return [_community_from_row(row) for row in rows]

	async def list_users(self) -> List[UserContext]:
		pool = await self._get_pool()
		async with pool.acquire() as conn:
			rows = await conn.fetch(f"SELECT {_USER_COLUMNS} FROM users ORDER BY created_at ASC, id ASC")
		return [_user_from_row(row) for row in rows]

	async def ping(self) -> None:
		pool = await self._get_pool()
		async with pool.acquire() as conn:
			await conn.execute("SELECT 1")
