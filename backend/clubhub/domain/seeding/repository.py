"""Data access for the seeding batch, bound to one asyncpg connection."""

from __future__ import annotations

from typing import Dict, List

import asyncpg

from clubhub.domain.badges.models import BadgeType
from clubhub.domain.seeding.models import ClubStanding, StudentStanding


class SeedRepository:
	"""Thin data-access layer around a single asyncpg connection.

	Every statement runs on the same connection, so statements issued while a
	transaction from :meth:`transaction` is open belong to it.
	"""

	def __init__(self, conn: asyncpg.Connection) -> None:
		self._conn = conn

	def transaction(self):
		"""Return an unstarted transaction; callers drive start/commit/rollback."""
		return self._conn.transaction()

	# --- Membership phase -------------------------------------------------

	async def fetch_club_member_counts(self) -> Dict[int, int]:
		rows = await self._conn.fetch("SELECT club_id, current_members FROM clubs")
		return {int(row["club_id"]): int(row["current_members"] or 0) for row in rows}

	async def insert_membership(self, user_id: int, club_id: int, points_earned: int) -> None:
		await self._conn.execute(
			"INSERT INTO club_members (user_id, club_id, points_earned) VALUES ($1, $2, $3)",
			user_id,
			club_id,
			points_earned,
		)

	async def add_student_points(self, user_id: int, points: int) -> None:
		await self._conn.execute(
			"UPDATE users SET total_points = total_points + $1 WHERE user_id = $2",
			points,
			user_id,
		)

	async def increment_club_members(self, club_id: int) -> None:
		await self._conn.execute(
			"UPDATE clubs SET current_members = current_members + 1 WHERE club_id = $1",
			club_id,
		)

	# --- Aggregation phase ------------------------------------------------

	async def fetch_club_ids(self) -> List[int]:
		rows = await self._conn.fetch("SELECT club_id FROM clubs ORDER BY club_id")
		return [int(row["club_id"]) for row in rows]

	async def sum_member_points(self, club_id: int) -> int:
		total = await self._conn.fetchval(
			"""
			SELECT COALESCE(SUM(u.total_points), 0)
			FROM club_members cm
			JOIN users u ON cm.user_id = u.user_id
			WHERE cm.club_id = $1
			""",
			club_id,
		)
		return int(total or 0)

	async def set_club_points(self, club_id: int, total_points: int) -> None:
		await self._conn.execute(
			"UPDATE clubs SET total_points = $1 WHERE club_id = $2",
			total_points,
			club_id,
		)

	# --- Badge phase ------------------------------------------------------

	async def fetch_club_standings(self) -> List[ClubStanding]:
		rows = await self._conn.fetch("SELECT club_id, total_points, badge FROM clubs ORDER BY club_id")
		return [
			ClubStanding(
				club_id=int(row["club_id"]),
				total_points=int(row["total_points"] or 0),
				badge=row["badge"],
			)
			for row in rows
		]

	async def set_club_badge(self, club_id: int, badge: str) -> None:
		await self._conn.execute("UPDATE clubs SET badge = $1 WHERE club_id = $2", badge, club_id)

	async def fetch_badge_ids_by_name(self, badge_type: BadgeType) -> Dict[str, int]:
		"""Map lower-cased badge names to ids for one badge type."""
		rows = await self._conn.fetch(
			"SELECT badge_id, badge_name FROM badges WHERE badge_type = $1",
			badge_type.value,
		)
		return {str(row["badge_name"]).lower(): int(row["badge_id"]) for row in rows}

	async def fetch_students(self) -> List[StudentStanding]:
		rows = await self._conn.fetch(
			"SELECT user_id, total_points FROM users WHERE role = 'student' ORDER BY user_id"
		)
		return [
			StudentStanding(user_id=int(row["user_id"]), total_points=int(row["total_points"] or 0))
			for row in rows
		]

	async def has_user_badge(self, user_id: int, badge_id: int) -> bool:
		found = await self._conn.fetchval(
			"SELECT EXISTS(SELECT 1 FROM user_badges WHERE user_id = $1 AND badge_id = $2)",
			user_id,
			badge_id,
		)
		return bool(found)

	async def insert_user_badge(self, user_id: int, badge_id: int) -> None:
		await self._conn.execute(
			"INSERT INTO user_badges (user_id, badge_id) VALUES ($1, $2)",
			user_id,
			badge_id,
		)
