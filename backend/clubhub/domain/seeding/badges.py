"""Applies the club and student badge ladders, writing only what changed."""

from __future__ import annotations

import logging

from clubhub.domain.badges import policy
from clubhub.domain.badges.models import BadgeType
from clubhub.domain.seeding.repository import SeedRepository
from clubhub.obs import metrics

logger = logging.getLogger(__name__)


class BadgeTierAssigner:
	def __init__(self, repo: SeedRepository) -> None:
		self._repo = repo

	async def assign_club_badges(self) -> int:
		"""Set each club's tier from its total; tiers may move up or down.

		Returns the number of clubs whose stored tier changed.
		"""
		changed = 0
		for club in await self._repo.fetch_club_standings():
			tier = policy.club_tier(club.total_points)
			if club.badge == tier:
				continue
			await self._repo.set_club_badge(club.club_id, tier)
			metrics.inc_badge_write(BadgeType.CLUB.value)
			changed += 1
			logger.info(
				"Club badge updated",
				extra={"club_id": club.club_id, "total_points": club.total_points, "badge": tier},
			)
		return changed

	async def assign_student_badges(self) -> int:
		"""Award each student the tier they currently qualify for, if not already held.

		Awards are additive: lower tiers are neither removed nor backfilled.
		Returns the number of awards inserted.
		"""
		badge_ids = await self._repo.fetch_badge_ids_by_name(BadgeType.STUDENT)
		awarded = 0
		for student in await self._repo.fetch_students():
			tier = policy.student_tier(student.total_points)
			if tier == policy.NO_BADGE:
				continue
			badge_id = badge_ids.get(tier)
			if badge_id is None:
				logger.warning("No student badge defined for tier", extra={"tier": tier})
				continue
			if await self._repo.has_user_badge(student.user_id, badge_id):
				continue
			await self._repo.insert_user_badge(student.user_id, badge_id)
			metrics.inc_badge_write(BadgeType.STUDENT.value)
			awarded += 1
			logger.info(
				"Student badge awarded",
				extra={"user_id": student.user_id, "total_points": student.total_points, "badge": tier},
			)
		return awarded
