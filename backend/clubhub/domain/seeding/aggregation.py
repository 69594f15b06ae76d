"""Recomputes club point totals from committed memberships."""

from __future__ import annotations

import logging
from typing import Dict

from clubhub.domain.seeding.repository import SeedRepository

logger = logging.getLogger(__name__)


class PointsAggregator:
	"""Overwrites each club's total with the sum of its members' point totals.

	The stored club total is only a cache of that sum, so it is never patched
	incrementally. Running twice over unchanged memberships writes the same values.
	"""

	def __init__(self, repo: SeedRepository) -> None:
		self._repo = repo

	async def recompute(self) -> Dict[int, int]:
		totals: Dict[int, int] = {}
		for club_id in await self._repo.fetch_club_ids():
			total = await self._repo.sum_member_points(club_id)
			await self._repo.set_club_points(club_id, total)
			totals[club_id] = total
			logger.info("Club total points updated", extra={"club_id": club_id, "total_points": total})
		return totals
