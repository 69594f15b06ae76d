"""Service layer coordinating the membership seeding batch."""

from __future__ import annotations

import logging
import time
import uuid
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from clubhub.domain.seeding.aggregation import PointsAggregator
from clubhub.domain.seeding.assignment import MembershipAssignmentGenerator
from clubhub.domain.seeding.badges import BadgeTierAssigner
from clubhub.domain.seeding.capacity import ClubCapacityTracker
from clubhub.domain.seeding.committer import MembershipCommitter
from clubhub.domain.seeding.exceptions import SeedError, SeedPhaseError
from clubhub.domain.seeding.models import SeedReport
from clubhub.domain.seeding.random_source import RandomSource, make_random_source
from clubhub.domain.seeding.repository import SeedRepository
from clubhub.obs import logging as obs_logging
from clubhub.obs import metrics
from clubhub.settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)

PHASE_MEMBERSHIPS = "memberships"
PHASE_AGGREGATION = "aggregation"
PHASE_CLUB_BADGES = "club_badges"
PHASE_STUDENT_BADGES = "student_badges"


@asynccontextmanager
async def _phase(name: str) -> AsyncIterator[None]:
	tokens = obs_logging.bind_context(phase=name)
	start = time.perf_counter()
	try:
		yield
	finally:
		metrics.observe_seed_phase(name, time.perf_counter() - start)
		obs_logging.reset_context(tokens)


class SeedService:
	"""Runs the batch: assign memberships, recompute club points, assign badges.

	Only the membership phase is transactional. The later phases run after the
	commit as independent statements, so a failure there leaves memberships in
	place and skips whatever phases remain.
	"""

	def __init__(self, config: Optional[Settings] = None, *, rng: Optional[RandomSource] = None) -> None:
		self._config = config or default_settings
		self._rng = rng if rng is not None else make_random_source(self._config.seed_random_seed)

	@property
	def student_ids(self) -> range:
		return range(self._config.seed_min_student_id, self._config.seed_max_student_id + 1)

	@property
	def club_ids(self) -> List[int]:
		return list(range(1, self._config.seed_num_clubs + 1))

	async def run(self, repo: SeedRepository, *, run_id: Optional[str] = None) -> SeedReport:
		report = SeedReport(run_id=run_id or uuid.uuid4().hex)
		tokens = obs_logging.bind_context(run_id=report.run_id)
		try:
			async with _phase(PHASE_MEMBERSHIPS):
				await self.assign_memberships(repo, report)
			async with _phase(PHASE_AGGREGATION):
				report.club_totals = await self._post_commit(
					PHASE_AGGREGATION, PointsAggregator(repo).recompute()
				)
			assigner = BadgeTierAssigner(repo)
			async with _phase(PHASE_CLUB_BADGES):
				report.club_badges_changed = await self._post_commit(
					PHASE_CLUB_BADGES, assigner.assign_club_badges()
				)
			async with _phase(PHASE_STUDENT_BADGES):
				report.student_badges_awarded = await self._post_commit(
					PHASE_STUDENT_BADGES, assigner.assign_student_badges()
				)
			logger.info("Seeding run finished", extra=report.as_log_fields())
			return report
		finally:
			obs_logging.reset_context(tokens)

	async def assign_memberships(self, repo: SeedRepository, report: SeedReport) -> int:
		"""Plan and persist every student's joins in a single transaction."""
		generator = MembershipAssignmentGenerator(self.club_ids, self._rng)
		async with MembershipCommitter(repo, points_per_club=self._config.seed_points_per_club) as committer:
			tracker = ClubCapacityTracker(
				await repo.fetch_club_member_counts(),
				self._config.seed_club_capacity,
			)
			for user_id in self.student_ids:
				club_ids = generator.choose_clubs(tracker)
				report.students_processed += 1
				if not club_ids:
					logger.debug("Student joins no clubs", extra={"user_id": user_id})
					continue
				logger.info("Student joining clubs", extra={"user_id": user_id, "club_ids": club_ids})
				for club_id in club_ids:
					await committer.join(user_id, club_id)
					tracker.record_join(club_id)
				report.assignments[user_id] = club_ids
		report.memberships_created = committer.committed
		metrics.inc_memberships_created(committer.committed)
		return committer.committed

	async def _post_commit(self, phase: str, step):
		try:
			return await step
		except SeedError:
			raise
		except Exception as exc:
			logger.error("Seeding phase failed", extra={"failed_phase": phase}, exc_info=True)
			raise SeedPhaseError(phase) from exc
