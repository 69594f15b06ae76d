"""All-or-nothing persistence of planned club memberships."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any, Optional, Type

from clubhub.domain.seeding.exceptions import MembershipCommitError
from clubhub.domain.seeding.repository import SeedRepository

logger = logging.getLogger(__name__)


class MembershipCommitter:
	"""Applies joins inside one explicit transaction spanning the whole batch.

	Each join inserts the membership, credits the student and bumps the club's
	persisted member count. Leaving the ``async with`` block normally commits;
	any exception rolls back every join of the batch and is re-raised as
	:class:`MembershipCommitError`.
	"""

	def __init__(self, repo: SeedRepository, *, points_per_club: int) -> None:
		self._repo = repo
		self._points_per_club = points_per_club
		self._tx: Any = None
		self._applied = 0
		self.committed = 0

	@property
	def applied(self) -> int:
		"""Joins applied in the open transaction, not yet durable."""
		return self._applied

	async def begin(self) -> None:
		if self._tx is not None:
			raise RuntimeError("membership transaction already started")
		self._tx = self._repo.transaction()
		await self._tx.start()
		self._applied = 0
		logger.info("Membership transaction started")

	async def join(self, user_id: int, club_id: int) -> None:
		if self._tx is None:
			raise RuntimeError("membership transaction not started")
		await self._repo.insert_membership(user_id, club_id, self._points_per_club)
		await self._repo.add_student_points(user_id, self._points_per_club)
		await self._repo.increment_club_members(club_id)
		self._applied += 1

	async def commit(self) -> int:
		if self._tx is None:
			raise RuntimeError("membership transaction not started")
		await self._tx.commit()
		self._tx = None
		self.committed = self._applied
		logger.info("Membership transaction committed", extra={"memberships": self.committed})
		return self.committed

	async def rollback(self) -> None:
		if self._tx is None:
			return
		tx, self._tx = self._tx, None
		discarded, self._applied = self._applied, 0
		await tx.rollback()
		logger.warning("Membership transaction rolled back", extra={"discarded_memberships": discarded})

	async def __aenter__(self) -> "MembershipCommitter":
		try:
			await self.begin()
		except Exception as exc:
			# __aexit__ does not run when entering fails.
			self._tx = None
			logger.error("Membership transaction could not start", exc_info=True)
			raise MembershipCommitError() from exc
		return self

	async def __aexit__(
		self,
		exc_type: Optional[Type[BaseException]],
		exc: Optional[BaseException],
		tb: Optional[TracebackType],
	) -> bool:
		if exc is None:
			try:
				await self.commit()
			except Exception as commit_exc:
				await self._rollback_quietly()
				logger.error("Membership commit failed", exc_info=True)
				raise MembershipCommitError() from commit_exc
			return False
		await self._rollback_quietly()
		if isinstance(exc, Exception):
			logger.error("Membership batch failed", exc_info=(exc_type, exc, tb))
			raise MembershipCommitError() from exc
		return False

	async def _rollback_quietly(self) -> None:
		try:
			await self.rollback()
		except Exception:  # pragma: no cover - connection already broken
			logger.error("Rollback of membership transaction failed", exc_info=True)
