"""Exceptions raised by the membership seeding batch."""

from __future__ import annotations


class SeedError(Exception):
	"""Base class for seeding failures. Every seeding failure ends the run."""

	detail: str = "seed_error"

	def __init__(self, detail: str | None = None) -> None:
		super().__init__(detail or self.detail)
		if detail:
			self.detail = detail


class SeedConnectionError(SeedError):
	"""The database could not be reached; nothing was written."""

	detail = "seed_connection_failed"


class MembershipCommitError(SeedError):
	"""A write inside the membership transaction failed and the batch was rolled back."""

	detail = "membership_batch_rolled_back"


class SeedPhaseError(SeedError):
	"""A post-commit phase (aggregation or badges) failed; later phases were skipped."""

	detail = "seed_phase_failed"

	def __init__(self, phase: str, detail: str | None = None) -> None:
		super().__init__(detail or f"{self.detail}:{phase}")
		self.phase = phase
