"""Randomised policy deciding which clubs each student joins."""

from __future__ import annotations

from typing import List, Sequence

from clubhub.domain.seeding.capacity import ClubCapacityTracker
from clubhub.domain.seeding.random_source import RandomSource, randbelow

# Count policy: P(0 clubs)=0.2, P(1-4 clubs)=0.7, P(5-6 clubs)=0.1.
NO_CLUBS_CUTOFF = 0.2
REGULAR_CUTOFF = 0.9
REGULAR_RANGE = (1, 4)
ENTHUSIAST_RANGE = (5, 6)


class MembershipAssignmentGenerator:
	"""Pure computation over the tracker's current view; never writes."""

	def __init__(self, club_ids: Sequence[int], rng: RandomSource) -> None:
		self._club_ids = list(club_ids)
		self._rng = rng

	def draw_club_count(self) -> int:
		roll = self._rng.random()
		if roll < NO_CLUBS_CUTOFF:
			return 0
		low, high = REGULAR_RANGE if roll < REGULAR_CUTOFF else ENTHUSIAST_RANGE
		return low + randbelow(self._rng, high - low + 1)

	def shuffled_club_ids(self) -> List[int]:
		"""Fisher-Yates shuffle of every club id."""
		club_ids = list(self._club_ids)
		for i in range(len(club_ids) - 1, 0, -1):
			j = randbelow(self._rng, i + 1)
			club_ids[i], club_ids[j] = club_ids[j], club_ids[i]
		return club_ids

	def choose_clubs(self, tracker: ClubCapacityTracker) -> List[int]:
		"""Pick distinct clubs for one student.

		Returns fewer clubs than drawn when not enough clubs have room.
		"""
		wanted = self.draw_club_count()
		if wanted == 0:
			return []
		available = [club_id for club_id in self.shuffled_club_ids() if tracker.has_capacity(club_id)]
		return available[:wanted]
