"""In-memory view of club occupancy used while assigning memberships."""

from __future__ import annotations

from typing import Dict, Mapping


class ClubCapacityTracker:
	"""Tracks club member counts during a run; persisting them is the committer's job."""

	def __init__(self, member_counts: Mapping[int, int], capacity: int) -> None:
		self._counts: Dict[int, int] = dict(member_counts)
		self._capacity = capacity

	def count(self, club_id: int) -> int:
		return self._counts.get(club_id, 0)

	def has_capacity(self, club_id: int) -> bool:
		return self.count(club_id) < self._capacity

	def record_join(self, club_id: int) -> None:
		self._counts[club_id] = self.count(club_id) + 1
