"""Value objects for the membership seeding batch."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(slots=True)
class ClubStanding:
	club_id: int
	total_points: int
	badge: str | None


@dataclass(slots=True)
class StudentStanding:
	user_id: int
	total_points: int


@dataclass(slots=True)
class SeedReport:
	"""Outcome of one seeding run."""

	run_id: str
	students_processed: int = 0
	memberships_created: int = 0
	assignments: Dict[int, List[int]] = field(default_factory=dict)
	club_totals: Dict[int, int] = field(default_factory=dict)
	club_badges_changed: int = 0
	student_badges_awarded: int = 0

	def as_log_fields(self) -> Dict[str, int | str]:
		return {
			"run_id": self.run_id,
			"students_processed": self.students_processed,
			"memberships_created": self.memberships_created,
			"club_badges_changed": self.club_badges_changed,
			"student_badges_awarded": self.student_badges_awarded,
		}
