"""Domain models for students and other users."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from clubhub.domain.badges.policy import student_level


@dataclass
class User:
    user_id: int
    name: str
    email: str
    role: str  # 'student', 'admin'
    total_points: int
    badge: Optional[str] = None

    @property
    def level(self) -> int:
        return student_level(self.total_points)
