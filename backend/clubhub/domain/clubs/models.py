"""Domain models for Clubs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Club:
    club_id: int
    club_name: str
    description: Optional[str]
    capacity: int
    current_members: int
    total_points: int
    badge: Optional[str]


@dataclass
class ClubMembership:
    membership_id: int
    user_id: int
    club_id: int
    points_earned: int
    joined_at: Optional[datetime] = None
