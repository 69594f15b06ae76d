"""Domain models for badges."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class BadgeType(str, Enum):
    CLUB = "club"
    STUDENT = "student"


@dataclass
class BadgeDefinition:
    badge_id: int
    badge_name: str
    badge_type: BadgeType
    description: Optional[str]
    points_required: int


@dataclass
class UserBadge:
    user_badge_id: int
    user_id: int
    badge_id: int
    awarded_at: Optional[datetime] = None
