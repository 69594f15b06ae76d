"""Pydantic schemas for the badges API."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from clubhub.domain.badges.models import BadgeType


class BadgeResponse(BaseModel):
    badge_id: int
    badge_name: str
    badge_type: BadgeType
    description: Optional[str] = None
    points_required: int


class UserBadgeResponse(BaseModel):
    user_badge_id: int
    user_id: int
    badge_id: int
    awarded_at: Optional[datetime] = None
