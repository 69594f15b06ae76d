"""Pydantic schemas for Clubs API."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ClubResponse(BaseModel):
    club_id: int
    club_name: str
    description: Optional[str] = None
    capacity: int
    current_members: int
    total_points: int
    badge: Optional[str] = None


class ClubMembershipResponse(BaseModel):
    membership_id: int
    user_id: int
    club_id: int
    points_earned: int
    joined_at: Optional[datetime] = None


class ClubLeaderboardRow(BaseModel):
    rank: int = Field(..., ge=1)
    club_id: int
    club_name: str
    total_points: int
    current_members: int
    badge: Optional[str] = None
