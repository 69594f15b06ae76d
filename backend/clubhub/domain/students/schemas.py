"""Pydantic schemas for the users API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class UserResponse(BaseModel):
    user_id: int
    name: str
    email: str
    role: str
    total_points: int
    badge: Optional[str] = None
    level: int = Field(..., ge=1)


class StudentLeaderboardRow(BaseModel):
    rank: int = Field(..., ge=1)
    user_id: int
    name: str
    total_points: int
    level: int = Field(..., ge=1)
