"""Tier ladders for club and student badges."""

from __future__ import annotations

from typing import Sequence, Tuple

# Sentinel tier meaning "no badge".
NO_BADGE = "none"

# Ladders are ordered by descending threshold; the first threshold met wins.
TierLadder = Sequence[Tuple[int, str]]

CLUB_BADGE_LADDER: TierLadder = (
    (2000, "platinum"),
    (1200, "gold"),
    (700, "silver"),
    (300, "bronze"),
    (100, "iron"),
)

STUDENT_BADGE_LADDER: TierLadder = (
    (60, "gold"),
    (40, "silver"),
    (20, "bronze"),
)

POINTS_PER_LEVEL = 20


def resolve_tier(total_points: int, ladder: TierLadder) -> str:
    """Return the highest tier whose threshold ``total_points`` meets."""
    for threshold, name in ladder:
        if total_points >= threshold:
            return name
    return NO_BADGE


def club_tier(total_points: int) -> str:
    return resolve_tier(total_points, CLUB_BADGE_LADDER)


def student_tier(total_points: int) -> str:
    return resolve_tier(total_points, STUDENT_BADGE_LADDER)


def student_level(total_points: int) -> int:
    """Profile level shown next to a student: one level per 20 points, starting at 1."""
    return max(total_points, 0) // POINTS_PER_LEVEL + 1
