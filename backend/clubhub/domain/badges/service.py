"""Read-side service for badge definitions and awards."""

from __future__ import annotations

from typing import List, Optional

from clubhub.domain.badges.models import BadgeDefinition, BadgeType, UserBadge
from clubhub.infra.postgres import get_pool


class BadgeService:
    async def list_badges(self, badge_type: Optional[BadgeType] = None) -> List[BadgeDefinition]:
        query = "SELECT badge_id, badge_name, badge_type, description, points_required FROM badges"
        args = []
        if badge_type is not None:
            query += " WHERE badge_type = $1"
            args.append(badge_type.value)
        query += " ORDER BY badge_type, points_required"
        pool = await get_pool()
        async with pool.acquire() as conn:
            rows = await conn.fetch(query, *args)
            return [
                BadgeDefinition(
                    badge_id=row["badge_id"],
                    badge_name=row["badge_name"],
                    badge_type=BadgeType(row["badge_type"]),
                    description=row["description"],
                    points_required=row["points_required"],
                )
                for row in rows
            ]

    async def list_user_badges(self, user_id: Optional[int] = None) -> List[UserBadge]:
        query = "SELECT user_badge_id, user_id, badge_id, awarded_at FROM user_badges"
        args = []
        if user_id is not None:
            query += " WHERE user_id = $1"
            args.append(user_id)
        query += " ORDER BY user_badge_id"
        pool = await get_pool()
        async with pool.acquire() as conn:
            rows = await conn.fetch(query, *args)
            return [
                UserBadge(
                    user_badge_id=row["user_badge_id"],
                    user_id=row["user_id"],
                    badge_id=row["badge_id"],
                    awarded_at=row["awarded_at"],
                )
                for row in rows
            ]
