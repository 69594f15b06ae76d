"""Read-side service for users and the student leaderboard."""

from __future__ import annotations

from typing import List, Optional

from clubhub.domain.students.models import User
from clubhub.infra.postgres import get_pool

_USER_COLUMNS = "user_id, name, email, role, total_points, badge"


def _user_from_row(row) -> User:
    return User(
        user_id=row["user_id"],
        name=row["name"],
        email=row["email"],
        role=row["role"],
        total_points=row["total_points"],
        badge=row["badge"],
    )


class StudentService:
    async def list_users(self, role: Optional[str] = None) -> List[User]:
        query = f"SELECT {_USER_COLUMNS} FROM users"
        args = []
        if role:
            query += " WHERE role = $1"
            args.append(role)
        query += " ORDER BY user_id"
        pool = await get_pool()
        async with pool.acquire() as conn:
            rows = await conn.fetch(query, *args)
            return [_user_from_row(row) for row in rows]

    async def leaderboard(self, limit: int = 100) -> List[User]:
        """Students by total points, highest first; admins are not ranked."""
        pool = await get_pool()
        async with pool.acquire() as conn:
            rows = await conn.fetch(
                f"""
                SELECT {_USER_COLUMNS} FROM users
                WHERE role = 'student'
                ORDER BY total_points DESC, user_id ASC
                LIMIT $1
                """,
                limit,
            )
            return [_user_from_row(row) for row in rows]
