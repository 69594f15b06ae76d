"""Read-side service for clubs and memberships."""

from __future__ import annotations

from typing import List, Optional

from fastapi import HTTPException

from clubhub.domain.clubs.models import Club, ClubMembership
from clubhub.infra.postgres import get_pool

_CLUB_COLUMNS = "club_id, club_name, description, capacity, current_members, total_points, badge"


def _club_from_row(row) -> Club:
    return Club(
        club_id=row["club_id"],
        club_name=row["club_name"],
        description=row["description"],
        capacity=row["capacity"],
        current_members=row["current_members"],
        total_points=row["total_points"],
        badge=row["badge"],
    )


class ClubService:
    async def list_clubs(self) -> List[Club]:
        pool = await get_pool()
        async with pool.acquire() as conn:
            rows = await conn.fetch(f"SELECT {_CLUB_COLUMNS} FROM clubs ORDER BY club_id")
            return [_club_from_row(row) for row in rows]

    async def get_club(self, club_id: int) -> Club:
        pool = await get_pool()
        async with pool.acquire() as conn:
            row = await conn.fetchrow(f"SELECT {_CLUB_COLUMNS} FROM clubs WHERE club_id = $1", club_id)
            if not row:
                raise HTTPException(status_code=404, detail="Club not found")
            return _club_from_row(row)

    async def list_memberships(
        self,
        *,
        club_id: Optional[int] = None,
        user_id: Optional[int] = None,
    ) -> List[ClubMembership]:
        """List memberships, optionally narrowed to one club and/or one user."""
        query = "SELECT membership_id, user_id, club_id, points_earned, joined_at FROM club_members"
        clauses = []
        args = []
        if club_id is not None:
            args.append(club_id)
            clauses.append(f"club_id = ${len(args)}")
        if user_id is not None:
            args.append(user_id)
            clauses.append(f"user_id = ${len(args)}")
        if clauses:
            query += " WHERE " + " AND ".join(clauses)
        query += " ORDER BY membership_id"

        pool = await get_pool()
        async with pool.acquire() as conn:
            rows = await conn.fetch(query, *args)
            return [
                ClubMembership(
                    membership_id=row["membership_id"],
                    user_id=row["user_id"],
                    club_id=row["club_id"],
                    points_earned=row["points_earned"],
                    joined_at=row["joined_at"],
                )
                for row in rows
            ]

    async def leaderboard(self, limit: int = 100) -> List[Club]:
        """Clubs by total points, highest first; ties go to the lower club id."""
        pool = await get_pool()
        async with pool.acquire() as conn:
            rows = await conn.fetch(
                f"SELECT {_CLUB_COLUMNS} FROM clubs ORDER BY total_points DESC, club_id ASC LIMIT $1",
                limit,
            )
            return [_club_from_row(row) for row in rows]
