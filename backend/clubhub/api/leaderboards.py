"""FastAPI routes for club and student leaderboards."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Query

from clubhub.domain.clubs.schemas import ClubLeaderboardRow
from clubhub.domain.clubs.service import ClubService
from clubhub.domain.students.schemas import StudentLeaderboardRow
from clubhub.domain.students.service import StudentService

router = APIRouter(prefix="/api/leaderboards", tags=["leaderboards"])

_club_service = ClubService()
_student_service = StudentService()


@router.get("/clubs", response_model=List[ClubLeaderboardRow])
async def club_leaderboard_endpoint(
	limit: int = Query(default=100, ge=1, le=500),
) -> List[ClubLeaderboardRow]:
	clubs = await _club_service.leaderboard(limit)
	return [
		ClubLeaderboardRow(
			rank=idx,
			club_id=club.club_id,
			club_name=club.club_name,
			total_points=club.total_points,
			current_members=club.current_members,
			badge=club.badge,
		)
		for idx, club in enumerate(clubs, start=1)
	]


@router.get("/students", response_model=List[StudentLeaderboardRow])
async def student_leaderboard_endpoint(
	limit: int = Query(default=100, ge=1, le=500),
) -> List[StudentLeaderboardRow]:
	students = await _student_service.leaderboard(limit)
	return [
		StudentLeaderboardRow(
			rank=idx,
			user_id=student.user_id,
			name=student.name,
			total_points=student.total_points,
			level=student.level,
		)
		for idx, student in enumerate(students, start=1)
	]
