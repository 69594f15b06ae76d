"""FastAPI routes for clubs and memberships."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Query

from clubhub.domain.clubs import schemas, service

router = APIRouter(prefix="/api", tags=["clubs"])

_club_service = service.ClubService()


@router.get("/clubs", response_model=List[schemas.ClubResponse])
async def list_clubs_endpoint() -> List[schemas.ClubResponse]:
    clubs = await _club_service.list_clubs()
    return [schemas.ClubResponse(**vars(club)) for club in clubs]


@router.get("/clubs/{club_id}", response_model=schemas.ClubResponse)
async def get_club_endpoint(club_id: int) -> schemas.ClubResponse:
    club = await _club_service.get_club(club_id)
    return schemas.ClubResponse(**vars(club))


@router.get("/club-members", response_model=List[schemas.ClubMembershipResponse])
async def list_memberships_endpoint(
    club_id: Optional[int] = Query(default=None),
    user_id: Optional[int] = Query(default=None),
) -> List[schemas.ClubMembershipResponse]:
    memberships = await _club_service.list_memberships(club_id=club_id, user_id=user_id)
    return [schemas.ClubMembershipResponse(**vars(m)) for m in memberships]
