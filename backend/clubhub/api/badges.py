"""FastAPI routes for badge definitions and awards."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Query

from clubhub.domain.badges import schemas, service
from clubhub.domain.badges.models import BadgeType

router = APIRouter(prefix="/api", tags=["badges"])

_badge_service = service.BadgeService()


@router.get("/badges", response_model=List[schemas.BadgeResponse])
async def list_badges_endpoint(
    badge_type: Optional[BadgeType] = Query(default=None),
) -> List[schemas.BadgeResponse]:
    badges = await _badge_service.list_badges(badge_type)
    return [schemas.BadgeResponse(**vars(badge)) for badge in badges]


@router.get("/user-badges", response_model=List[schemas.UserBadgeResponse])
async def list_user_badges_endpoint(
    user_id: Optional[int] = Query(default=None),
) -> List[schemas.UserBadgeResponse]:
    awards = await _badge_service.list_user_badges(user_id)
    return [schemas.UserBadgeResponse(**vars(award)) for award in awards]
