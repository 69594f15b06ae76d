"""FastAPI routes for users."""

from __future__ import annotations

from typing import List, Literal, Optional

from fastapi import APIRouter, Query

from clubhub.domain.students import schemas, service

router = APIRouter(prefix="/api", tags=["users"])

_student_service = service.StudentService()


@router.get("/users", response_model=List[schemas.UserResponse])
async def list_users_endpoint(
    role: Optional[Literal["student", "admin"]] = Query(default=None),
) -> List[schemas.UserResponse]:
    users = await _student_service.list_users(role)
    return [
        schemas.UserResponse(
            user_id=user.user_id,
            name=user.name,
            email=user.email,
            role=user.role,
            total_points=user.total_points,
            badge=user.badge,
            level=user.level,
        )
        for user in users
    ]
