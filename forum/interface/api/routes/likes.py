"""Like routes."""

from typing import Annotated, Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials

from forum.application.usecase.like import (
    ToggleCommentLikeRequest,
    ToggleCommentLikeUseCase,
)
from forum.domain.service import JWTService
from forum.interface.api.dependencies import bearer_scheme, require_user_id, success

router = APIRouter(prefix="/threads", tags=["likes"], route_class=DishkaRoute)


@router.put("/{thread_id}/comments/{comment_id}/likes")
async def toggle_comment_like(
    thread_id: str,
    comment_id: str,
    toggle_comment_like_use_case: FromDishka[ToggleCommentLikeUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
) -> dict[str, Any]:
    """Like a comment, or remove the like if the user already likes it.

    Requires authentication.
    """
    user_id = require_user_id(jwt_service, credentials)
    await toggle_comment_like_use_case.execute(
        ToggleCommentLikeRequest(
            thread_id=thread_id, comment_id=comment_id, user_id=user_id
        )
    )
    return success()
