"""Comment routes."""

from typing import Annotated, Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Depends, status
from fastapi.security import HTTPAuthorizationCredentials

from forum.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from forum.domain.service import JWTService
from forum.interface.api.dependencies import bearer_scheme, require_user_id, success

router = APIRouter(prefix="/threads", tags=["comments"], route_class=DishkaRoute)


@router.post("/{thread_id}/comments", status_code=status.HTTP_201_CREATED)
async def add_comment(
    thread_id: str,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    payload: Annotated[Any, Body()] = None,
) -> dict[str, Any]:
    """Comment on a thread.

    Requires authentication.
    """
    user_id = require_user_id(jwt_service, credentials)
    added_comment = await add_comment_use_case.execute(
        AddCommentRequest(payload=payload, thread_id=thread_id, owner=user_id)
    )
    return success({"addedComment": added_comment.model_dump(by_alias=True)})


@router.delete("/{thread_id}/comments/{comment_id}")
async def delete_comment(
    thread_id: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
) -> dict[str, Any]:
    """Soft-delete a comment.

    Only the comment owner can delete it.
    """
    user_id = require_user_id(jwt_service, credentials)
    await delete_comment_use_case.execute(
        DeleteCommentRequest(
            thread_id=thread_id, comment_id=comment_id, user_id=user_id
        )
    )
    return success()
