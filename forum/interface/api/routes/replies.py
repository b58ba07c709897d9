"""Reply routes."""

from typing import Annotated, Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Depends, status
from fastapi.security import HTTPAuthorizationCredentials

from forum.application.usecase.reply import (
    AddReplyRequest,
    AddReplyUseCase,
    DeleteReplyRequest,
    DeleteReplyUseCase,
)
from forum.domain.service import JWTService
from forum.interface.api.dependencies import bearer_scheme, require_user_id, success

router = APIRouter(prefix="/threads", tags=["replies"], route_class=DishkaRoute)


@router.post(
    "/{thread_id}/comments/{comment_id}/replies",
    status_code=status.HTTP_201_CREATED,
)
async def add_reply(
    thread_id: str,
    comment_id: str,
    add_reply_use_case: FromDishka[AddReplyUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    payload: Annotated[Any, Body()] = None,
) -> dict[str, Any]:
    """Reply to a comment.

    Requires authentication.
    """
    user_id = require_user_id(jwt_service, credentials)
    added_reply = await add_reply_use_case.execute(
        AddReplyRequest(
            payload=payload,
            thread_id=thread_id,
            comment_id=comment_id,
            owner=user_id,
        )
    )
    return success({"addedReply": added_reply.model_dump(by_alias=True)})


@router.delete("/{thread_id}/comments/{comment_id}/replies/{reply_id}")
async def delete_reply(
    thread_id: str,
    comment_id: str,
    reply_id: str,
    delete_reply_use_case: FromDishka[DeleteReplyUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
) -> dict[str, Any]:
    """Soft-delete a reply.

    Only the reply owner can delete it.
    """
    user_id = require_user_id(jwt_service, credentials)
    await delete_reply_use_case.execute(
        DeleteReplyRequest(
            thread_id=thread_id,
            comment_id=comment_id,
            reply_id=reply_id,
            user_id=user_id,
        )
    )
    return success()
