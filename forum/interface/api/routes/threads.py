"""Thread routes."""

from typing import Annotated, Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Depends, status
from fastapi.security import HTTPAuthorizationCredentials

from forum.application.usecase.thread import (
    AddThreadRequest,
    AddThreadUseCase,
    GetThreadDetailRequest,
    GetThreadDetailUseCase,
)
from forum.domain.service import JWTService
from forum.interface.api.dependencies import bearer_scheme, require_user_id, success

router = APIRouter(prefix="/threads", tags=["threads"], route_class=DishkaRoute)


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_thread(
    add_thread_use_case: FromDishka[AddThreadUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    payload: Annotated[Any, Body()] = None,
) -> dict[str, Any]:
    """Start a new thread.

    Requires authentication. Any ``owner`` in the body is replaced by the
    authenticated user.
    """
    user_id = require_user_id(jwt_service, credentials)
    added_thread = await add_thread_use_case.execute(
        AddThreadRequest(payload=payload, owner=user_id)
    )
    return success({"addedThread": added_thread.model_dump(by_alias=True)})


@router.get("/{thread_id}")
async def get_thread_detail(
    thread_id: str,
    get_thread_detail_use_case: FromDishka[GetThreadDetailUseCase],
) -> dict[str, Any]:
    """Get a thread with its comments, replies and like counts.

    Deleted comments and replies are listed with redacted content.
    """
    thread = await get_thread_detail_use_case.execute(
        GetThreadDetailRequest(thread_id=thread_id)
    )
    return success({"thread": thread.model_dump(by_alias=True, mode="json")})
