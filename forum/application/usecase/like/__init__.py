"""Like use cases."""

from .toggle_comment_like import (
    ToggleCommentLikeRequest,
    ToggleCommentLikeResponse,
    ToggleCommentLikeUseCase,
)

__all__ = [
    "ToggleCommentLikeRequest",
    "ToggleCommentLikeResponse",
    "ToggleCommentLikeUseCase",
]
